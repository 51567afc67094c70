import io

import pytest

from designlab.notifications import NotificationMessage, NotificationService


def test_get_instance_is_shared():
    instance = NotificationService.get_instance()
    assert isinstance(instance, NotificationService)
    assert NotificationService.get_instance() is instance


@pytest.mark.parametrize(
    "kind, expected",
    [
        (NotificationMessage.ADD_NEW_CUSTOMER, "New Customer : x"),
        (NotificationMessage.ORDER_CANCELLED, "Order Cancelled: x"),
        (NotificationMessage.LIST_DRIVERS, "Drivers : x"),
    ],
)
def test_message_texts_fixed_by_source(kind, expected):
    stream = io.StringIO()
    service = NotificationService(stream)
    assert service.notify(kind, "x") == expected
    assert stream.getvalue() == expected + "\n"


def test_picked_up_has_no_text():
    stream = io.StringIO()
    service = NotificationService(stream)
    with pytest.raises(KeyError):
        service.notify(NotificationMessage.ORDER_PICKED_UP, "order1")
    assert stream.getvalue() == ""


def test_notify_kind_prints_text_and_params(capsys):
    service = NotificationService()
    line = service.notify(NotificationMessage.ADD_NEW_DRIVER, "Nattu")
    assert line == "New Driver : Nattu"
    assert capsys.readouterr().out == "New Driver : Nattu\n"


def test_notify_plain_string(capsys):
    service = NotificationService()
    service.notify("hello there")
    assert capsys.readouterr().out == "hello there\n"


def test_notify_to_given_stream():
    stream = io.StringIO()
    service = NotificationService(stream)
    service.notify(NotificationMessage.ORDER_DELIVERED, "order1")
    assert stream.getvalue() == "Order delivered : order1\n"


def test_notify_kind_without_text_raises():
    service = NotificationService(io.StringIO())
    with pytest.raises(KeyError):
        service.notify(NotificationMessage.ORDER_PICKED_UP, "order1")


def test_notify_kind_without_params_raises():
    service = NotificationService(io.StringIO())
    with pytest.raises(TypeError):
        service.notify(NotificationMessage.NEW_RATING)


def test_plain_message_with_params_raises():
    service = NotificationService(io.StringIO())
    with pytest.raises(TypeError):
        service.notify("text", "extra")