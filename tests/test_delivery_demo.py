import pytest

from designlab.delivery_demo import main


def test_demo_runs_to_completion(capsys):
    assert main(["--timeout", "0.2"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "P2P Delivery System"
    assert out.count("New Customer :") == 6
    assert "New Customer : akhil, akhil@example.com" in lines
    assert "New Driver : Nattu" in lines
    assert "New Driver : Bagha" in lines


def test_demo_assigns_two_and_cancels_one(capsys):
    main(["--timeout", "0.2"])
    out = capsys.readouterr().out
    assert out.count("Order Assigned :") == 2
    assert out.count("Order Cancelled:") == 1
    assert "driver:Nattu" in out
    assert "driver:Bagha" in out


def test_demo_rejects_bad_timeout():
    with pytest.raises(SystemExit):
        main(["--timeout", "soon"])