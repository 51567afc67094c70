import io

import pytest

from designlab.loggers import (
    ConsoleLogger,
    ConsoleLoggerFactory,
    DebugLogger,
    DebugLoggerFactory,
    ErrorLogger,
    ErrorLoggerFactory,
    InfoLogger,
    InfoLoggerFactory,
    Logger,
    LoggerFactory,
    main,
)


@pytest.mark.parametrize(
    "factory, logger_class, prefix",
    [
        (ConsoleLoggerFactory(), ConsoleLogger, "Console Log: "),
        (DebugLoggerFactory(), DebugLogger, "Debug Logger: "),
        (ErrorLoggerFactory(), ErrorLogger, "Error Logger: "),
        (InfoLoggerFactory(), InfoLogger, "Info Logger: "),
    ],
)
def test_factory_creates_logger_with_its_prefix(factory, logger_class, prefix, capsys):
    logger = factory.create_logger()
    assert type(logger) is logger_class
    line = logger.log("hello")
    assert line == prefix + "hello"
    assert capsys.readouterr().out == line + "\n"


def test_each_call_creates_a_new_logger(capsys):
    factory = InfoLoggerFactory()
    first = factory.create_logger()
    second = factory.create_logger()
    assert first is not second
    assert first.log("a") == "Info Logger: a"
    assert second.log("b") == "Info Logger: b"
    assert capsys.readouterr().out == "Info Logger: a\nInfo Logger: b\n"


def test_logger_writes_to_given_stream(capsys):
    stream = io.StringIO()
    line = DebugLogger(stream).log("x")
    assert stream.getvalue() == line + "\n"
    assert capsys.readouterr().out == ""


def test_abstract_classes_cannot_be_created():
    with pytest.raises(TypeError):
        Logger()
    with pytest.raises(TypeError):
        LoggerFactory()


def test_main_logs_with_all_four_loggers(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Factory Method Design Pattern..."
    assert lines[1] == "Console Log: application started on port"
    assert [line.split(":")[0] for line in lines[1:]] == [
        "Console Log",
        "Info Logger",
        "Debug Logger",
        "Error Logger",
    ]