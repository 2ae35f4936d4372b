"""Tests for the logging module."""


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger_instance(self) -> None:
        from studiotheme.logger import get_logger

        logger = get_logger("test_module")
        assert logger is not None

    def test_logger_has_bind_context(self) -> None:
        from studiotheme.logger import get_logger

        logger = get_logger("test_module")
        assert hasattr(logger, "info")
        assert hasattr(logger, "debug")
        assert hasattr(logger, "warning")
        assert hasattr(logger, "error")


class TestConsoleLogging:
    """Tests for the stderr sink."""

    def test_returns_sink_id(self) -> None:
        from studiotheme.logger import disable_console_logging, enable_console_logging

        sink_id = enable_console_logging("ERROR")
        assert isinstance(sink_id, int)

        disable_console_logging()

    def test_writes_to_stderr(self, capsys) -> None:
        from studiotheme.logger import disable_console_logging, enable_console_logging, get_logger

        enable_console_logging("DEBUG")
        get_logger("test_module").warning("Test message for stderr")
        disable_console_logging()

        assert "Test message for stderr" in capsys.readouterr().err

    def test_replaces_previous_sink(self, capsys) -> None:
        from studiotheme.logger import disable_console_logging, enable_console_logging, get_logger

        enable_console_logging("DEBUG")
        enable_console_logging("DEBUG")
        get_logger("test_module").warning("Only once")
        disable_console_logging()

        assert capsys.readouterr().err.count("Only once") == 1

    def test_disable_is_idempotent(self) -> None:
        from studiotheme.logger import disable_console_logging

        disable_console_logging()
        disable_console_logging()
