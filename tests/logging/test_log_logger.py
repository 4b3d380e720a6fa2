"""Tests for the buffered logger implementation."""

import pytest

from benchcmp.logging import BaseLogHandler, Logger, LoggerConfig, LogLevel


class RecordingHandler(BaseLogHandler):
    """Handler that records payloads for assertions."""

    def __init__(self, should_raise: bool = False) -> None:
        super().__init__()
        self.should_raise = should_raise
        self.invocations: list[tuple[str, ...]] = []
        self.closed = False

    def push(self, buffer: list[str]) -> None:
        if self.should_raise:
            raise RuntimeError("intentional handler failure")
        self.invocations.append(tuple(buffer))

    def close(self) -> None:
        self.closed = True


def _messages(handler: RecordingHandler) -> str:
    return "\n".join(entry for call in handler.invocations for entry in call)


class TestLoggerLoggingBehavior:
    """Test core logging behaviour and level filtering."""

    def test_info_message_flushed(self) -> None:
        handler = RecordingHandler()
        logger = Logger(name="logger-basic", handlers=[handler])
        logger.info("hello world")
        assert not handler.invocations

        logger.flush()
        assert "hello world" in _messages(handler)
        assert "logger-basic" in _messages(handler)

    def test_level_filter_and_runtime_change(self) -> None:
        handler = RecordingHandler()
        logger = Logger(handlers=[handler])
        logger.debug("filtered debug")

        logger.set_log_level(LogLevel.DEBUG)
        logger.debug("visible debug")
        logger.flush()

        assert "visible debug" in _messages(handler)
        assert "filtered debug" not in _messages(handler)

    def test_trace_level_logging(self) -> None:
        handler = RecordingHandler()
        logger = Logger(config=LoggerConfig(base_level=LogLevel.TRACE), handlers=[handler])
        logger.trace("trace me")
        logger.flush()
        assert "[TRACE] " in _messages(handler)

    def test_buffer_full_triggers_push(self) -> None:
        handler = RecordingHandler()
        logger = Logger(config=LoggerConfig(buffer_size=2), handlers=[handler])
        logger.info("one")
        assert not handler.invocations
        logger.info("two")
        assert len(handler.invocations) == 1
        assert len(handler.invocations[0]) == 2

    def test_error_pushed_immediately(self) -> None:
        handler = RecordingHandler()
        logger = Logger(handlers=[handler])
        logger.error("boom")
        assert "[ERROR]" in _messages(handler)

    def test_handler_error_propagates(self) -> None:
        logger = Logger(handlers=[RecordingHandler(should_raise=True)])
        with pytest.raises(RuntimeError):
            logger.error("boom")


class TestLoggerLifecycle:
    """Construction and shutdown."""

    def test_invalid_handler_type(self) -> None:
        with pytest.raises(TypeError):
            Logger(handlers=[object()])

    def test_shutdown_flushes_and_closes(self) -> None:
        handler = RecordingHandler()
        logger = Logger(handlers=[handler])
        logger.warning("pending")
        logger.shutdown()

        assert "pending" in _messages(handler)
        assert handler.closed
        assert not logger.is_running()

        logger.error("after shutdown")
        assert "after shutdown" not in _messages(handler)

    def test_accessors(self) -> None:
        config = LoggerConfig()
        logger = Logger(name="named", config=config)
        assert logger.get_name() == "named"
        assert logger.get_config() is config


class TestLoggerStdoutBehavior:
    """Test stdout mirroring behaviour of the logger."""

    def test_stdout_enabled_prints(self, capsys: pytest.CaptureFixture) -> None:
        logger = Logger(config=LoggerConfig(do_stdout=True))
        logger.info("stdout message")
        logger.flush()
        assert "stdout message" in capsys.readouterr().out

    def test_stdout_disabled(self, capsys: pytest.CaptureFixture) -> None:
        logger = Logger(config=LoggerConfig(do_stdout=False))
        logger.info("quiet message")
        logger.flush()
        assert "quiet message" not in capsys.readouterr().out
