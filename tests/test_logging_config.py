import logging

from ipnav.logging_config import configure_logging, get_logger, setup_logging


def test_setup_does_not_stack_handlers():
    setup_logging(level="INFO")
    logger = setup_logging(level="INFO")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_debug_flag(tmp_path):
    log_file = tmp_path / "logs" / "ipnav.log"
    configure_logging(debug=True, log_file=str(log_file))
    logger = logging.getLogger("ipnav")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    get_logger("ipnav.tests").debug("written to file")
    for handler in logger.handlers:
        handler.flush()
    assert "written to file" in log_file.read_text(encoding="utf-8")

    setup_logging(level="WARNING")


def test_file_logging_keeps_console_quiet(tmp_path):
    logger = setup_logging(level="WARNING", log_file=str(tmp_path / "a.log"), enable_file=True)
    console, file_handler = logger.handlers
    assert console.level == logging.WARNING
    assert file_handler.level == logging.DEBUG
    setup_logging(level="WARNING")
