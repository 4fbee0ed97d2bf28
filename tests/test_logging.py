import logging

import pytest

from cyto_profile.core.logging import setup_analysis_logger


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Keep pytest's capture handlers intact across logger setup calls."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def test_setup_analysis_logger_writes_file(tmp_path):
    log_path = setup_analysis_logger(str(tmp_path), run_name="panel01", log_level=logging.DEBUG)
    assert log_path == str(tmp_path / "panel01_analysis.log")

    logging.getLogger("cyto_profile.test").debug("debug message for file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = (tmp_path / "panel01_analysis.log").read_text()
    assert "Logger configured. Level: DEBUG" in content
    assert "debug message for file" in content


def test_setup_analysis_logger_console_only():
    assert setup_analysis_logger() is None
    root_logger = logging.getLogger()
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], logging.StreamHandler)
    assert root_logger.level == logging.INFO


def test_setup_analysis_logger_replaces_handlers(tmp_path):
    setup_analysis_logger(str(tmp_path), run_name="first")
    setup_analysis_logger(str(tmp_path), run_name="second")
    assert len(logging.getLogger().handlers) == 2


def test_setup_analysis_logger_invalid_inputs(tmp_path):
    assert setup_analysis_logger(str(tmp_path / "does_not_exist")) is None
    assert setup_analysis_logger(str(tmp_path), run_name="") is None


def test_setup_analysis_logger_is_exported():
    import cyto_profile

    assert cyto_profile.setup_analysis_logger is setup_analysis_logger
    assert 'setup_analysis_logger' in cyto_profile.__all__
