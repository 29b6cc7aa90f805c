import logging

import pytest

from rxserver.core.config import LoggingConfig
from rxserver.core.errors import LoggingError
from rxserver.core.log_setup import init_logging


@pytest.fixture(autouse=True)
def restore_root():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    target = logging.getLogger("rxserver.core")
    saved_target_level = target.level
    yield root
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
    target.setLevel(saved_target_level)


def _new_handlers(root, before):
    return [h for h in root.handlers if h not in before]


def _flush(root):
    for handler in root.handlers:
        handler.flush()


def test_defaults_use_info(restore_root, capfd):
    before = list(restore_root.handlers)
    init_logging(None)
    _flush(restore_root)
    err = capfd.readouterr().err
    assert "Logging initialized with level: info" in err
    assert restore_root.level == logging.INFO
    assert len(_new_handlers(restore_root, before)) == 1


def test_level_from_config(restore_root, tmp_path):
    log_file = tmp_path / "debug.log"
    init_logging(LoggingConfig(level="debug", colored=False, file=str(log_file)))
    logging.getLogger("rxserver.probe").debug("probe-debug")
    _flush(restore_root)
    assert "probe-debug" in log_file.read_text()
    assert restore_root.level == logging.DEBUG


def test_invalid_level_falls_back_to_info(restore_root, tmp_path):
    log_file = tmp_path / "fallback.log"
    init_logging(LoggingConfig(level="bogus", file=str(log_file)))
    probe = logging.getLogger("rxserver.probe")
    probe.debug("hidden-debug")
    probe.info("shown-info")
    _flush(restore_root)
    text = log_file.read_text()
    assert "shown-info" in text
    assert "hidden-debug" not in text
    assert restore_root.level == logging.INFO


def test_target_directive(restore_root, tmp_path):
    log_file = tmp_path / "target.log"
    init_logging(LoggingConfig(level="warn,rxserver::core=debug", file=str(log_file)))
    logging.getLogger("rxserver.core").debug("core-debug")
    logging.getLogger("rxserver.other").info("other-info")
    _flush(restore_root)
    text = log_file.read_text()
    assert "core-debug" in text
    assert "other-info" not in text
    assert restore_root.level == logging.WARNING
    assert logging.getLogger("rxserver.core").level == logging.DEBUG


def test_reinit_replaces_handlers(restore_root, tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    before = list(restore_root.handlers)
    init_logging(LoggingConfig(file=str(first)))
    init_logging(LoggingConfig(json=True, file=str(second)))
    logging.getLogger("rxserver.probe").info("after-reinit")
    _flush(restore_root)
    assert "after-reinit" in second.read_text()
    assert "after-reinit" not in first.read_text()
    assert len(_new_handlers(restore_root, before)) == 2


def test_file_output(restore_root, tmp_path):
    log_file = tmp_path / "server.log"
    before = list(restore_root.handlers)
    init_logging(LoggingConfig(file=str(log_file)))
    _flush(restore_root)
    assert len(_new_handlers(restore_root, before)) == 2
    assert "Logging initialized with level: info" in log_file.read_text()


def test_unopenable_file(tmp_path):
    with pytest.raises(LoggingError, match="Failed to open log file"):
        init_logging(LoggingConfig(file=str(tmp_path / "nodir" / "x.log")))