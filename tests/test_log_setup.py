import logging

import pytest

from uprl.log_setup import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_log_file_created_and_written(tmp_path, restore_root_logger):
    log_file = configure_logging(tmp_path)
    logging.getLogger("uprl.test").info("hello from the test")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / ".uprl" / "logs" / "uprl.log"
    assert "hello from the test" in log_file.read_text(encoding="utf-8")
