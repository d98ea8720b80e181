import logging

from mdp_grid.utils.logger_manager import LoggerManager, LOGGER_NAME


def _read(path):
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()
    return path.read_text(encoding="utf-8")


def test_newest_manager_owns_the_shared_logger(tmp_path):
    first_dir, second_dir = tmp_path / "first", tmp_path / "second"
    first = LoggerManager(str(first_dir), use_tensorboard=False)
    first.log("from first")
    second = LoggerManager(str(second_dir), use_tensorboard=False)
    first.log("first after second")

    assert first.logger is second.logger
    assert len(second.logger.handlers) == 2
    assert "from first" in (first_dir / "run.log").read_text(encoding="utf-8")
    assert "first after second" not in (first_dir / "run.log").read_text(encoding="utf-8")
    assert "first after second" in _read(second_dir / "run.log")


def test_console_only_without_log_dir():
    manager = LoggerManager(None, use_tensorboard=True)
    assert manager.writer is None
    assert len(manager.logger.handlers) == 1
