from pin_input.config.settings import settings
from pin_input.utils.logger import logger, setup_logging


def test_file_sink_is_opt_in(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    try:
        setup_logging(level="debug", to_file=True)
        logger.debug("slot count changed")
        logger.complete()

        log_file = tmp_path / "logs" / settings.LOG_FILE
        assert log_file.exists()
        content = log_file.read_text()
        assert "slot count changed" in content
        assert "DEBUG" in content
    finally:
        setup_logging()


def test_no_file_sink_by_default(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    try:
        setup_logging(to_file=False)
        logger.info("field disposed")
        assert not (tmp_path / "logs").exists()
    finally:
        setup_logging()
