from pathlib import Path

from loguru import logger

from utils.logging_config import configure_logging


def test_configure_logging_writes_to_logs_dir(tmp_path: Path) -> None:
    logs_dir = tmp_path / "logs"
    try:
        log_file = configure_logging(logs_dir, level="DEBUG")
        logger.info("hello from the match viewer")
        logger.complete()

        assert log_file is not None
        assert log_file.parent == logs_dir
        assert log_file.name.startswith("match_viewer_")
        assert "hello from the match viewer" in log_file.read_text(encoding="utf-8")
    finally:
        logger.remove()
