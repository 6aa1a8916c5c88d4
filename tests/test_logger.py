from loguru import logger

from reftoken.logger import get_logger, setup_logger


def test_setup_logger_writes_named_records(tmp_path) -> None:
    log_file = tmp_path / "reftoken.log"
    setup_logger(log_file=str(log_file), log_level="DEBUG")

    get_logger("scanner").debug("scanned 3 spans")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "scanner:" in content
    assert "scanned 3 spans" in content


def test_level_filters_records(tmp_path) -> None:
    log_file = tmp_path / "reftoken.log"
    setup_logger(log_file=str(log_file), log_level="WARNING")

    get_logger("engine").info("not written")
    get_logger("engine").warning("written")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "not written" not in content
    assert "written" in content
