import logging

import pytest

from excel_creator.logger import LOG_FILE_ENV, get_logger, setup_logging


@pytest.fixture
def fresh_root_logger():
    root = logging.getLogger("excel_creator")
    saved = root.handlers[:]
    root.handlers.clear()
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = saved


class TestSetupLogging:
    """setup_logging 함수 테스트."""

    def test_루트_로거_반환(self):
        root = setup_logging()
        assert root.name == "excel_creator"

    def test_로그_레벨_설정(self):
        root = setup_logging(level=logging.DEBUG)
        assert root.level == logging.DEBUG

    def test_환경변수_없음__콘솔_핸들러만(self, fresh_root_logger, monkeypatch):
        monkeypatch.delenv(LOG_FILE_ENV, raising=False)
        root = setup_logging()
        handler_types = [type(h) for h in root.handlers]
        assert handler_types == [logging.StreamHandler]

    def test_환경변수_설정__파일_핸들러_추가(self, fresh_root_logger, monkeypatch, tmp_path):
        log_file = tmp_path / "creator.log"
        monkeypatch.setenv(LOG_FILE_ENV, str(log_file))
        root = setup_logging()
        handler_types = [type(h) for h in root.handlers]
        assert logging.FileHandler in handler_types
        get_logger("test").info("파일 기록")
        for handler in root.handlers:
            handler.flush()
        assert "파일 기록" in log_file.read_text(encoding="utf-8")

    def test_중복_호출_시_핸들러_추가되지_않음(self):
        root = setup_logging()
        handler_count = len(root.handlers)
        setup_logging()
        assert len(root.handlers) == handler_count


class TestGetLogger:
    """get_logger 함수 테스트."""

    def test_모듈별_로거_이름(self):
        logger = get_logger("creator")
        assert logger.name == "excel_creator.creator"

    def test_다른_모듈_로거_이름(self):
        logger = get_logger("xlsx_io")
        assert logger.name == "excel_creator.xlsx_io"

    def test_로거_로그_기록(self, caplog):
        setup_logging()
        logger = get_logger("test")
        with caplog.at_level(logging.INFO, logger="excel_creator.test"):
            logger.info("테스트 메시지")
        assert "테스트 메시지" in caplog.text
