import logging
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
LOG_FILE_ENV = "EXCEL_CREATOR_LOG_FILE"


def setup_logging(level=logging.INFO):
    """로깅 설정을 초기화한다. 콘솔 핸들러와, 환경변수가 있으면 파일 핸들러를 등록한다."""
    root_logger = logging.getLogger("excel_creator")
    root_logger.setLevel(level)

    if root_logger.handlers:
        return root_logger

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get(LOG_FILE_ENV)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name):
    """모듈별 로거를 반환한다."""
    return logging.getLogger(f"excel_creator.{name}")
