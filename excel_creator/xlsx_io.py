"""XLSX 읽기/쓰기 객체. ExcelCreator.reader()/writer()가 이 클래스들을 돌려준다."""

import io
import zipfile

from openpyxl import load_workbook
from openpyxl.utils import column_index_from_string
from openpyxl.utils.units import DEFAULT_COLUMN_WIDTH

from excel_creator.logger import get_logger

logger = get_logger("xlsx_io")

_CONTENT_TYPES_PART = "[Content_Types].xml"
_AUTO_SIZE_PADDING = 2


def _as_source(source):
    """bytes는 BytesIO로 감싸고 경로/스트림은 그대로 돌려준다."""
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(source)
    return source


def _describe(target):
    if isinstance(target, str) or hasattr(target, "__fspath__"):
        return str(target)
    return "<stream>"


def _text_width(value):
    if value is None:
        return 0
    return max(len(line) for line in str(value).split("\n"))


def estimate_column_width(ws, column):
    """열에서 가장 긴 텍스트 길이로 너비를 추정한다. 값이 없으면 기본 너비.

    사용 범위 밖의 열은 읽지 않는다. iter_cols가 빈 셀을 만들어 시트 범위가 늘어난다.
    """
    idx = column_index_from_string(column)
    if idx > ws.max_column:
        return DEFAULT_COLUMN_WIDTH
    longest = 0
    for values in ws.iter_cols(min_col=idx, max_col=idx, max_row=ws.max_row, values_only=True):
        longest = max((_text_width(value) for value in values), default=0)
    if not longest:
        return DEFAULT_COLUMN_WIDTH
    return longest + _AUTO_SIZE_PADDING


def calculate_auto_sizes(workbook):
    """auto_size가 켜진 열마다 내용 기준 너비를 계산해 기록한다. auto_size 표시는 유지한다."""
    for ws in workbook.worksheets:
        dimensions = getattr(ws, "column_dimensions", None)
        if dimensions is None:
            continue
        for column, dim in list(dimensions.items()):
            if dim.auto_size:
                dim.width = estimate_column_width(ws, column)
                logger.debug("자동 너비 계산: %s!%s → %s", ws.title, column, dim.width)


class XlsxWriter:
    """워크북을 XLSX로 저장한다. 저장 대상(경로/스트림)은 호출자가 정한다."""

    def __init__(self, spreadsheet):
        self.spreadsheet = spreadsheet

    def save(self, target):
        calculate_auto_sizes(self.spreadsheet)
        self.spreadsheet.save(target)
        logger.info("XLSX 저장: %s", _describe(target))

    def to_bytes(self):
        buf = io.BytesIO()
        self.save(buf)
        return buf.getvalue()


class XlsxReader:
    """XLSX 파일을 워크북으로 읽는다.

    Attributes:
        read_data_only: True면 수식 대신 마지막으로 계산된 값을 읽는다.
        load_sheets_only: 남길 시트 제목 목록. None이면 전부 남긴다.
    """

    def __init__(self, read_data_only=False, load_sheets_only=None):
        self.read_data_only = read_data_only
        self.load_sheets_only = load_sheets_only

    def can_read(self, source):
        """XLSX 패키지(ZIP + [Content_Types].xml)로 보이는지 확인한다."""
        source = _as_source(source)
        position = source.tell() if hasattr(source, "tell") else None
        try:
            if not zipfile.is_zipfile(source):
                return False
            if position is not None:
                source.seek(position)
            with zipfile.ZipFile(source) as zf:
                return _CONTENT_TYPES_PART in zf.namelist()
        finally:
            if position is not None:
                source.seek(position)

    def load(self, source):
        wb = load_workbook(_as_source(source), data_only=self.read_data_only)
        if self.load_sheets_only is not None:
            keep = set(self.load_sheets_only)
            for title in list(wb.sheetnames):
                if title not in keep:
                    wb.remove(wb[title])
            if wb.sheetnames:
                wb.active = 0
        logger.info("XLSX 로드: %s (시트 %d개)", _describe(source), len(wb.sheetnames))
        return wb
