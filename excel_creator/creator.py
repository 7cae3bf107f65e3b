"""openpyxl을 한 객체로 다루기 위한 얇은 래퍼.

워크북 생성, XLSX 읽기/쓰기 객체 생성, 자주 쓰는 스타일·행/열 크기 설정을
한곳에 모았다. 입력 검증은 하지 않으며 openpyxl이 던지는 예외를 그대로 전달한다.
"""

from collections.abc import Iterable
from copy import copy

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Color, Font, PatternFill
from openpyxl.utils.cell import range_boundaries
from openpyxl.utils.indexed_list import IndexedList

from excel_creator.logger import get_logger
from excel_creator.style_builder import build_cell_style
from excel_creator.xlsx_io import XlsxReader, XlsxWriter

logger = get_logger("creator")

_NORMAL_STYLE = "Normal"
_ROW_RANGE_SEPARATOR = "-"


class ExcelCreator:
    """워크북 하나를 소유하고 활성 시트에 대한 설정 호출을 openpyxl로 넘긴다.

    시트 단위 메서드는 모두 ``sheet`` 키워드(워크시트 객체 또는 시트 제목)를 받는다.
    생략하면 호출 시점의 활성 시트가 대상이다.
    """

    def __init__(self):
        self.spreadsheet = Workbook()
        self.alignment = Alignment()
        self.border = Border()
        self.color = Color()
        self.fill = PatternFill()
        self.font = Font()
        logger.debug("새 워크북 생성")

    def _sheet(self, sheet=None):
        if sheet is None:
            return self.spreadsheet.active
        if isinstance(sheet, str):
            return self.spreadsheet[sheet]
        return sheet

    # --- 읽기/쓰기 ---

    def writer(self, spreadsheet):
        return XlsxWriter(spreadsheet)

    def reader(self, spreadsheet=None):
        """XLSX 리더를 만든다. 인자는 호환을 위해 받기만 하고 쓰지 않는다."""
        return XlsxReader()

    # --- 내용/스타일 ---

    def apply_style(self, style, cell_range, sheet=None):
        """디스크립터로 만든 스타일을 범위의 모든 셀에 통째로 복제한다.

        지정하지 않은 항목은 Normal 스타일 값으로 돌아간다.
        "A:A"처럼 행 범위가 없는 열 전체 범위는 현재 사용 중인 행(1..max_row)까지만
        적용된다. 이후에 채운 셀에는 적용되지 않는다.
        """
        ws = self._sheet(sheet)
        cell_style = build_cell_style(style)
        min_col, min_row, max_col, max_row = range_boundaries(cell_range)
        for row in ws.iter_rows(min_row=min_row, max_row=max_row, min_col=min_col, max_col=max_col):
            for cell in row:
                cell_style.apply_to(cell)
        logger.debug("스타일 적용: %s!%s %r", ws.title, cell_range, cell_style)

    def fill_cell(self, value, sheet=None):
        """2차원 배열을 A1부터 채운다. 1차원이면 한 행으로 보고, None 값은 건너뛴다."""
        ws = self._sheet(sheet)
        rows = list(value)
        if rows and (not isinstance(rows[0], Iterable) or isinstance(rows[0], (str, bytes))):
            rows = [rows]
        for row_idx, row in enumerate(rows, start=1):
            for col_idx, cell_value in enumerate(row, start=1):
                if cell_value is None:
                    continue
                ws.cell(row=row_idx, column=col_idx, value=cell_value)
        logger.debug("셀 채우기: %s (%d행)", ws.title, len(rows))

    # --- 열 너비 ---

    def set_column_width(self, dimension, width=None, sheet=None):
        """열 너비를 고정한다. width가 None이면 내용 기준 자동 너비로 둔다."""
        column = self._sheet(sheet).column_dimensions[dimension]
        if width is None:
            column.auto_size = True
            column.width = 0
        else:
            column.auto_size = False
            column.width = width

    def set_default_column_width(self, width, sheet=None):
        self._sheet(sheet).sheet_format.defaultColWidth = width

    def set_multiple_columns_width(self, dimensions=(), width=None, sheet=None):
        for dimension in dimensions:
            self.set_column_width(dimension, width, sheet=sheet)

    # --- 행 높이 ---

    def set_row_height(self, dimension, height, sheet=None):
        self._sheet(sheet).row_dimensions[dimension].height = height

    def set_default_row_height(self, height, sheet=None):
        sheet_format = self._sheet(sheet).sheet_format
        sheet_format.defaultRowHeight = height
        sheet_format.customHeight = True

    def set_multiple_rows_height(self, dimension_range, height, sheet=None):
        """'시작-끝' 형식의 행 범위(양 끝 포함)에 같은 높이를 준다. 시작 > 끝이면 아무것도 안 한다."""
        bounds = dimension_range.split(_ROW_RANGE_SEPARATOR)
        start, end = int(bounds[0]), int(bounds[1])
        for row in range(start, end + 1):
            self.set_row_height(row, height, sheet=sheet)

    # --- 워크북 기본값 ---

    def set_default_font(self, font, size):
        """셀 서식이 없는 모든 셀에 적용되는 워크북 기본 폰트를 바꾼다."""
        wb = self.spreadsheet
        default = copy(wb._fonts[0])
        default.name = font
        default.size = size
        default.scheme = None  # 테마 폰트 지정이 남아 있으면 Excel이 이름을 무시한다
        wb._fonts = IndexedList([default] + list(wb._fonts)[1:])
        wb._named_styles[_NORMAL_STYLE].font = default
        logger.debug("기본 폰트 설정: %s %s", font, size)

    def apply_defaults(self, config, sheet=None):
        """load_creator_config() 결과를 기본값 설정 메서드들로 적용한다."""
        font = config.get("default_font")
        if font:
            self.set_default_font(font["name"], font["size"])
        if config.get("default_column_width") is not None:
            self.set_default_column_width(config["default_column_width"], sheet=sheet)
        if config.get("default_row_height") is not None:
            self.set_default_row_height(config["default_row_height"], sheet=sheet)
