"""스타일 디스크립터(dict)를 openpyxl 스타일 객체로 변환하는 모듈.

디스크립터 예:
    {
        "font": {"name": "Arial", "size": 12, "bold": True, "color": "FF0000"},
        "fill": {"fill_type": "solid", "start_color": "FFFF00"},
        "border": {"all": {"style": "thin"}, "bottom": {"style": "medium"}},
        "alignment": {"horizontal": "center", "vertical": "center"},
        "protection": {"locked": False},
        "number_format": "0.00",
    }

각 항목 값은 dict 대신 openpyxl 객체(Font, PatternFill 등)를 그대로 넘겨도 된다.
"""

from openpyxl.styles import Alignment, Border, Font, GradientFill, PatternFill, Protection, Side

_BORDER_EDGES = ("left", "right", "top", "bottom")
_GRADIENT_TYPES = ("linear", "path")
_BASE_STYLE = "Normal"


def build_font(value):
    if isinstance(value, Font):
        return value
    return Font(**value)


def build_fill(value):
    """dict는 PatternFill로, fill_type이 linear/path면 GradientFill로 만든다."""
    if isinstance(value, (PatternFill, GradientFill)):
        return value
    params = dict(value)
    if params.get("fill_type") in _GRADIENT_TYPES:
        params["type"] = params.pop("fill_type")
        return GradientFill(**params)
    return PatternFill(**params)


def _build_side(value):
    if value is None or isinstance(value, Side):
        return value
    return Side(**value)


def build_border(value):
    """테두리 dict를 Border로 만든다. "all"은 네 변에 적용되고 개별 변 설정이 우선한다."""
    if isinstance(value, Border):
        return value
    params = dict(value)
    shared = params.pop("all", None)
    if shared is not None:
        for edge in _BORDER_EDGES:
            params.setdefault(edge, shared)
    for edge in _BORDER_EDGES + ("diagonal",):
        if edge in params:
            params[edge] = _build_side(params[edge])
    return Border(**params)


def build_alignment(value):
    if isinstance(value, Alignment):
        return value
    return Alignment(**value)


def build_protection(value):
    if isinstance(value, Protection):
        return value
    return Protection(**value)


_BUILDERS = {
    "font": build_font,
    "fill": build_fill,
    "border": build_border,
    "alignment": build_alignment,
    "protection": build_protection,
    "number_format": str,
}


class CellStyle:
    """한 셀에 통째로 적용할 스타일. 지정하지 않은 항목은 Normal 스타일 값을 쓴다."""

    def __init__(self, **aspects):
        self.aspects = aspects

    def apply_to(self, cell):
        cell.style = _BASE_STYLE
        for name, value in self.aspects.items():
            setattr(cell, name, value)

    def __repr__(self):
        return f"CellStyle({', '.join(sorted(self.aspects))})"


def build_cell_style(style):
    """디스크립터를 CellStyle로 변환한다. 알 수 없는 항목 이름은 무시한다."""
    aspects = {}
    for name, builder in _BUILDERS.items():
        if name in style and style[name] is not None:
            aspects[name] = builder(style[name])
    return CellStyle(**aspects)
