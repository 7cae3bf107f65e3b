from excel_creator.creator import ExcelCreator

__all__ = ["ExcelCreator"]
