from instasheets.tools.sheet.interface import Cursor, TableSink

__all__ = ["Cursor", "TableSink"]
