"""Vector formatters - CSV and JSON-like text renderings."""
from vecdump.formatters.vectors import format_value, write_csv, to_csv, to_json

__all__ = [
    "format_value",
    "write_csv",
    "to_csv",
    "to_json",
]
