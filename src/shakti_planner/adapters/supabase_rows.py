"""Helpers for reading typed values out of Supabase rows."""

import math

from shakti_planner.errors import StoredDataError


def row_number(table: str, row: dict[str, object], column: str) -> int | float:
    """Return a numeric column, keeping ints as ints."""
    value = row.get(column)
    if isinstance(value, bool):
        raise StoredDataError(table, row.get("id"), column, value)
    if isinstance(value, int | float):
        number: int | float = value
    else:
        try:
            number = float(str(value))
        except ValueError as exc:
            raise StoredDataError(table, row.get("id"), column, value) from exc
    if not math.isfinite(number):
        raise StoredDataError(table, row.get("id"), column, value)
    return number
