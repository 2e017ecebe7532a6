from collections.abc import Callable, Sequence
from typing import Any

from roommates.core.errors import RowMappingError


def column_reader(cursor: Any) -> Callable[[Sequence[Any], str], Any]:
    """Build a lookup that reads a column from a row by name.

    Column names are matched case-insensitively, since PostgreSQL folds
    unquoted identifiers to lowercase.
    """
    names = [d[0] for d in cursor.description or ()]
    ordinals = {name.lower(): i for i, name in enumerate(names)}

    def read(row: Sequence[Any], column: str) -> Any:
        try:
            return row[ordinals[column.lower()]]
        except KeyError:
            raise RowMappingError(column, names) from None

    return read
