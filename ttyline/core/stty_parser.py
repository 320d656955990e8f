"""
Parsing of ``stty`` text output.

``stty -a`` formats properties differently depending on the platform::

    speed 9600 baud; 24 rows; 140 columns;
    speed 38400 baud; rows = 49; columns = 111; ypixels = 0; xpixels = 0;

Both layouts are handled by matching each clause on either side.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import PropertyNotFoundError

NOT_FOUND = -1

_CLAUSE_SEPARATORS = re.compile(r"[;\n]")


@dataclass
class PropertyResult:
    """Outcome of a best-effort property lookup."""
    name: str
    value: int = NOT_FOUND
    error: Optional[Exception] = None

    @property
    def found(self) -> bool:
        return self.error is None


def split_clauses(dump: str) -> List[str]:
    """Split a property dump into trimmed, non-empty clauses."""
    clauses = []
    for clause in _CLAUSE_SEPARATORS.split(dump):
        clause = clause.strip()
        if clause:
            clauses.append(clause)
    return clauses


def parse_property(dump: str, name: str) -> int:
    """
    Extract a numeric property from ``stty -a`` output.

    The first clause that starts or ends with ``name`` decides the result.

    Args:
        dump: Raw ``stty -a`` output
        name: Property name, e.g. "rows" or "columns"

    Returns:
        The property value

    Raises:
        PropertyNotFoundError: No clause mentions the property
        ValueError: The matching clause has no parseable number
    """
    for clause in split_clauses(dump):
        if clause.startswith(name):
            # "rows = 49" or "rows 49"
            index = clause.rfind(" ")
        elif clause.endswith(name):
            # "24 rows"
            index = clause.find(" ")
        else:
            continue

        if index == -1:
            raise ValueError(f"No value in stty clause: {clause!r}")
        if clause.startswith(name):
            return int(clause[index + 1:])
        return int(clause[:index])

    raise PropertyNotFoundError(f"No '{name}' property in stty output")


def find_property(dump: str, name: str) -> PropertyResult:
    """Like parse_property, but reports failures in the result instead of raising."""
    try:
        return PropertyResult(name=name, value=parse_property(dump, name))
    except (LookupError, ValueError) as e:
        return PropertyResult(name=name, error=e)


def is_valid_config(text: str) -> bool:
    """Return True if text looks like an ``stty -g`` settings dump."""
    return bool(text) and ("=" in text or ":" in text)
