"""
Tolerant normalization of loosely-typed product fields.

Nothing in here raises on bad input: malformed values degrade to an empty or
best-effort canonical value so that old rows and sloppy payloads still render.
"""
import json
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, List, Optional, Sequence, Union

Number = Union[int, float]

_SIZE_CONTAINERS = (list, tuple, set, frozenset)


def read_field(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from either a mapping or an ORM/attribute object."""
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def to_number(value: Any) -> Optional[float]:
    """
    Coerce an int/float/Decimal or a numeric string to a finite float.
    Returns None for anything else (booleans, blanks, NaN, inf, objects).
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float, Decimal)):
            n = float(value)
        elif isinstance(value, str):
            s = value.strip()
            if not s:
                return None
            n = float(s)
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return n if math.isfinite(n) else None


def _as_label(n: float) -> Number:
    return int(n) if n.is_integer() else n


def normalize_sizes(value: Any) -> List[Number]:
    """Deduplicated, ascending numeric sizes; non-sequences give []."""
    if not isinstance(value, _SIZE_CONTAINERS):
        return []
    nums = {n for n in (to_number(v) for v in value) if n is not None}
    return [_as_label(n) for n in sorted(nums)]


def toggle_size(selected: Any, size: Any) -> List[Number]:
    current = normalize_sizes(selected)
    n = to_number(size)
    if n is None:
        return current
    if n in current:
        return [s for s in current if s != n]
    return normalize_sizes(current + [n])


def normalize_images(value: Any) -> List[str]:
    # order matters: index 0 is the primary image
    if not isinstance(value, (list, tuple)):
        return []
    return [v for v in value if isinstance(v, str)]


def remove_image(images: Sequence[str], index: int) -> List[str]:
    items = normalize_images(images)
    if not 0 <= index < len(items):
        return items
    return items[:index] + items[index + 1 :]


def decode_stored_list(raw: Any) -> list:
    """
    Stored images/sizes arrive as JSON text, possibly blank or garbage when
    written by older code, or as an already decoded list. Anything
    unreadable becomes [].
    """
    if isinstance(raw, (list, tuple)):
        return list(raw)
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        try:
            decoded = json.loads(raw)
        except ValueError:
            return []
        return decoded if isinstance(decoded, list) else []
    return []
