"""Conversion of annotation results to JSON-serializable primitives."""

from dataclasses import asdict, is_dataclass
from enum import Enum, IntFlag
from typing import Any


def serialize_to_primitives(data: Any) -> Any:
    """Convert complex Python types to JSON-serializable primitives.

    Handles:
    - Primitives (str, int, float, bool, None): returned as-is
    - IntFlag: converted to the list of set member names
    - Enum: converted to value
    - dataclass: converted to dict via asdict()
    - dict: recursively serialize keys and values
    - list/tuple: recursively serialize items

    Examples:
        >>> from irsource.types.core import LineFlag
        >>> serialize_to_primitives(LineFlag.DEAD | LineFlag.LIVE)
        ['DEAD', 'LIVE']
    """
    if data is None:
        return None

    if isinstance(data, IntFlag):
        return [member.name for member in type(data) if member in data]

    if isinstance(data, Enum):
        return data.value

    if isinstance(data, (str, int, float, bool)):
        return data

    if is_dataclass(data) and not isinstance(data, type):
        return serialize_to_primitives(asdict(data))

    if isinstance(data, dict):
        return {str(k): serialize_to_primitives(v) for k, v in data.items()}

    if isinstance(data, (list, tuple)):
        return [serialize_to_primitives(item) for item in data]

    return str(data)
