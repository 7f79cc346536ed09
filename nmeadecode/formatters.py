"""JSON formatting utilities for decoded NMEA records."""

import dataclasses
import enum
import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from nmeadecode.nmea.accumulator import GSVAccumulator
from nmeadecode.nmea.types import GSVSatInfo, NMEARecord

__all__ = ["format_record", "format_satellites", "record_to_dict", "satellites_to_dict"]


def _to_json_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, GSVSatInfo):
        return dataclasses.asdict(value)
    if isinstance(value, tuple):
        return [_to_json_value(item) for item in value]
    return value


def record_to_dict(record: NMEARecord) -> dict[str, Any]:
    """Convert a record into a JSON-compatible dictionary.

    Timestamps become ISO 8601 strings. Enumerations are stored as their
    integer code next to a ``<field>_name`` entry holding the readable name.
    """
    message: dict[str, Any] = {"type": record.sentence_type}
    for field in dataclasses.fields(record):
        value = getattr(record, field.name)
        message[field.name] = _to_json_value(value)
        if isinstance(value, enum.Enum):
            message[f"{field.name}_name"] = str(value)
    return message


def format_record(record: NMEARecord) -> str:
    """Serialize a decoded record into a JSON string."""
    return json.dumps(record_to_dict(record))


def satellites_to_dict(
    satellites: Iterable[GSVSatInfo] | GSVAccumulator,
) -> dict[str, Any]:
    """Build the ``satellites`` message for a satellites-in-view list.

    An accumulator reports the total its sentences declared as ``in_view``;
    a plain list reports its own length.
    """
    if isinstance(satellites, GSVAccumulator):
        in_view = satellites.in_view
        entries = list(satellites.satellites)
    else:
        entries = list(satellites)
        in_view = len(entries)

    return {
        "type": "satellites",
        "in_view": in_view,
        "satellites": [dataclasses.asdict(entry) for entry in entries],
    }


def format_satellites(
    satellites: Iterable[GSVSatInfo] | GSVAccumulator,
) -> str:
    """Serialize a satellites-in-view list into a JSON string."""
    return json.dumps(satellites_to_dict(satellites))
