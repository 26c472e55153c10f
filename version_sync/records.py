"""Reading and writing JSON configuration records.

Records are plain ``dict`` objects so that key order survives a round trip
through :func:`load_record` and :func:`write_record`. Output mirrors
``JSON.stringify(record, null, indent)``: no ASCII escaping and no trailing
newline. Lone surrogates are written as ``\\uXXXX`` escapes so the output
is always valid UTF-8.
"""

from __future__ import annotations

import json
import logging
import math
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from version_sync.errors import ParseError, SchemaError, StorageError

logger = logging.getLogger(__name__)

Record = dict[str, Any]

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


class SourceRecord(BaseModel):
    """Schema for the record that supplies the authoritative version."""

    model_config = ConfigDict(extra="allow")

    version: StrictStr


def read_text(path: Path) -> str:
    """Return the UTF-8 contents of ``path``.

    Raises:
        StorageError: If the file is missing, unreadable or not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise StorageError(f"cannot decode file as UTF-8 ({exc.reason})", path) from exc
    except OSError as exc:
        raise StorageError(f"cannot read file ({exc.strerror or exc})", path) from exc


def load_record(path: Path) -> Record:
    """Load a JSON object from ``path``.

    Args:
        path: File holding a single JSON object.

    Returns:
        The decoded object with its original key order.

    Raises:
        StorageError: If the file cannot be read.
        ParseError: If the contents are not valid JSON.
        SchemaError: If the document is valid JSON but not an object.
    """
    text = read_text(path)

    def _reject_constant(name: str) -> None:
        raise ParseError(f"invalid JSON: {name} is not a valid JSON value", path)

    def _parse_float(literal: str) -> float:
        value = float(literal)
        if math.isinf(value):
            raise ParseError(f"invalid JSON: number {literal} is out of range", path)
        return value

    try:
        data = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}", path
        ) from exc

    if not isinstance(data, dict):
        raise SchemaError(f"expected a JSON object, got {type(data).__name__}", path)

    logger.debug("Loaded %d fields from %s", len(data), path)
    return data


def load_source_version(path: Path) -> str:
    """Return the ``version`` string declared by the source record at ``path``.

    Raises:
        SchemaError: If ``version`` is missing or is not a string.
    """
    data = load_record(path)
    try:
        source = SourceRecord.model_validate(data)
    except ValidationError as exc:
        error = exc.errors()[0]
        if error["type"] == "missing":
            message = "missing required field 'version'"
        else:
            message = f"field 'version' must be a string, got {type(data['version']).__name__}"
        raise SchemaError(message, path) from exc
    return source.version


def serialize_record(record: Record, indent: int = 2) -> str:
    """Serialize ``record`` with stable key order and fixed indentation.

    Raises:
        ValueError: If the record holds ``NaN`` or an infinite float.
    """
    text = json.dumps(record, indent=indent, ensure_ascii=False, allow_nan=False)
    return _LONE_SURROGATE.sub(lambda match: f"\\u{ord(match.group()):04x}", text)


def write_record(path: Path, record: Record, indent: int = 2) -> None:
    """Overwrite ``path`` with the serialized ``record``.

    The write goes straight to ``path``; a failure part way through leaves
    whatever the operating system wrote.

    Raises:
        StorageError: If the file cannot be written.
    """
    payload = serialize_record(record, indent=indent).encode("utf-8")
    try:
        path.write_bytes(payload)
    except OSError as exc:
        raise StorageError(f"cannot write file ({exc.strerror or exc})", path) from exc
    logger.debug("Wrote %d bytes to %s", len(payload), path)
