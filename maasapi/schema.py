"""Schema checks and version-dispatched readers for API responses."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from maasapi.version import ZERO, Version

T = TypeVar("T")

_INT_RE = re.compile(r"^[+-]?\d+$")


class SchemaError(ValueError):
    """Raised when an API response does not have the expected shape."""


def _type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float64"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "[]interface {}"
    if isinstance(value, Mapping):
        return "map[string]interface {}"
    return type(value).__name__


def _describe(value: Any) -> str:
    if value is None:
        return "nothing"
    if isinstance(value, bool):
        shown = "true" if value else "false"
    elif isinstance(value, str):
        shown = json.dumps(value)
    else:
        shown = repr(value)
    return f"{_type_name(value)}({shown})"


def _error(expected: str, value: Any) -> SchemaError:
    return SchemaError(f"expected {expected}, got {_describe(value)}")


def check_list_of_maps(value: Any) -> list[dict[str, Any]]:
    """Check that the value is a list whose items are string-keyed maps."""
    if not isinstance(value, (list, tuple)):
        raise _error("list", value)
    result = []
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise SchemaError(f"[{index}]: expected map, got {_describe(item)}")
        for key in item:
            if not isinstance(key, str):
                raise SchemaError(f"[{index}]: expected string, got {_describe(key)}")
        result.append(dict(item))
    return result


def check_fields(
    source: Mapping[str, Any], fields: Mapping[str, Callable[[Any], Any]]
) -> dict[str, Any]:
    """Coerce each named field with its checker; missing fields are checked as None."""
    result = {}
    for name, checker in fields.items():
        try:
            result[name] = checker(source.get(name))
        except SchemaError as err:
            raise SchemaError(f"{name}: {err}") from err
    return result


def as_string(value: Any) -> str:
    """Accept a string."""
    if not isinstance(value, str):
        raise _error("string", value)
    return value


def as_optional_string(value: Any) -> str | None:
    """Accept a string or None."""
    if value is None or isinstance(value, str):
        return value
    raise _error("string or nothing", value)


def force_int(value: Any) -> int:
    """Accept an integer, a finite number (truncated) or an integer string."""
    if isinstance(value, bool):
        raise _error("number", value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, str) and _INT_RE.match(value):
        return int(value)
    raise _error("number", value)


def as_bool(value: Any) -> bool:
    """Accept a boolean."""
    if not isinstance(value, bool):
        raise _error("bool", value)
    return value


def select_reader(
    readers: Mapping[Version, Callable[[dict[str, Any]], T]],
    controller_version: Version,
    kind: str,
) -> Callable[[dict[str, Any]], T]:
    """Pick the reader for the newest version not newer than the controller's."""
    candidates = [v for v in readers if ZERO < v <= controller_version]
    if not candidates:
        raise SchemaError(f"no {kind} read func for version {controller_version}")
    return readers[max(candidates)]


def read_list(
    source_list: list[Any], read_func: Callable[[dict[str, Any]], T], kind: str
) -> list[T]:
    """Apply the reader to each map in the list, annotating errors with the index."""
    result = []
    for index, value in enumerate(source_list):
        if not isinstance(value, Mapping):
            raise SchemaError(f"unexpected value for {kind} {index}, {_type_name(value)}")
        try:
            result.append(read_func(dict(value)))
        except SchemaError as err:
            raise SchemaError(f"{kind} {index}: {err}") from err
    return result