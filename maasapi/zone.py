"""Zone records read from API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from maasapi.schema import (
    SchemaError,
    as_string,
    check_fields,
    check_list_of_maps,
    read_list,
    select_reader,
)
from maasapi.version import TWO_DOT_OH, Version


@dataclass(frozen=True)
class Zone:
    """A physical zone as described by the controller."""

    name: str
    description: str
    resource_uri: str


_ZONE_2_0_FIELDS = {
    "name": as_string,
    "description": as_string,
    "resource_uri": as_string,
}


def _zone_2_0(source: dict[str, Any]) -> Zone:
    try:
        valid = check_fields(source, _ZONE_2_0_FIELDS)
    except SchemaError as err:
        raise SchemaError(f"zone 2.0 schema check failed: {err}") from err
    return Zone(
        name=valid["name"],
        description=valid["description"],
        resource_uri=valid["resource_uri"],
    )


_READERS = {TWO_DOT_OH: _zone_2_0}


def read_zones(controller_version: Version | str, source: Any) -> list[Zone]:
    """Read a list of zones in the format used by the given controller version."""
    if isinstance(controller_version, str):
        controller_version = Version.parse(controller_version)
    try:
        valid = check_list_of_maps(source)
    except SchemaError as err:
        raise SchemaError(f"zone base schema check failed: {err}") from err
    reader = select_reader(_READERS, controller_version, "zone")
    return read_list(valid, reader, "zone")