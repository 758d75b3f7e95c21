"""VLAN records read from API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from maasapi.schema import (
    SchemaError,
    as_bool,
    as_optional_string,
    as_string,
    check_fields,
    check_list_of_maps,
    force_int,
    read_list,
    select_reader,
)
from maasapi.version import TWO_DOT_OH, Version


@dataclass(frozen=True)
class VLAN:
    """A VLAN as described by the controller."""

    id: int
    name: str
    fabric: str
    vid: int
    mtu: int
    dhcp: bool
    primary_rack: str
    secondary_rack: str
    resource_uri: str


_VLAN_2_0_FIELDS = {
    "id": force_int,
    "resource_uri": as_string,
    "name": as_optional_string,
    "fabric": as_string,
    "vid": force_int,
    "mtu": force_int,
    "dhcp_on": as_bool,
    "primary_rack": as_optional_string,
    "secondary_rack": as_optional_string,
}


def _vlan_2_0(source: dict[str, Any]) -> VLAN:
    try:
        valid = check_fields(source, _VLAN_2_0_FIELDS)
    except SchemaError as err:
        raise SchemaError(f"vlan 2.0 schema check failed: {err}") from err
    return VLAN(
        id=valid["id"],
        name=valid["name"] or "",
        fabric=valid["fabric"],
        vid=valid["vid"],
        mtu=valid["mtu"],
        dhcp=valid["dhcp_on"],
        primary_rack=valid["primary_rack"] or "",
        secondary_rack=valid["secondary_rack"] or "",
        resource_uri=valid["resource_uri"],
    )


_READERS = {TWO_DOT_OH: _vlan_2_0}


def read_vlans(controller_version: Version | str, source: Any) -> list[VLAN]:
    """Read a list of VLANs in the format used by the given controller version."""
    if isinstance(controller_version, str):
        controller_version = Version.parse(controller_version)
    try:
        valid = check_list_of_maps(source)
    except SchemaError as err:
        raise SchemaError(f"vlan base schema check failed: {err}") from err
    reader = select_reader(_READERS, controller_version, "vlan")
    return read_list(valid, reader, "vlan")