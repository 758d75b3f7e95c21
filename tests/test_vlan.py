import copy

import pytest

from maasapi.schema import SchemaError
from maasapi.version import TWO_DOT_OH, parse_version
from maasapi.vlan import VLAN, read_vlans

_NAMED = {
    "id": 1,
    "name": "untagged",
    "fabric": "fabric-0",
    "vid": 2,
    "mtu": 1500,
    "dhcp_on": True,
    "primary_rack": "a-rack",
    "secondary_rack": None,
    "resource_uri": "/MAAS/api/2.0/vlans/1/",
}

_UNNAMED = {
    "id": 5006,
    "name": None,
    "fabric": "maas-management",
    "vid": 30,
    "mtu": 1500,
    "dhcp_on": True,
    "primary_rack": "4y3h7n",
    "secondary_rack": None,
    "external_dhcp": None,
    "resource_uri": "/MAAS/api/2.0/vlans/5006/",
}


def named_response():
    return [copy.deepcopy(_NAMED)]


def unnamed_response():
    return [copy.deepcopy(_UNNAMED)]


def test_read_vlans_bad_schema():
    with pytest.raises(SchemaError) as info:
        read_vlans(TWO_DOT_OH, "wat?")
    assert str(info.value) == 'vlan base schema check failed: expected list, got string("wat?")'


def test_read_vlans_with_name():
    expected = VLAN(
        id=1,
        name="untagged",
        fabric="fabric-0",
        vid=2,
        mtu=1500,
        dhcp=True,
        primary_rack="a-rack",
        secondary_rack="",
        resource_uri="/MAAS/api/2.0/vlans/1/",
    )
    assert read_vlans(TWO_DOT_OH, named_response()) == [expected]


def test_read_vlans_without_name():
    (vlan,) = read_vlans(TWO_DOT_OH, unnamed_response())
    assert (vlan.id, vlan.name, vlan.fabric) == (5006, "", "maas-management")
    assert (vlan.vid, vlan.mtu, vlan.dhcp) == (30, 1500, True)
    assert (vlan.primary_rack, vlan.secondary_rack) == ("4y3h7n", "")


def test_low_version():
    with pytest.raises(SchemaError) as info:
        read_vlans(parse_version("1.9.0"), named_response())
    assert str(info.value) == "no vlan read func for version 1.9.0"


def test_high_version():
    assert len(read_vlans(parse_version("2.1.9"), unnamed_response())) == 1


def test_version_string_accepted():
    vlans = read_vlans("2.1.9", named_response())
    assert vlans[0].name == "untagged"


def test_missing_field_is_annotated():
    source = named_response()
    del source[0]["fabric"]
    with pytest.raises(SchemaError, match=r"^vlan 0: vlan 2\.0 schema check failed: fabric: "):
        read_vlans(TWO_DOT_OH, source)