# maasapi

Small, dependency-free helpers for working with MAAS API responses from Python.

It provides:

- `maasapi.urlparams.URLParams`: collects multi-valued query parameters,
  skipping empty, zero or false values, and encodes them as a query string
  with the keys in sorted order.
- `maasapi.util.join_urls` and `maasapi.util.ensure_trailing_slash`: build
  URLs joined by exactly one slash, and slash-terminated URLs.
- `maasapi.vlan.read_vlans` and `maasapi.zone.read_zones`: validate decoded
  JSON responses and turn them into frozen `VLAN` and `Zone` dataclasses,
  choosing the reader that matches the controller's API version.
- `maasapi.version.Version` and `maasapi.version.parse_version`: comparable
  version numbers such as `2.0.0`, `2.1.9` or `2.1-beta3`.
- `maasapi.schema`: the field checkers (`as_string`, `as_optional_string`,
  `force_int`, `as_bool`), `check_list_of_maps`, `check_fields`,
  `select_reader`, `read_list` and the `SchemaError` exception they raise.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Query parameters

```python
from maasapi.urlparams import URLParams

params = URLParams()
params.maybe_add("hostname", "node-1")
params.maybe_add("zone", "")            # skipped: empty
params.maybe_add_int("limit", 0)        # skipped: zero
params.maybe_add_bool("deployed", True)
params.maybe_add_many("tag", ["a", "", "b"])
print(params.encode())
# deployed=true&hostname=node-1&tag=a&tag=b
```

The collected values are available as `params.values`, a dict mapping each
name to its list of values.

### URLs

```python
from maasapi.util import join_urls, ensure_trailing_slash

join_urls("http://example.com/base/", "/vlans")   # 'http://example.com/base/vlans'
ensure_trailing_slash("http://example.com/api")   # 'http://example.com/api/'
```

### Reading responses

```python
import json
from maasapi.version import parse_version
from maasapi.vlan import read_vlans
from maasapi.zone import read_zones

zones = read_zones(parse_version("2.0.0"), json.loads(zone_response_text))
for zone in zones:
    print(zone.name, zone.description, zone.resource_uri)

# The version may also be given as a string.
vlans = read_vlans("2.1.9", json.loads(vlan_response_text))
print(vlans[0].fabric, vlans[0].vid, vlans[0].mtu, vlans[0].dhcp)
```

A VLAN whose `name`, `primary_rack` or `secondary_rack` is `null` in the
response gets an empty string for that attribute. Integer fields accept
numbers and integer strings.

The reader used is the one for the newest known API version that is not newer
than the controller's; at present the only one is for 2.0.0.

### Errors

A response that does not have the expected shape raises
`maasapi.schema.SchemaError` (a `ValueError`) whose message says which item
and which field failed, for example:

```
vlan base schema check failed: expected list, got string("wat?")
```

A controller version older than any known reader raises the same error, for
example `no vlan read func for version 1.9.0`. A malformed version string
raises `ValueError`.

## What it does not do

This package does not talk to a MAAS server: there is no HTTP client, no
authentication and no test server. It only builds URLs and query strings and
reads VLAN and zone data that you have already fetched and decoded.