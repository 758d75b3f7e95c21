from maasapi.urlparams import URLParams


def test_new_params_has_empty_values():
    params = URLParams()
    assert params.values == {}
    assert params.encode() == ""


def test_maybe_add_empty():
    params = URLParams()
    params.maybe_add("foo", "")
    assert params.encode() == ""


def test_maybe_add_with_value():
    params = URLParams()
    params.maybe_add("foo", "bar")
    assert params.encode() == "foo=bar"


def test_maybe_add_int_zero():
    params = URLParams()
    params.maybe_add_int("foo", 0)
    assert params.encode() == ""


def test_maybe_add_int_with_value():
    params = URLParams()
    params.maybe_add_int("foo", 42)
    assert params.encode() == "foo=42"


def test_maybe_add_bool_false():
    params = URLParams()
    params.maybe_add_bool("foo", False)
    assert params.encode() == ""


def test_maybe_add_bool_true():
    params = URLParams()
    params.maybe_add_bool("foo", True)
    assert params.encode() == "foo=true"


def test_maybe_add_many_none():
    params = URLParams()
    params.maybe_add_many("foo", None)
    assert params.encode() == ""


def test_maybe_add_many_values():
    params = URLParams()
    params.maybe_add_many("foo", ["two", "", "values"])
    assert params.encode() == "foo=two&foo=values"


def test_keys_are_sorted_in_encoding():
    params = URLParams()
    params.maybe_add("zeta", "1")
    params.maybe_add("alpha", "2")
    assert params.encode() == "alpha=2&zeta=1"