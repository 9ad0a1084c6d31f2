import hashlib
import hmac

import pytest

from lazadaopen.signature import (
    build_url,
    generate_signature,
    merge_params,
    signature_base_string,
    stringify_value,
)


def _hmac_upper(secret: str, message: str) -> str:
    return (
        hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256)
        .hexdigest()
        .upper()
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (1700000000000, "1700000000000"),
        ("bar", "bar"),
        (1.5, "1.5"),
    ],
)
def test_stringify_value(value, expected):
    assert stringify_value(value) == expected


def test_base_string_is_sorted_and_unseparated():
    params = {"timestamp": 123, "app_key": "K", "sign_method": "sha256"}
    assert (
        signature_base_string("/orders/get", params)
        == "/orders/getapp_keyKsign_methodsha256timestamp123"
    )


def test_base_string_renders_none_and_bool():
    params = {"access_token": None, "flag": True}
    assert signature_base_string("/x", params) == "/xaccess_tokenflagtrue"


def test_signature_matches_hand_computed_hmac():
    params = {"b": "2", "a": "1"}
    assert generate_signature("secret", "/api", params) == _hmac_upper(
        "secret", "/apia1b2"
    )


def test_signature_is_uppercase_hex():
    sign = generate_signature("secret", "/api", {"a": "1"})
    assert len(sign) == 64
    assert sign == sign.upper()
    int(sign, 16)


def test_signature_ignores_input_order():
    forward = {"app_key": "K", "limit": 10, "offset": 0, "timestamp": 1}
    backward = dict(reversed(list(forward.items())))
    assert list(forward) != list(backward)
    assert generate_signature("S", "/products/get", forward) == generate_signature(
        "S", "/products/get", backward
    )


def test_signature_changes_with_any_value():
    params = {"app_key": "K", "limit": 10, "offset": 0}
    baseline = generate_signature("S", "/products/get", params)
    for key in params:
        changed = dict(params, **{key: "other"})
        assert generate_signature("S", "/products/get", changed) != baseline


def test_signature_depends_on_secret_and_api_name():
    params = {"a": "1"}
    baseline = generate_signature("S", "/a", params)
    assert generate_signature("T", "/a", params) != baseline
    assert generate_signature("S", "/b", params) != baseline


def test_signature_of_non_ascii_value_uses_utf8():
    params = {"name": "áo thun"}
    assert generate_signature("S", "/x", params) == _hmac_upper("S", "/xnameáo thun")


def test_merge_params_api_params_win():
    merged = merge_params({"app_key": "K", "timestamp": 1}, {"timestamp": 2, "q": "x"})
    assert merged == {"app_key": "K", "timestamp": 2, "q": "x"}


def test_merge_params_without_api_params_copies_common():
    common = {"app_key": "K"}
    merged = merge_params(common, None)
    assert merged == common
    assert merged is not common


def test_build_url_strips_one_trailing_slash():
    with_slash = build_url("https://api.example.com/", "/orders/get", {"a": 1})
    without = build_url("https://api.example.com", "/orders/get", {"a": 1})
    assert with_slash == without == "https://api.example.com/orders/get?a=1"


def test_build_url_strips_only_one_slash():
    assert (
        build_url("https://api.example.com//", "/x", {"a": 1})
        == "https://api.example.com//x?a=1"
    )


def test_build_url_keeps_insertion_order():
    params = {"timestamp": 1, "app_key": "K", "sign": "ABC"}
    assert sorted(params) != list(params)
    assert build_url("https://h", "/p", params) == "https://h/p?timestamp=1&app_key=K&sign=ABC"


def test_build_url_does_not_percent_encode():
    # Values go into the query verbatim.
    url = build_url("https://h", "/p", {"q": "a b&c", "access_token": None})
    assert url == "https://h/p?q=a b&c&access_token="


def test_build_url_with_no_params():
    assert build_url("https://h/", "/p", {}) == "https://h/p?"
