from __future__ import annotations

import pytest


def test_parse_headers():
    from url_tools.utils import parse_headers

    headers = parse_headers([(b"Host", b"example.com"), (b"accept", b"*/*")])
    assert headers["host"] == "example.com"
    assert headers["ACCEPT"] == "*/*"


def test_split_host():
    from url_tools.errors import InvalidUrlError
    from url_tools.utils import split_host

    assert split_host("example.com") == ("example.com", None)
    assert split_host("example.com:8000") == ("example.com", 8000)
    assert split_host("[::1]") == ("[::1]", None)
    assert split_host("[::1]:8000") == ("[::1]", 8000)

    with pytest.raises(InvalidUrlError):
        split_host("example.com:port")


def test_parse_basic_auth():
    from url_tools.utils import parse_basic_auth

    assert parse_basic_auth("Basic dTpw") == ("u", "p")
    assert parse_basic_auth("basic dTpw") == ("u", "p")
    # "user" only
    assert parse_basic_auth("Basic dXNlcg==") == ("user", None)
    # "a@b:p w"
    assert parse_basic_auth("Basic YUBiOnAgdw==") == ("a%40b", "p%20w")

    assert parse_basic_auth("") == (None, None)
    assert parse_basic_auth("Bearer token") == (None, None)
    assert parse_basic_auth("Basic !!!") == (None, None)
