from __future__ import annotations

import pytest


@pytest.fixture()
def composer():
    from url_tools import UrlComposer

    return UrlComposer()


@pytest.fixture()
def gen_scope():
    def gen_scope(path="/", query_string=b"", scheme="http", headers=None, **opts):
        scope = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": "GET",
            "scheme": scheme,
            "path": path,
            "query_string": query_string,
            "root_path": "",
            "headers": [
                (name.encode("latin-1"), value.encode("latin-1"))
                for name, value in (headers or {}).items()
            ],
        }
        scope.update(opts)
        return scope

    return gen_scope
