from __future__ import annotations

import pytest

from httpcompliance import HTTPHeaderDict, Request


class TestRequest:
    def test_defaults(self) -> None:
        r = Request("get")
        assert r.method == "GET"
        assert r.url == "/"
        assert r.version == 11
        assert r.body is None
        assert r.headers == HTTPHeaderDict()

    def test_version_from_string(self) -> None:
        assert Request("GET", version="HTTP/1.0").version == 10

    def test_invalid_version_string(self) -> None:
        with pytest.raises(ValueError, match="Not an HTTP version"):
            Request("GET", version="HTTP/one")

    def test_headers_are_kept_when_given_a_headerdict(self) -> None:
        headers = HTTPHeaderDict(Range="bytes=0-9")
        assert Request("GET", headers=headers).headers is headers

    def test_not_wrapped(self) -> None:
        r = Request("GET")
        assert not r.was_wrapped
        assert r.original is None
        assert r.effective_original is r

    def test_wrap(self) -> None:
        client = Request("POST", "/upload", {"Expect": "100-continue"}, version=10)
        upstream = Request.wrap(client, version=11, url="http://origin/upload")

        assert upstream.was_wrapped
        assert upstream.original is client
        assert upstream.effective_original is client
        assert upstream.method == "POST"
        assert upstream.url == "http://origin/upload"
        assert upstream.version == 11
        assert upstream.headers == client.headers
        assert upstream.headers is not client.headers

    def test_wrap_does_not_touch_original(self) -> None:
        client = Request("GET", headers={"Accept": "*/*"})
        upstream = Request.wrap(client)
        upstream.headers.add("Via", "1.1 cache")
        assert "via" not in client.headers
        assert client.original is None

    @pytest.mark.parametrize(
        "method, body, expected",
        [
            ("GET", None, False),
            ("HEAD", None, False),
            ("OPTIONS", None, False),
            ("POST", None, True),
            ("PUT", None, True),
            ("patch", None, True),
            ("GET", b"payload", True),
        ],
    )
    def test_is_body_enclosing(
        self, method: str, body: bytes | None, expected: bool
    ) -> None:
        assert Request(method, body=body).is_body_enclosing is expected

    @pytest.mark.parametrize(
        "method, expect, expected",
        [
            ("POST", "100-continue", True),
            ("PUT", "100-Continue", True),
            ("POST", " 100-continue ", True),
            ("POST", None, False),
            ("POST", "something-else", False),
            ("GET", "100-continue", False),
        ],
    )
    def test_expects_continue(
        self, method: str, expect: str | None, expected: bool
    ) -> None:
        headers = {"Expect": expect} if expect is not None else None
        assert Request(method, headers=headers).expects_continue is expected

    @pytest.mark.parametrize(
        "expect, expected",
        [
            ([("Expect", "100-continue"), ("Expect", "x-other")], True),
            ([("Expect", "x-other"), ("Expect", "100-continue")], False),
        ],
    )
    def test_expects_continue_uses_first_field(
        self, expect: list[tuple[str, str]], expected: bool
    ) -> None:
        assert Request("POST", headers=expect).expects_continue is expected

    def test_repr(self) -> None:
        assert repr(Request("GET", "/x", version=10)) == "<Request GET '/x' version=10>"
