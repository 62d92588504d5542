"""
Hypothesis property-based tests for the response compliance filter.
"""
from __future__ import annotations

import typing

from hypothesis import given, settings, strategies as st

from httpcompliance import HTTPHeaderDict, Request, Response, ResponseProtocolCompliance

from . import FIXED_NOW, FIXED_NOW_HEADER, TrackingBytesIO

DATES = [FIXED_NOW_HEADER, "Tue, 31 Dec 2019 23:59:59 GMT", "not a date"]

compliance = ResponseProtocolCompliance(now=lambda: FIXED_NOW)

methods = st.sampled_from(["GET", "HEAD", "POST", "OPTIONS", "PUT"])

# 100 and 206 are left out; unrequested ones are rejected, not repaired.
statuses = st.sampled_from([200, 201, 204, 205, 301, 304, 404, 500])

content_encodings = st.lists(
    st.sampled_from(["gzip", "identity", "br", "deflate", "IDENTITY", ""]),
    min_size=1,
    max_size=4,
).map(", ".join)


@st.composite
def warnings(draw: typing.Callable[..., typing.Any]) -> str:
    code = draw(st.sampled_from([110, 112, 199, 214, 299]))
    agent = draw(st.sampled_from(["-", "proxy", "cache.example.com:8080"]))
    value = f'{code} {agent} "text"'
    date = draw(st.sampled_from([None, *DATES]))
    if date is not None:
        value += f' "{date}"'
    return value


response_headers = st.lists(
    st.one_of(
        st.tuples(st.just("Content-Encoding"), content_encodings),
        st.tuples(
            st.just("Warning"),
            st.lists(warnings(), min_size=1, max_size=3).map(", ".join),
        ),
        st.tuples(st.just("Date"), st.sampled_from(DATES)),
        st.tuples(
            st.sampled_from(["TE", "Transfer-Encoding", "Content-Type", "Allow"]),
            st.sampled_from(["chunked", "trailers", "text/plain"]),
        ),
        st.tuples(st.just("Content-Length"), st.just("4")),
    ),
    max_size=12,
)


@settings(max_examples=500, deadline=None)
@given(
    method=methods,
    status=statuses,
    version=st.sampled_from([10, 11]),
    headers=response_headers,
)
def test_filter_is_idempotent(
    method: str, status: int, version: int, headers: list[tuple[str, str]]
) -> None:
    request = Request.wrap(Request(method, version=version), version=11)
    response = Response(b"body", status=status, headers=headers)

    compliance.ensure_protocol_compliance(request, response)
    once = response.headers.copy()
    compliance.ensure_protocol_compliance(request, response)

    assert response.headers == once


@settings(max_examples=500, deadline=None)
@given(method=methods, status=statuses, headers=response_headers)
def test_no_rule_adds_identity_or_legacy_headers(
    method: str, status: int, headers: list[tuple[str, str]]
) -> None:
    request = Request.wrap(Request(method, version=10), version=11)
    response = Response(b"body", status=status, headers=headers)

    compliance.ensure_protocol_compliance(request, response)

    assert "te" not in response.headers
    assert "transfer-encoding" not in response.headers
    for value in response.headers.getlist("content-encoding"):
        assert "identity" not in value.lower()


@settings(max_examples=500, deadline=None)
@given(method=methods, status=statuses, body=st.binary(max_size=100))
def test_bodyless_responses_release_their_stream(
    method: str, status: int, body: bytes
) -> None:
    fp = TrackingBytesIO(body)
    response = Response(fp, status=status)

    compliance.ensure_protocol_compliance(Request(method), response)

    if method == "HEAD" or status in (204, 205, 304):
        assert not response.has_body
        assert fp.close_calls == 1
    else:
        assert response.is_streaming
        assert fp.close_calls == 0


@settings(max_examples=500, deadline=None)
@given(headers=response_headers)
def test_not_modified_never_carries_entity_headers(
    headers: list[tuple[str, str]]
) -> None:
    response = Response(status=304, headers=HTTPHeaderDict(headers))

    compliance.ensure_protocol_compliance(Request("GET"), response)

    for name in ResponseProtocolCompliance.DISALLOWED_304_HEADERS:
        assert name not in response.headers
