from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from ._collections import HTTPHeaderDict, ValidHTTPHeaderSource
from .util.request import BODY_METHODS, parse_http_version

if TYPE_CHECKING:
    from .util.typing import _TYPE_BODY

__all__ = ["Request"]


class Request:
    """
    An HTTP request as seen by the caching layer.

    :param method:
        Request method, e.g. ``"GET"``. Stored upper-cased.

    :param url:
        The request target.

    :param headers:
        Anything :class:`~httpcompliance.HTTPHeaderDict` accepts.

    :param version:
        Protocol version as an ``int`` (``10``, ``11``, ...) or an
        HTTP-version string such as ``"HTTP/1.0"``.

    :param body:
        Optional request body. Its presence makes the request body-enclosing
        whatever the method.

    :param original:
        The request as it was before the caching layer rewrote it for the
        upstream hop. Set once here and never changed; when present its
        protocol version and ``Expect`` state are the ones that count.
    """

    def __init__(
        self,
        method: str,
        url: str = "/",
        headers: Optional[ValidHTTPHeaderSource] = None,
        version: Union[int, str] = 11,
        body: Optional["_TYPE_BODY"] = None,
        original: Optional["Request"] = None,
    ) -> None:
        self.method = method.upper()
        self.url = url
        if isinstance(headers, HTTPHeaderDict):
            self.headers = headers
        else:
            self.headers = HTTPHeaderDict(headers)
        if isinstance(version, str):
            version = parse_http_version(version)
        self.version = version
        self.body = body
        self._original = original

    @classmethod
    def wrap(cls, original: "Request", **overrides: Any) -> "Request":
        """
        Build the rewritten request sent upstream, remembering ``original``.

        Fields not given in ``overrides`` are copied from ``original``; the
        headers are copied so the two requests never share a container.

        >>> client_req = Request("GET", "/", version="HTTP/1.0")
        >>> upstream = Request.wrap(client_req, version=11)
        >>> upstream.was_wrapped, upstream.original.version
        (True, 10)
        """
        fields: Mapping[str, Any] = {
            "method": original.method,
            "url": original.url,
            "headers": original.headers.copy(),
            "version": original.version,
            "body": original.body,
        }
        return cls(**{**fields, **overrides}, original=original)

    @property
    def original(self) -> Optional["Request"]:
        return self._original

    @property
    def was_wrapped(self) -> bool:
        """``True`` if this request was rewritten by the caching layer."""
        return self._original is not None

    @property
    def effective_original(self) -> "Request":
        """The request whose protocol state governs compliance decisions."""
        if self._original is not None:
            return self._original
        return self

    @property
    def is_body_enclosing(self) -> bool:
        return self.body is not None or self.method in BODY_METHODS

    @property
    def expects_continue(self) -> bool:
        """
        ``True`` for a body-enclosing request that sent
        ``Expect: 100-continue``. Only the first ``Expect`` field counts.
        """
        if not self.is_body_enclosing:
            return False
        expect = self.headers.getfirst("expect")
        return expect is not None and expect.strip().lower() == "100-continue"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.method} {self.url!r} version={self.version}>"
