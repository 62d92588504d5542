import logging
from typing import IO, Optional, Union

from ._collections import HTTPHeaderDict, ValidHTTPHeaderSource
from .exceptions import HTTPError
from .util.request import parse_http_version
from .util.typing import _TYPE_RESPONSE_BODY
from .util.util import to_bytes

__all__ = ["Response"]

log = logging.getLogger(__name__)


class Response:
    """
    An origin response on its way through the caching layer.

    The body is in one of three states: absent, materialized (``bytes``),
    or streaming, i.e. a file-like object that is still attached to the
    origin connection and has to be drained and closed to release it.

    :param body:
        ``None``, ``bytes``/``str``, or any object with ``read()`` and
        ``close()``.

    :param preload_content:
        If True, a streaming body is read into memory and closed during
        construction.
    """

    # Size of the reads used when discarding a streaming body.
    DRAIN_CHUNK_SIZE = 2 ** 16

    def __init__(
        self,
        body: Optional[_TYPE_RESPONSE_BODY] = None,
        headers: Optional[ValidHTTPHeaderSource] = None,
        status: int = 200,
        version: Union[int, str] = 11,
        reason: Optional[str] = None,
        preload_content: bool = False,
    ) -> None:
        if isinstance(headers, HTTPHeaderDict):
            self.headers = headers
        else:
            self.headers = HTTPHeaderDict(headers)
        self.status = status
        if isinstance(version, str):
            version = parse_http_version(version)
        self.version = version
        self.reason = reason

        self._body: Optional[bytes] = None
        self._fp: Optional[IO[bytes]] = None

        if body is None:
            pass
        elif isinstance(body, (str, bytes)):
            self._body = to_bytes(body)
        elif hasattr(body, "read"):
            self._fp = body
        else:
            raise TypeError(
                "body must be bytes, str or a readable object, "
                f"not {type(body).__name__}"
            )

        if preload_content and self._fp is not None:
            self._body = self.data

    @property
    def has_body(self) -> bool:
        return self._body is not None or self._fp is not None

    @property
    def is_streaming(self) -> bool:
        """``True`` while the body is still backed by a live source."""
        return self._fp is not None

    @property
    def closed(self) -> bool:
        if self._fp is None:
            return True
        return bool(getattr(self._fp, "closed", False))

    @property
    def data(self) -> Optional[bytes]:
        """
        The body as ``bytes``. A streaming body is read to the end, closed
        and cached on first access.
        """
        if self._body is not None:
            return self._body

        if self._fp is not None:
            fp = self._fp
            try:
                self._body = fp.read()
            finally:
                self._fp = None
                fp.close()
            return self._body

        return None

    def drain_conn(self) -> None:
        """
        Read and discard any remaining data on a streaming body.

        Unread data blocks the underlying connection from being reused.
        Errors raised while reading are logged and otherwise ignored; the
        source still has to be closed by the caller (see :meth:`release_body`).
        """
        if self._fp is None:
            return
        try:
            while self._fp.read(self.DRAIN_CHUNK_SIZE):
                pass
        except (HTTPError, OSError, ValueError) as e:
            log.debug("Failed to drain response body: %r", e)

    def close(self) -> None:
        if self._fp is not None and not self.closed:
            self._fp.close()

    def release_body(self) -> None:
        """
        Drop the body. A streaming source is drained and closed exactly once
        before the reference is cleared; a materialized body is just cleared.
        Errors from the source while draining or closing are logged, not raised.
        """
        self._body = None
        if self._fp is None:
            return
        try:
            self.drain_conn()
        finally:
            fp = self._fp
            self._fp = None
            try:
                fp.close()
            except OSError as e:
                log.debug("Failed to close response body: %r", e)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} [{self.status}]>"
