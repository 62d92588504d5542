import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from .exceptions import UnexpectedContinue, UnexpectedPartialContent
from .request import Request
from .response import Response
from .util.date import format_http_date, parse_http_date
from .util.headers import parse_header_elements
from .util.warning import parse_warning_values

__all__ = ["ResponseProtocolCompliance", "ensure_protocol_compliance"]

log = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResponseProtocolCompliance:
    """
    Brings an origin response in line with HTTP/1.1 before it is stored or
    handed to the client.

    Each rule either repairs the response in place or, when the response
    cannot be repaired, releases its body and raises a
    :class:`~httpcompliance.exceptions.ProtocolViolation`. Running the filter
    on an already compliant response changes nothing.

    :param now:
        Zero-argument callable returning the current time as an aware
        :class:`~datetime.datetime`. Used when a ``Date`` header has to be
        added.

    Example:

    .. code-block:: python

        from httpcompliance import Request, Response, ResponseProtocolCompliance

        compliance = ResponseProtocolCompliance()
        response = Response(status=304, headers={"Content-Type": "text/html"})
        compliance.ensure_protocol_compliance(Request("GET", "/"), response)
        assert "content-type" not in response.headers
    """

    #: Statuses whose responses never carry a body (RFC 7230, Section 3.3.3).
    BODYLESS_STATUSES = frozenset([204, 205, 304])

    #: Representation headers a 304 (Not Modified) must not repeat.
    DISALLOWED_304_HEADERS: Tuple[str, ...] = (
        "Allow",
        "Content-Encoding",
        "Content-Language",
        "Content-Length",
        "Content-MD5",
        "Content-Range",
        "Content-Type",
        "Last-Modified",
    )

    #: Transfer-coding headers an HTTP/1.0 client must never see.
    LEGACY_STRIPPED_HEADERS: Tuple[str, ...] = ("TE", "Transfer-Encoding")

    def __init__(self, now: Optional[Callable[[], datetime]] = None) -> None:
        self.now = now or _utcnow

    def ensure_protocol_compliance(self, request: Request, response: Response) -> None:
        """
        Apply every compliance rule to ``response``, in order.

        :param request: The request that produced ``response``. Never modified.
        :param response: The origin response. Modified in place.

        :raises UnexpectedContinue:
            The origin sent 100 (Continue) to a client that did not ask for it.
        :raises UnexpectedPartialContent:
            The origin sent 206 (Partial Content) to a request without
            ``Range``.
        """
        if self._response_must_not_have_body(request, response):
            self._release_body(response)

        self._ensure_continue_was_expected(request, response)
        self._strip_transfer_encoding_for_legacy_client(request, response)
        self._ensure_partial_content_was_requested(request, response)
        self._ensure_options_response_has_content_length(request, response)
        self._ensure_partial_content_has_date(response)
        self._strip_304_entity_headers(response)
        self._strip_identity_content_encoding(response)
        self._strip_warnings_with_mismatched_dates(response)

    def _response_must_not_have_body(
        self, request: Request, response: Response
    ) -> bool:
        return request.method == "HEAD" or response.status in self.BODYLESS_STATUSES

    def _release_body(self, response: Response) -> None:
        if response.has_body:
            log.debug("Discarding body of %r", response)
        response.release_body()

    def _ensure_continue_was_expected(
        self, request: Request, response: Response
    ) -> None:
        if response.status != 100:
            return

        if request.effective_original.expects_continue:
            return

        log.debug("Origin sent 100 (Continue) without Expect: 100-continue")
        self._release_body(response)
        raise UnexpectedContinue(response=response)

    def _strip_transfer_encoding_for_legacy_client(
        self, request: Request, response: Response
    ) -> None:
        original = request.original
        if original is None or original.version >= 11:
            return

        for name in self.LEGACY_STRIPPED_HEADERS:
            if name in response.headers:
                log.debug("Removing %s for HTTP/1.0 client", name)
                response.headers.discard(name)

    def _ensure_partial_content_was_requested(
        self, request: Request, response: Response
    ) -> None:
        if response.status != 206 or "range" in request.headers:
            return

        log.debug("Origin sent 206 (Partial Content) without a Range request")
        self._release_body(response)
        raise UnexpectedPartialContent(response=response)

    def _ensure_options_response_has_content_length(
        self, request: Request, response: Response
    ) -> None:
        if request.method != "OPTIONS" or response.status != 200:
            return

        if "content-length" not in response.headers:
            response.headers.add("Content-Length", "0")

    def _ensure_partial_content_has_date(self, response: Response) -> None:
        if response.status != 206 or "date" in response.headers:
            return

        response.headers.add("Date", format_http_date(self.now()))

    def _strip_304_entity_headers(self, response: Response) -> None:
        if response.status != 304:
            return

        for name in self.DISALLOWED_304_HEADERS:
            response.headers.discard(name)

    def _strip_identity_content_encoding(self, response: Response) -> None:
        values = response.headers.getlist("content-encoding")
        if not values:
            return

        new_values: List[str] = []
        modified = False
        for value in values:
            kept = []
            for element in parse_header_elements(value):
                if element.name.lower() == "identity":
                    modified = True
                else:
                    kept.append(element.text)
            if kept:
                new_values.append(",".join(kept))

        if not modified:
            return

        log.debug("Removing identity from Content-Encoding %r", values)
        response.headers.discard("content-encoding")
        for new_value in new_values:
            response.headers.add("Content-Encoding", new_value)

    def _strip_warnings_with_mismatched_dates(self, response: Response) -> None:
        date_value = response.headers.getfirst("date")
        if date_value is None:
            return
        try:
            response_date = parse_http_date(date_value)
        except ValueError:
            return

        warnings = response.headers.getlist("warning")
        if not warnings:
            return

        kept: List[str] = []
        modified = False
        for header in warnings:
            for warning in parse_warning_values(header):
                if warning.date is None or warning.date == response_date:
                    kept.append(str(warning))
                else:
                    modified = True

        if not modified:
            return

        log.debug("Removing Warning values not dated %s", date_value)
        response.headers.discard("warning")
        for value in kept:
            response.headers.add("Warning", value)


_DEFAULT_COMPLIANCE = ResponseProtocolCompliance()


def ensure_protocol_compliance(request: Request, response: Response) -> None:
    """
    Shortcut for :meth:`ResponseProtocolCompliance.ensure_protocol_compliance`
    using a module-level filter with the default settings.
    """
    _DEFAULT_COMPLIANCE.ensure_protocol_compliance(request, response)
