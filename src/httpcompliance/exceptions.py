from typing import TYPE_CHECKING, Callable, Optional, Tuple

if TYPE_CHECKING:
    from .response import Response

# Base Exceptions


class HTTPError(Exception):
    """Base exception used by this module."""

    pass


_TYPE_REDUCE_RESULT = Tuple[Callable[..., object], Tuple[object, ...]]


class ProtocolError(HTTPError):
    """Raised when something unexpected happens mid-request/response."""

    pass


class ProtocolViolation(ProtocolError):
    """Raised when an origin response breaks an HTTP/1.1 requirement that
    cannot be repaired in place.

    The response body has already been released when this is raised, so the
    response must not be stored or delivered.

    :param message: Description of the broken requirement.
    :param response: The offending response, if known.
    """

    def __init__(self, message: str, response: Optional["Response"] = None) -> None:
        super().__init__(message)
        self.response = response

    def __reduce__(self) -> _TYPE_REDUCE_RESULT:
        # For pickling purposes.
        return self.__class__, (self.args[0], None)


# Leaf Exceptions


class UnexpectedContinue(ProtocolViolation):
    """Raised when the origin answers with 100 (Continue) to a request that
    did not send ``Expect: 100-continue``."""

    def __init__(
        self, message: Optional[str] = None, response: Optional["Response"] = None
    ) -> None:
        if message is None:
            message = (
                "unexpected 100-continue: the incoming request did not contain "
                "a 100-continue expectation, but the response was a Status 100"
            )
        super().__init__(message, response)


class UnexpectedPartialContent(ProtocolViolation):
    """Raised when the origin answers with 206 (Partial Content) to a request
    that carried no ``Range`` header."""

    def __init__(
        self, message: Optional[str] = None, response: Optional["Response"] = None
    ) -> None:
        if message is None:
            message = (
                "unexpected partial content: partial content was returned "
                "for a request that did not ask for it"
            )
        super().__init__(message, response)
