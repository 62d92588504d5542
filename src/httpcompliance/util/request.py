import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import Final

# Methods whose requests are expected to enclose a body, and therefore may
# legitimately carry an ``Expect: 100-continue`` header.
BODY_METHODS: "Final[frozenset[str]]" = frozenset(["PATCH", "POST", "PUT"])

_VERSION_RE = re.compile(r"^HTTP/(\d)(?:\.(\d))?$", re.IGNORECASE)


def parse_http_version(version: str) -> int:
    """
    Convert an HTTP-version token into the integer used by
    :mod:`http.client` (``"HTTP/1.0"`` is ``10``, ``"HTTP/1.1"`` is ``11``,
    ``"HTTP/2"`` is ``20``).

    :raises ValueError: if ``version`` is not an HTTP-version token.

    >>> parse_http_version("HTTP/1.0")
    10
    """
    match = _VERSION_RE.match(version.strip())
    if match is None:
        raise ValueError(f"Not an HTTP version: {version!r}")
    major, minor = match.groups()
    return int(major) * 10 + int(minor or 0)


def format_http_version(version: int) -> str:
    """
    Inverse of :func:`parse_http_version`.

    >>> format_http_version(11)
    'HTTP/1.1'
    """
    if version < 0 or version >= 100:
        raise ValueError(f"Not an HTTP version: {version!r}")
    major, minor = divmod(version, 10)
    if major >= 2 and minor == 0:
        return f"HTTP/{major}"
    return f"HTTP/{major}.{minor}"
