"""
HTTP/1.1 protocol compliance for origin responses passing through a caching
client: a filter that repairs what can be repaired and rejects what cannot.
"""

# Set default logging handler to avoid "No handler found" warnings.
import logging
from logging import NullHandler
from typing import TextIO

from . import exceptions
from ._collections import HTTPHeaderDict
from ._version import __version__
from .compliance import ResponseProtocolCompliance, ensure_protocol_compliance
from .request import Request
from .response import Response

__license__ = "MIT"
__version__ = __version__

__all__ = (
    "HTTPHeaderDict",
    "Request",
    "Response",
    "ResponseProtocolCompliance",
    "add_stderr_logger",
    "ensure_protocol_compliance",
    "exceptions",
)

logging.getLogger(__name__).addHandler(NullHandler())


def add_stderr_logger(level: int = logging.DEBUG) -> "logging.StreamHandler[TextIO]":
    """
    Helper for quickly adding a StreamHandler to the logger. Useful for
    debugging.

    Returns the handler after adding it.
    """
    # This method needs to be in this __init__.py to get the __name__ correct
    # even if httpcompliance is vendored within another package.
    logger = logging.getLogger(__name__)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.debug("Added a stderr logging handler to logger: %s", __name__)
    return handler


# ... Clean up.
del NullHandler
