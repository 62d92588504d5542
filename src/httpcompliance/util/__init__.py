# For convenience, allow you to access the parsing helpers from here.
from .date import format_http_date, parse_http_date
from .headers import HeaderElement, parse_header_elements
from .request import (
    BODY_METHODS,
    format_http_version,
    parse_http_version,
)
from .warning import WarningValue, parse_warning_values

__all__ = (
    "BODY_METHODS",
    "HeaderElement",
    "WarningValue",
    "format_http_date",
    "format_http_version",
    "parse_header_elements",
    "parse_http_date",
    "parse_http_version",
    "parse_warning_values",
)
