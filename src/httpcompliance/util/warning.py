import logging
import re
import typing
from datetime import datetime

from .date import parse_http_date

__all__ = ("WarningValue", "parse_warning_values")

log = logging.getLogger(__name__)

# warning-value = warn-code SP warn-agent SP warn-text [ SP warn-date ]
# (RFC 7234, Section 5.5)
_WARNING_VALUE_RE = re.compile(
    r"""
    (?P<raw>
        (?P<code>[0-9]{3})[ \t]+
        (?P<agent>[^\s",]+)[ \t]+
        (?P<text>"(?:[^"\\]|\\.)*")
        (?:[ \t]+"(?P<date>[^"]*)")?
    )
    [ \t]*(?=,|$)
    """,
    re.VERBOSE,
)

_QUOTED_PAIR_RE = re.compile(r"\\(.)")


class WarningValue(typing.NamedTuple):
    """
    A single warning-value from a ``Warning`` header field.

    ``text`` is the warn-text with its quotes and escapes removed; ``raw`` is
    the warning-value exactly as received, which is what ``str()`` returns so
    that a value can be re-emitted unchanged.
    """

    code: int
    agent: str
    text: str
    date: typing.Optional[datetime]
    raw: str

    def __str__(self) -> str:
        return self.raw


def _skip_to_next_value(value: str, pos: int) -> int:
    in_quotes = False
    escaped = False
    for i in range(pos, len(value)):
        char = value[i]
        if escaped:
            escaped = False
        elif in_quotes and char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            return i + 1
    return len(value)


def parse_warning_values(value: str) -> typing.List[WarningValue]:
    """
    Parse every warning-value in a ``Warning`` header field value, in order.

    Malformed warning-values, including ones whose warn-date is not a valid
    HTTP-date, are skipped up to the next comma rather than failing the whole
    header.

    >>> [w.code for w in parse_warning_values('110 - "stale", 199 proxy "misc"')]
    [110, 199]
    """
    values = []
    pos = 0
    length = len(value)
    while pos < length:
        if value[pos] in " \t,":
            pos += 1
            continue

        match = _WARNING_VALUE_RE.match(value, pos)
        if match is None:
            next_pos = _skip_to_next_value(value, pos)
            log.debug("Skipping malformed warning-value %r", value[pos:next_pos])
            pos = next_pos
            continue

        pos = match.end()
        warn_date = None
        if match.group("date") is not None:
            try:
                warn_date = parse_http_date(match.group("date"))
            except ValueError:
                log.debug(
                    "Skipping warning-value with invalid warn-date %r",
                    match.group("raw"),
                )
                continue

        values.append(
            WarningValue(
                code=int(match.group("code")),
                agent=match.group("agent"),
                text=_QUOTED_PAIR_RE.sub(r"\1", match.group("text")[1:-1]),
                date=warn_date,
                raw=match.group("raw"),
            )
        )
    return values
