import typing
from http.cookiejar import split_header_words

__all__ = ("HeaderElement", "format_header_element", "parse_header_elements")

# RFC 7230 delimiters; a value containing one of these has to be quoted.
_SEPARATORS = frozenset(' ,;=()<>@:\\"/[]?{}\t')

_TYPE_PAIR = typing.Tuple[str, typing.Optional[str]]


class HeaderElement(typing.NamedTuple):
    """
    One comma-separated element of a multi-valued header field, e.g. the
    ``gzip`` in ``Content-Encoding: gzip, identity`` or the
    ``text/html;level=1`` in an ``Accept`` header.

    ``text`` is the element serialized back from its name, value and
    parameters, which is what ``str()`` returns.
    """

    name: str
    value: typing.Optional[str]
    params: typing.Tuple[_TYPE_PAIR, ...]
    text: str

    def __str__(self) -> str:
        return self.text


def _format_value(value: str) -> str:
    if value and not _SEPARATORS.intersection(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_pair(name: str, value: typing.Optional[str]) -> str:
    if value is None:
        return name
    return f"{name}={_format_value(value)}"


def format_header_element(pairs: typing.Sequence[_TYPE_PAIR]) -> str:
    """
    Serialize the ``(name, value)`` pairs of one header element, the first
    being the element itself and the rest its parameters.

    >>> format_header_element([("text/html", None), ("q", "0.5")])
    'text/html; q=0.5'
    """
    return "; ".join(_format_pair(name, value) for name, value in pairs)


def parse_header_elements(value: str) -> typing.List[HeaderElement]:
    """
    Tokenize a header field value into its elements.

    Each element has the form ``name[=value] *( ";" param )``. Quoted-string
    values are unquoted, separators inside them are not split on, and empty
    elements (``a,,b``) are skipped.

    >>> [e.name for e in parse_header_elements("gzip, identity")]
    ['gzip', 'identity']
    """
    elements = []
    for pairs in split_header_words([value]):
        name, element_value = pairs[0]
        elements.append(
            HeaderElement(
                name=name,
                value=element_value,
                params=tuple(pairs[1:]),
                text=format_header_element(pairs),
            )
        )
    return elements
