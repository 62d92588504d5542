from collections import OrderedDict
from typing import (
    Any,
    Iterable,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    Union,
)

__all__ = ["HTTPHeaderDict"]


_Null = object()

ValidHTTPHeaderSource = Union[
    "HTTPHeaderDict", Mapping[str, str], Iterable[Tuple[str, str]]
]


class HTTPHeaderDict(MutableMapping[str, str]):
    """
    :param headers:
        An iterable of field-value pairs, a mapping or another
        :class:`HTTPHeaderDict`. Repeated field names are kept as separate
        values.

    :param kwargs:
        Additional field-value pairs to add.

    A ``dict`` like container for storing HTTP Headers.

    Field names are stored and compared case-insensitively in compliance with
    RFC 7230. Iteration provides the first case-sensitive key seen for each
    case-insensitive pair. Values for the same field keep the order in which
    they were added.

    Using ``__setitem__`` syntax overwrites fields that compare equal
    case-insensitively in order to maintain ``dict``'s api. To keep several
    values for one field use ``.add`` in a loop; ``.getlist`` returns every
    value and ``.discard`` removes every value.

    >>> headers = HTTPHeaderDict()
    >>> headers.add('Warning', '110 - "Response is Stale"')
    >>> headers.add('warning', '112 - "Disconnected Operation"')
    >>> headers['content-length'] = '7'
    >>> headers.getlist('WARNING')
    ['110 - "Response is Stale"', '112 - "Disconnected Operation"']
    >>> headers['Content-Length']
    '7'
    """

    _container: "OrderedDict[str, List[str]]"

    def __init__(
        self, headers: Optional[ValidHTTPHeaderSource] = None, **kwargs: str
    ) -> None:
        super().__init__()
        self._container = OrderedDict()
        if headers is not None:
            if isinstance(headers, HTTPHeaderDict):
                self._copy_from(headers)
            else:
                self.extend(headers)
        if kwargs:
            self.extend(kwargs)

    def __setitem__(self, key: str, val: str) -> None:
        self._container[key.lower()] = [key, val]

    def __getitem__(self, key: str) -> str:
        val = self._container[key.lower()]
        return ", ".join(val[1:])

    def __delitem__(self, key: str) -> None:
        del self._container[key.lower()]

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            return key.lower() in self._container
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping) and not hasattr(other, "keys"):
            return False
        if not isinstance(other, type(self)):
            other = type(self)(other)  # type: ignore[arg-type]
        return {k.lower(): v for k, v in self.iteritems_lists()} == {
            k.lower(): v for k, v in other.iteritems_lists()
        }

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __len__(self) -> int:
        return len(self._container)

    def __iter__(self) -> Iterator[str]:
        # Only provide the originally cased names
        for vals in self._container.values():
            yield vals[0]

    def discard(self, key: str) -> None:
        """Remove every value of the named field, if there is any."""
        try:
            del self[key]
        except KeyError:
            pass

    def add(self, key: str, val: str) -> None:
        """Adds a (name, value) pair, doesn't overwrite the value if it already
        exists.

        >>> headers = HTTPHeaderDict(foo='bar')
        >>> headers.add('Foo', 'baz')
        >>> headers['foo']
        'bar, baz'
        """
        key_lower = key.lower()
        new_vals = [key, val]
        # Keep the common case aka no item present as fast as possible
        vals = self._container.setdefault(key_lower, new_vals)
        if new_vals is not vals:
            vals.append(val)

    def extend(self, *args: ValidHTTPHeaderSource, **kwargs: str) -> None:
        """Generic import function for any type of header-like object.
        Adapted version of MutableMapping.update in order to insert items
        with self.add instead of self.__setitem__
        """
        if len(args) > 1:
            raise TypeError(
                f"extend() takes at most 1 positional arguments ({len(args)} given)"
            )
        other = args[0] if len(args) >= 1 else ()

        if isinstance(other, HTTPHeaderDict):
            for key, val in other.iteritems():
                self.add(key, val)
        elif isinstance(other, Mapping):
            for key in other:
                self.add(key, other[key])
        elif hasattr(other, "keys"):
            for key in other.keys():  # type: ignore[union-attr]
                self.add(key, other[key])  # type: ignore[index]
        else:
            for key, value in other:
                self.add(key, value)

        for key, value in kwargs.items():
            self.add(key, value)

    def getlist(self, key: str, default: Any = _Null) -> List[str]:
        """Returns a list of all the values for the named field. Returns an
        empty list if the key doesn't exist."""
        try:
            vals = self._container[key.lower()]
        except KeyError:
            if default is _Null:
                return []
            return default  # type: ignore[no-any-return]
        else:
            return vals[1:]

    # Backwards compatibility for http.cookiejar
    get_all = getlist

    def getfirst(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Returns the first value of the named field, or ``default``."""
        vals = self.getlist(key)
        if not vals:
            return default
        return vals[0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.itermerged())})"

    def _copy_from(self, other: "HTTPHeaderDict") -> None:
        for key in other:
            val = other.getlist(key)
            self._container[key.lower()] = [key, *val]

    def copy(self) -> "HTTPHeaderDict":
        clone = type(self)()
        clone._copy_from(self)
        return clone

    def iteritems(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all header lines, including duplicate ones."""
        for key in self:
            vals = self._container[key.lower()]
            for val in vals[1:]:
                yield vals[0], val

    def iteritems_lists(self) -> Iterator[Tuple[str, List[str]]]:
        """Iterate over all headers, one list of values per field."""
        for key in self:
            vals = self._container[key.lower()]
            yield vals[0], vals[1:]

    def itermerged(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all headers, merging duplicate ones together."""
        for key in self:
            val = self._container[key.lower()]
            yield val[0], ", ".join(val[1:])

    def items(self) -> List[Tuple[str, str]]:  # type: ignore[override]
        return list(self.iteritems())
