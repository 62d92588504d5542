from typing import IO, Any, Iterable, Union

_TYPE_BODY = Union[bytes, IO[Any], Iterable[bytes], str]

# A response body is either already materialized or a readable source that
# still has to be drained and closed.
_TYPE_RESPONSE_BODY = Union[bytes, str, IO[bytes]]
