from __future__ import annotations

import io
from datetime import datetime, timezone

# A fixed instant used wherever a test needs "now".
FIXED_NOW = datetime(2020, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
FIXED_NOW_HEADER = "Wed, 01 Jan 2020 00:00:00 GMT"


class TrackingBytesIO(io.BytesIO):
    """A streaming body that records how often it was read from and closed."""

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)
        self.close_calls = 0
        self.read_calls = 0

    def read(self, size: int | None = -1) -> bytes:
        self.read_calls += 1
        return super().read(size)

    def close(self) -> None:
        self.close_calls += 1
        super().close()


class BrokenStream:
    """A streaming body whose connection dies while it is being drained."""

    def __init__(self) -> None:
        self.closed = False

    def read(self, size: int = -1) -> bytes:
        raise ConnectionResetError("connection reset by peer")

    def close(self) -> None:
        self.closed = True


class UnclosableStream(io.BytesIO):
    """A streaming body whose connection fails while it is being closed."""

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()
        raise OSError("connection reset while closing")
