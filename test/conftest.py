from __future__ import annotations

import pytest

from httpcompliance import ResponseProtocolCompliance

from . import FIXED_NOW


@pytest.fixture()
def compliance() -> ResponseProtocolCompliance:
    return ResponseProtocolCompliance(now=lambda: FIXED_NOW)
