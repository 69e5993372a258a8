from __future__ import annotations

from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def campus_center() -> tuple[float, float]:
    # Mumbai campus gate, used across gate/service/API tests.
    return 19.0760, 72.8777
