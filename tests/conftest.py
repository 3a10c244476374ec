from __future__ import annotations

import pytest

from grantmatch.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()
