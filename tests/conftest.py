from __future__ import annotations

import pytest

from wgraph.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; drop the cache so env overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
