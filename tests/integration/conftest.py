from __future__ import annotations

import os

import pytest


@pytest.fixture(scope="session")
def require_live_services() -> None:
    """Gate tests that call the public Nominatim/OSRM instances.

    Those services are rate limited and not always reachable, so the tests
    only run when RUN_LIVE_TESTS is set.
    """

    if (os.getenv("RUN_LIVE_TESTS") or "").strip().lower() not in {
        "1",
        "true",
        "yes",
        "on",
    }:
        pytest.skip("RUN_LIVE_TESTS not set; skipping live service tests")
