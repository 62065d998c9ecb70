from __future__ import annotations

import pytest


@pytest.fixture
def anyio_backend() -> str:
    # Adapters rely on asyncio primitives.
    return "asyncio"
