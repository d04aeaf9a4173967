from __future__ import annotations

import os

import httpx
import pytest


def _backend_healthy(base_url: str) -> bool:
    url = base_url.rstrip("/") + "/Route/all"
    try:
        resp = httpx.get(url, timeout=1.5)
    except httpx.HTTPError:
        return False
    return 200 <= resp.status_code < 300


@pytest.fixture(scope="session")
def require_backend() -> str:
    base_url = os.environ.get("WASTE_API_BASE_URL", "http://localhost:5000/api")
    if not _backend_healthy(base_url):
        msg = f"Route backend not reachable at {base_url}"

        # CI is expected to start the backend, so a missing one is a failure there.
        if os.getenv("REQUIRE_BACKEND"):
            pytest.fail(msg, pytrace=False)

        pytest.skip(f"{msg}; skipping integration tests")
    return base_url
