from __future__ import annotations

import os
from dataclasses import dataclass, field

import httpx


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_headers(raw: str | None) -> dict[str, str]:
    """Parse 'Key:Value;Key2:Value2' into a header dict."""

    headers: dict[str, str] = {}
    for part in (raw or "").split(";"):
        part = part.strip()
        if not part or ":" not in part:
            continue
        k, v = part.split(":", 1)
        k = k.strip()
        if k:
            headers[k] = v.strip()
    return headers


@dataclass(frozen=True, slots=True)
class BackendRuntimeConfig:
    base_url: str
    timeout_s: float
    headers: dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_env() -> "BackendRuntimeConfig":
        base_url = (os.getenv("WASTE_API_BASE_URL") or "").strip()
        timeout_raw = (os.getenv("WASTE_API_TIMEOUT_S") or "").strip()

        return BackendRuntimeConfig(
            base_url=(base_url or "http://localhost:5000/api").rstrip("/") + "/",
            timeout_s=float(timeout_raw) if timeout_raw else 10.0,
            headers=parse_headers(os.getenv("WASTE_API_HEADERS")),
        )


def backend_client(cfg: BackendRuntimeConfig | None = None) -> httpx.Client:
    cfg = cfg or BackendRuntimeConfig.from_env()
    return httpx.Client(
        base_url=cfg.base_url, timeout=cfg.timeout_s, headers=cfg.headers
    )
