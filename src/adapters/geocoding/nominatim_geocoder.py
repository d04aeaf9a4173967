from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import httpx

from src.app.ports.output import IGeocoder
from src.domain.models import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NominatimGeocoder(IGeocoder):
    """Reverse geocoding against a Nominatim-compatible server.

    Env vars:
      - NOMINATIM_URL (default: https://nominatim.openstreetmap.org)
      - GEOCODER_USER_AGENT: Nominatim's usage policy requires one
      - GEOCODER_TIMEOUT_S (default 5)

    Only the first comma-separated part of ``display_name`` is kept, which
    is usually the street or the building.
    """

    base_url: str | None = None
    user_agent: str | None = None
    timeout_s: float = 5.0
    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv(
                "NOMINATIM_URL", "https://nominatim.openstreetmap.org"
            )
        if self.user_agent is None:
            self.user_agent = os.getenv("GEOCODER_USER_AGENT", "cleanroute/0.1")
        if os.getenv("GEOCODER_TIMEOUT_S"):
            self.timeout_s = float(os.environ["GEOCODER_TIMEOUT_S"])

    def reverse(self, point: GeoPoint) -> str | None:
        params = {
            "format": "json",
            "lat": str(point.lat),
            "lon": str(point.lon),
            "zoom": "18",
            "addressdetails": "1",
        }
        try:
            with httpx.Client(
                timeout=self.timeout_s,
                headers={"User-Agent": self.user_agent or ""},
                transport=self.transport,
            ) as client:
                resp = client.get(f"{(self.base_url or '').rstrip('/')}/reverse", params=params)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Reverse geocoding failed for %s: %s", point, exc)
            return None

        display_name = data.get("display_name") if isinstance(data, dict) else None
        if not display_name:
            return None
        return str(display_name).split(",")[0].strip() or None
