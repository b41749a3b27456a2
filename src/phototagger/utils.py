"""Shared helpers for the phototagger client."""

from __future__ import annotations

import base64
from typing import Optional


def basic_authorization(api_key: str, api_secret: str) -> str:
    """Return an ``Authorization`` header value for HTTP Basic auth."""
    token = base64.b64encode(f"{api_key}:{api_secret}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def resolve_authorization(
    authorization: Optional[str],
    api_key: Optional[str],
    api_secret: Optional[str],
) -> Optional[str]:
    """Pick the explicit credential, else build one from an API key pair."""
    if authorization:
        return authorization
    if api_key and api_secret:
        return basic_authorization(api_key, api_secret)
    return None


def clamp_fraction(value: float) -> float:
    """Clamp a progress fraction into ``[0, 1]``."""
    return max(0.0, min(1.0, float(value)))
