from __future__ import annotations

import os

from .settings import DEFAULT_BASE_URL_FORMAT, ClientSettings
from ..domain.exceptions import ConfigurationError


def settings_from_env() -> ClientSettings:
    def _bool(key: str, default: bool = True) -> bool:
        raw = os.getenv(key)
        if raw is None:
            return default
        return str(raw).strip().lower() in {"1", "true", "yes", "on"}

    def _float(key: str, default: float) -> float:
        raw = os.getenv(key)
        if not raw:
            return default
        try:
            return float(raw)
        except ValueError as exc:
            raise ConfigurationError(f"{key} must be a number, got {raw!r}") from exc

    host_identifier = os.getenv("APPSEARCH_HOST_IDENTIFIER")
    api_key = os.getenv("APPSEARCH_API_KEY")
    if not all([host_identifier, api_key]):
        missing = [
            n
            for n, v in [
                ("APPSEARCH_HOST_IDENTIFIER", host_identifier),
                ("APPSEARCH_API_KEY", api_key),
            ]
            if not v
        ]
        raise ConfigurationError(f"Missing App Search settings: {', '.join(missing)}")

    return ClientSettings(
        host_identifier=host_identifier,
        api_key=api_key,
        base_url_format=os.getenv("APPSEARCH_BASE_URL_FORMAT") or DEFAULT_BASE_URL_FORMAT,
        timeout=_float("APPSEARCH_TIMEOUT", 30.0),
        verify_ssl=_bool("VERIFY_SSL", True),
    )
