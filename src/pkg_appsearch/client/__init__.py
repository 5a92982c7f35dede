"""
pkg_appsearch.client

Sync App Search API client:

- ClientSettings: host identifier, API key, base URL format.
- AppSearchClient: httpx-based client for search, engines and documents.
- settings_from_env: env-driven settings for scripts and the CLI.
"""

from __future__ import annotations

from .client import AppSearchClient
from .env import settings_from_env
from .settings import ClientSettings

__all__ = [
    "AppSearchClient",
    "ClientSettings",
    "settings_from_env",
]
