from __future__ import annotations

import logging
import urllib.parse
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from .settings import ClientSettings
from .. import __version__
from ..application.use_cases.issue_search_key import create_signed_search_key
from ..codec.hmac_engine import Secret
from ..domain.exceptions import ClientError, InvalidDocumentError

logger = logging.getLogger(__name__)

CLIENT_NAME = "swiftype-app-search-python"


class AppSearchClient:
    """
    Minimal sync App Search API client.

    - one JSON request per call, bearer-authenticated with the API key
    - non-2xx responses raise ClientError
    - responses are returned as plain dicts / lists
    """

    def __init__(self, settings: ClientSettings, client: Optional[httpx.Client] = None):
        self.s = settings
        self._client = client or httpx.Client(verify=self.s.verify_ssl, timeout=self.s.timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "AppSearchClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        return self.s.base_url

    # ------------------------------------------------------------------ #
    # transport
    # ------------------------------------------------------------------ #

    def _headers(self) -> dict[str, str]:
        return {
            "X-Swiftype-Client": CLIENT_NAME,
            "X-Swiftype-Client-Version": __version__,
            "Authorization": f"Bearer {self.s.api_key}",
            "Content-Type": "application/json",
        }

    def _request(self, method: str, path: str, body: Any = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("App Search request: %s %s", method, path)
        try:
            resp = self._client.request(method, url, headers=self._headers(), json=body)
        except httpx.HTTPError as e:
            raise ClientError("Error making http request") from e

        if not resp.is_success:
            logger.debug("App Search error: %s %s -> %s", method, path, resp.status_code)
            raise ClientError(f"Error: {resp.status_code} {resp.text}")

        try:
            return resp.json()
        except ValueError as e:
            raise ClientError(f"Invalid JSON response from {method} {path}") from e

    @staticmethod
    def _engine_path(engine_name: str, *rest: str) -> str:
        encoded = urllib.parse.quote(engine_name, safe="")
        return "/".join(("engines", encoded, *rest))

    # ------------------------------------------------------------------ #
    # search
    # ------------------------------------------------------------------ #

    def search(
        self,
        engine_name: str,
        query: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {**(options or {}), "query": query}
        return self._request("GET", self._engine_path(engine_name, "search"), body)

    def multi_search(self, engine_name: str, queries: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        body = {"queries": list(queries)}
        return self._request("POST", self._engine_path(engine_name, "multi_search"), body)

    def query_suggestion(
        self,
        engine_name: str,
        query: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {**(options or {}), "query": query}
        return self._request("POST", self._engine_path(engine_name, "query_suggestion"), body)

    # ------------------------------------------------------------------ #
    # engines
    # ------------------------------------------------------------------ #

    def list_engines(self, current: int = 1, size: int = 20) -> Dict[str, Any]:
        body = {"page": {"current": current, "size": size}}
        return self._request("GET", "engines", body)

    def get_engine(self, engine_name: str) -> Dict[str, Any]:
        return self._request("GET", self._engine_path(engine_name))

    def create_engine(self, engine_name: str) -> Dict[str, Any]:
        return self._request("POST", "engines", {"name": engine_name})

    def destroy_engine(self, engine_name: str) -> Dict[str, bool]:
        resp = self._request("DELETE", self._engine_path(engine_name))
        return {k: bool(v) for k, v in (resp or {}).items()}

    # ------------------------------------------------------------------ #
    # documents
    # ------------------------------------------------------------------ #

    def index_document(self, engine_name: str, document: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Index a single document.

        Raises InvalidDocumentError if the API reports errors for it.
        """
        statuses = self.index_documents(engine_name, [document])
        if not statuses:
            raise ClientError("Empty response when indexing document")

        status = dict(statuses[0])
        errors = status.pop("errors", None) or []
        if errors:
            raise InvalidDocumentError(f"Invalid document: {'; '.join(map(str, errors))}")
        return status

    def index_documents(
        self,
        engine_name: str,
        documents: Sequence[Mapping[str, Any]],
    ) -> List[Dict[str, Any]]:
        return self._request("POST", self._engine_path(engine_name, "documents"), list(documents))

    def get_documents(self, engine_name: str, ids: Sequence[str]) -> List[Optional[Dict[str, Any]]]:
        return self._request("GET", self._engine_path(engine_name, "documents"), list(ids))

    def destroy_documents(self, engine_name: str, ids: Sequence[str]) -> List[Dict[str, Any]]:
        return self._request("DELETE", self._engine_path(engine_name, "documents"), list(ids))

    # ------------------------------------------------------------------ #
    # signed search keys
    # ------------------------------------------------------------------ #

    @staticmethod
    def create_signed_search_key(
        api_key: Secret,
        api_key_name: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Create a signed search key that can be used for authentication to
        enforce a set of required search options.
        """
        return create_signed_search_key(api_key, api_key_name, options)
