"""Minimal HTTP client for the API Builder code generation endpoint.

Only the one call the sync engine needs is implemented:

    GET /{org}/{app}/{version}/{generator}

which returns `{"source": ..., "files": [{"name", "dir", "contents"}]}`.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from apibuilder_sync import __version__
from apibuilder_sync.codegen.models import GeneratedFile
from apibuilder_sync.errors import NotFound, ServerError
from apibuilder_sync.paths import api_token, api_uri

logger = logging.getLogger(__name__)


class ApibuilderClient:
    """Blocking client for fetching generated code. No retries."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = (base_url or api_uri()).rstrip("/")
        headers = {
            "Accept": "application/json",
            "User-Agent": f"apibuilder-sync/{__version__}",
        }
        token = token or api_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
        logger.debug(f"Initialized API Builder client for {self.base_url}")

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ApibuilderClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def get_generated_code(
        self, org: str, app: str, version: str, generator: str,
    ) -> list[GeneratedFile]:
        """Fetch the files a generator produces for one application version.

        Raises:
            NotFound: The server answered 404.
            ServerError: Any other HTTP error, transport failure or bad payload.
        """
        url = "/" + "/".join(quote(part, safe="") for part in (org, app, version, generator))
        logger.debug(f"GET {self.base_url}{url}")

        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            raise ServerError(f"Request to {self.base_url}{url} failed: {e}") from e

        if response.status_code == 404:
            raise NotFound(org, app, version, generator)
        if response.status_code >= 400:
            raise ServerError(
                f"{response.status_code} from {self.base_url}{url}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ServerError(f"Invalid JSON from {self.base_url}{url}: {e}") from e

        return parse_files(data)


def parse_files(data: dict) -> list[GeneratedFile]:
    """Convert a code response payload into GeneratedFile records."""
    if not isinstance(data, dict) or not isinstance(data.get("files"), list):
        raise ServerError("Code response has no 'files' list")

    files = []
    for entry in data["files"]:
        if not isinstance(entry, dict) or not entry.get("name"):
            raise ServerError(f"Malformed file entry in code response: {entry!r}")
        files.append(GeneratedFile(
            name=entry["name"],
            dir=entry.get("dir") or "",
            contents=entry.get("contents") or "",
        ))
    return files
