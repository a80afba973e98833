"""Admiral business group directory.

Fetches the full, unfiltered list of business groups from
``{url}/groups?documentType=true&expand=true``. Every call performs a fresh
request; nothing is cached between calls.
"""

import logging
import time
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from ..core.config import APIConfig, get_config
from ..core.exceptions import DataSourceError
from ..core.models import BusinessGroup
from ..core.types import DataSource
from .base import BaseProvider

logger = logging.getLogger(__name__)

GROUPS_ENDPOINT = "/groups"
GROUPS_PARAMS = {"documentType": "true", "expand": "true"}

# Envelope keys that may carry the array of groups
_LIST_KEYS = ("documents", "content", "items")


class GroupDirectory(Protocol):
    """Anything that returns a fresh snapshot of business groups."""

    def fetch(self) -> list[BusinessGroup]: ...


class BusinessGroupDirectory(BaseProvider):
    """Fetches business groups from the Admiral API."""

    SOURCE = DataSource.ADMIRAL

    def __init__(
        self,
        config: APIConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the directory.

        Args:
            config: Connection settings (defaults to the global config)
            transport: Optional httpx transport, e.g. httpx.MockTransport
        """
        super().__init__()
        self.config = config or get_config()
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.config.groups_url}{GROUPS_ENDPOINT}"

    def is_available(self) -> bool:
        """Check if the groups endpoint answers with a 2xx status."""
        try:
            with httpx.Client(
                timeout=self.config.timeout, transport=self.transport
            ) as client:
                response = client.get(self.url, params=GROUPS_PARAMS)
                return response.is_success
        except httpx.HTTPError:
            return False

    def fetch(self) -> list[BusinessGroup]:
        """
        Fetch the current snapshot of business groups.

        Returns:
            Groups in the order the server returned them

        Raises:
            DataSourceError: On transport, HTTP status or decode failure
        """
        start_time = time.time()
        try:
            payload = self._get()
            groups = self._parse_groups(payload)
        except DataSourceError as e:
            self._record_audit(
                action="fetch",
                endpoint=GROUPS_ENDPOINT,
                success=False,
                error_message=e.message,
                duration_ms=int((time.time() - start_time) * 1000),
            )
            raise

        self._record_audit(
            action="fetch",
            endpoint=GROUPS_ENDPOINT,
            duration_ms=int((time.time() - start_time) * 1000),
            notes=f"{len(groups)} groups",
        )
        logger.debug(f"Fetched {len(groups)} business groups from {self.url}")
        return groups

    def count(self) -> int:
        """Fetch a fresh snapshot and return its size."""
        return len(self.fetch())

    def _get(self) -> Any:
        """Issue the GET and decode the JSON body."""
        try:
            with httpx.Client(
                timeout=self.config.timeout, transport=self.transport
            ) as client:
                response = client.get(self.url, params=GROUPS_PARAMS)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            raise DataSourceError(
                source=self.SOURCE.value,
                message=f"HTTP {e.response.status_code}",
                endpoint=GROUPS_ENDPOINT,
                status_code=e.response.status_code,
            )
        except httpx.RequestError as e:
            raise DataSourceError(
                source=self.SOURCE.value,
                message=str(e) or type(e).__name__,
                endpoint=GROUPS_ENDPOINT,
            )
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise DataSourceError(
                source=self.SOURCE.value,
                message=f"Invalid JSON response: {e}",
                endpoint=GROUPS_ENDPOINT,
            )

    def _parse_groups(self, payload: Any) -> list[BusinessGroup]:
        """Decode a JSON payload into a list of BusinessGroup."""
        items = self._extract_items(payload)
        groups = []
        for item in items:
            try:
                groups.append(BusinessGroup.model_validate(item))
            except ValidationError as e:
                raise DataSourceError(
                    source=self.SOURCE.value,
                    message=f"Invalid business group {item!r}: {e.error_count()} error(s)",
                    endpoint=GROUPS_ENDPOINT,
                )
        return groups

    def _extract_items(self, payload: Any) -> list[Any]:
        """Find the array of groups in a bare list or an envelope."""
        if isinstance(payload, list):
            return payload

        if isinstance(payload, dict):
            links = payload.get("documentLinks")
            documents = payload.get("documents")
            if isinstance(links, list) and isinstance(documents, dict):
                missing = [link for link in links if link not in documents]
                if missing:
                    raise DataSourceError(
                        source=self.SOURCE.value,
                        message=f"Document links without documents: {', '.join(map(str, missing))}",
                        endpoint=GROUPS_ENDPOINT,
                    )
                return [documents[link] for link in links]

            for key in _LIST_KEYS:
                value = payload.get(key)
                if isinstance(value, list):
                    return value

        raise DataSourceError(
            source=self.SOURCE.value,
            message=f"Unexpected response shape: {type(payload).__name__}",
            endpoint=GROUPS_ENDPOINT,
        )
