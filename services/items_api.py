"""
Items API client for the remote collection service.

HTTP contract (base path /items):
- GET    /items      - List all items
- POST   /items      - Create an item, server assigns the id
- PATCH  /items/:id  - Apply partial changes, returns the full item
- DELETE /items/:id  - Delete an item, returns {}

Unknown or malformed ids are answered with 404 {"message": "Invalid ID"},
which this client raises as ItemNotFoundError. Every other failure
(transport error, non-2xx status, unexpected payload) is raised as
ItemsAPIError.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from config.settings import get_settings
from models.entities import Item, ItemDraft, ItemUpdate

logger = logging.getLogger(__name__)


class ItemsAPIError(Exception):
    """The remote collection service could not complete a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ItemNotFoundError(ItemsAPIError):
    """The item id does not resolve to a record on the server."""

    def __init__(self, item_id, message: str = "Invalid ID"):
        super().__init__(f"Item {item_id} not found: {message}", status_code=404)
        self.item_id = item_id


class ItemsAPI:
    """Thin httpx client for the /items collection."""

    ITEMS_PATH = "/items"

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            base_url: Service root, defaults to ITEMS_API_URL from settings
            client: Pre-built httpx client (tests pass a FastAPI TestClient);
                relative paths are resolved against its base_url. Pass
                either this or base_url, not both

        Raises:
            ValueError: If both base_url and client are given
        """
        if client is not None and base_url is not None:
            raise ValueError("Pass either base_url or client, not both")

        if client is None:
            settings = get_settings()
            client = httpx.Client(
                base_url=base_url or settings.items_api_url,
                timeout=settings.items_api_timeout,
                headers={"Content-Type": "application/json"},
            )
        self._client = client

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def close(self):
        self._client.close()

    # ==========================================
    # Collection Operations
    # ==========================================

    def list_items(self) -> list[Item]:
        """Fetch the full collection."""
        data = self._request("GET", self.ITEMS_PATH)
        if not isinstance(data, list):
            raise ItemsAPIError(f"Expected a list of items, got {type(data).__name__}")
        return [self._parse_item(entry) for entry in data]

    def create_item(self, draft: ItemDraft) -> Item:
        """Create an item and return it with its server-assigned id."""
        data = self._request("POST", self.ITEMS_PATH, json=draft.to_payload())
        return self._parse_item(data)

    def update_item(self, item_id: int, changes: ItemUpdate) -> Item:
        """Apply partial changes and return the full updated item."""
        data = self._request(
            "PATCH",
            f"{self.ITEMS_PATH}/{item_id}",
            json=changes.to_payload(),
            item_id=item_id,
        )
        return self._parse_item(data)

    def delete_item(self, item_id: int):
        """Delete an item by id."""
        self._request("DELETE", f"{self.ITEMS_PATH}/{item_id}", item_id=item_id)

    # ==========================================
    # Internals
    # ==========================================

    def _request(self, method: str, path: str, json=None, item_id=None):
        """Send a request and return the decoded JSON body."""
        try:
            response = self._client.request(method, path, json=json)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404 and item_id is not None:
                logger.warning(f"{method} {path} -> 404 {e.response.text}")
                raise ItemNotFoundError(item_id, self._error_message(e.response)) from e
            logger.error(f"Items API error: {method} {path} -> {status} - {e.response.text}")
            raise ItemsAPIError(f"Items API error (HTTP {status})", status_code=status) from e
        except httpx.ConnectError as e:
            logger.error(f"Could not connect to items API at {self.base_url}: {e}")
            raise ItemsAPIError(
                "Could not connect to the items API. Check that the server is running."
            ) from e
        except httpx.TimeoutException as e:
            logger.error(f"Items API request timed out: {method} {path}")
            raise ItemsAPIError("Items API request timed out. Please try again.") from e
        except httpx.HTTPError as e:
            logger.error(f"Items API transport error: {method} {path} - {e}")
            raise ItemsAPIError(f"Items API request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Items API returned invalid JSON: {method} {path}")
            raise ItemsAPIError("Items API returned an invalid response") from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return "Invalid ID"
        if isinstance(body, dict):
            return body.get("message", "Invalid ID")
        return "Invalid ID"

    @staticmethod
    def _parse_item(data) -> Item:
        try:
            return Item.model_validate(data)
        except ValidationError as e:
            logger.error(f"Malformed item from items API: {data!r}")
            raise ItemsAPIError(f"Malformed item in response: {e.error_count()} error(s)") from e
