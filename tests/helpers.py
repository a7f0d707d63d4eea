"""Test helpers shared across modules."""

import httpx

from services.items_api import ItemsAPI


def make_api(handler) -> ItemsAPI:
    """ItemsAPI whose requests are answered by `handler(request)`."""
    transport = httpx.MockTransport(handler)
    return ItemsAPI(client=httpx.Client(transport=transport, base_url="http://items.test"))
