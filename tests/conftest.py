"""Shared fixtures: comment clients wired to an in-memory httpx transport."""

from typing import Any, Callable, List, Optional

import httpx
import pytest

from comment_client.client import CommentClient

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Every request that reached the mock transport, in order."""
    return []


@pytest.fixture
def make_client(sent_requests: List[httpx.Request]):
    """
    Build a CommentClient whose sender is an httpx.Client on a MockTransport.

    Either pass a canned response (``status_code`` plus ``json`` or raw
    ``content``) or a full ``handler``.
    """
    senders: List[httpx.Client] = []

    def _make(
        status_code: int = 200,
        *,
        json: Any = None,
        content: bytes = b"",
        handler: Optional[Handler] = None,
    ) -> CommentClient:
        def respond(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if handler is not None:
                return handler(request)
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, content=content)

        sender = httpx.Client(transport=httpx.MockTransport(respond))
        senders.append(sender)
        return CommentClient.from_sender(sender)

    yield _make

    for sender in senders:
        sender.close()
