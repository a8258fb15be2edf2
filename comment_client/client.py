from typing import Any, Optional

import httpx

from comment_client.api.comments import CommentsMixin
from comment_client.api.core.configuration import ClientConfig
from comment_client.http_client import CommentHTTPClient, CommentHTTPSender, HttpxCommentSender

class CommentClient(CommentsMixin):
    def __init__(self, http: CommentHTTPClient):
        self._http = http

    @classmethod
    def from_sender(cls, sender: CommentHTTPSender, config: Optional[ClientConfig] = None) -> "CommentClient":
        """Wire a caller-owned sender. Only ``config.base_url`` is used; the sender owns its timeout."""
        config = config or ClientConfig()
        return cls(CommentHTTPClient(sender, base_url=config.base_url))

    @classmethod
    def from_config(
        cls,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "CommentClient":
        """Build a client on its own HttpxCommentSender using ``config.timeout``. Close it when done."""
        config = config or ClientConfig()
        return cls.from_sender(HttpxCommentSender(timeout=config.timeout, transport=transport), config)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "CommentClient":
        return self

    def __exit__(self, exc_type: Optional[type], exc: Optional[BaseException], tb: Optional[Any]) -> None:
        self.close()
