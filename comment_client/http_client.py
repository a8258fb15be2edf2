"""
HTTP layer for the comment client.

This module exposes:

- `CommentHTTPSender`: the minimal transport interface the client is given.
  Anything with ``send(httpx.Request) -> httpx.Response`` qualifies, including
  a plain ``httpx.Client``.
- `HttpxCommentSender`: a concrete adapter owning an ``httpx.Client``.
- `CommentHTTPClient`: the request pipeline shared by every API mixin. It
  builds the request, encodes the payload, dispatches it through the sender,
  classifies the status and returns parsed JSON.

Notes:
- Senders signal their own failures by raising ``httpx.RequestError``; the
  pipeline turns those into `TransportFailureError`.
- Only 200 and 201 count as success. Anything else raises `CommentHTTPStatusError`.
- The pipeline has no timeout of its own. Timeouts belong to the sender.
"""

import json as _json
import logging
from typing import Any, Mapping, Optional

import httpx

from comment_client.api.core.configuration import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from comment_client.api.core.errors import (
    CommentHTTPStatusError,
    MalformedRequestError,
    MalformedResponseError,
    TransportFailureError,
)

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODES = frozenset({200, 201})
JSON_MEDIA_TYPE = "application/json"


class CommentHTTPSender:
    """
    Minimal transport interface used by `CommentHTTPClient`.

    Implementations send one request and return the response, raising
    ``httpx.RequestError`` (or a subclass) when no response could be obtained.
    """

    def send(self, request: httpx.Request) -> httpx.Response:
        raise NotImplementedError("CommentHTTPSender.send must be implemented by the transport")

    def close(self) -> None:
        """Release transport resources. Senders without any may keep this no-op."""


class HttpxCommentSender(CommentHTTPSender):
    """
    Synchronous httpx-based implementation of CommentHTTPSender.

    Example:
        with HttpxCommentSender(timeout=5.0) as sender:
            client = CommentClient.from_sender(sender)
            client.list_comments()

    ``transport`` is passed through to ``httpx.Client`` and is mostly useful
    for plugging in ``httpx.MockTransport``.
    """

    def __init__(
        self,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def send(self, request: httpx.Request) -> httpx.Response:
        # Client.send only applies the client timeout to requests it built itself.
        request.extensions.setdefault("timeout", self._client.timeout.as_dict())
        return self._client.send(request)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxCommentSender":
        return self

    def __exit__(self, exc_type: Optional[type], exc: Optional[BaseException], tb: Optional[Any]) -> None:
        self.close()


class CommentHTTPClient:
    """
    Request pipeline for the comment API.

    Every public operation goes through `request`, so header policy,
    encoding, dispatch, status classification and parsing are uniform:

        http = CommentHTTPClient(httpx.Client())
        http.get("/comments")                       # → list
        http.post("/comment", json={"name": ..., "text": ...})  # → dict
    """

    def __init__(self, sender: CommentHTTPSender, base_url: str = DEFAULT_BASE_URL) -> None:
        self._sender = sender
        self._base_url = httpx.URL(base_url)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    def close(self) -> None:
        self._sender.close()

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, *, json: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, *, json: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request("PUT", path, json=json)

    def request(self, method: str, path: str, *, json: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Send one request and return the parsed JSON body.

        Raises:
            MalformedRequestError: ``json`` could not be encoded; nothing is sent.
            TransportFailureError: the sender raised ``httpx.RequestError``.
            CommentHTTPStatusError: the status was not 200 or 201.
            MalformedResponseError: the body was not valid JSON.
        """
        request = self._build_request(method, path, json)

        logger.debug("Sending %s %s", request.method, request.url)
        try:
            response = self._sender.send(request)
            response.read()
        except httpx.RequestError as exc:
            logger.debug("Transport failure for %s %s: %s", request.method, request.url, exc)
            raise TransportFailureError(str(exc) or type(exc).__name__) from exc

        logger.debug("Received %s for %s %s", response.status_code, request.method, request.url)
        if response.status_code not in SUCCESS_STATUS_CODES:
            raise CommentHTTPStatusError(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as exc:
            logger.debug("Undecodable body for %s %s: %s", request.method, request.url, exc)
            raise MalformedResponseError(f"Response body is not valid JSON: {exc}") from exc

    # ── Helpers ─────────────────────────────────────────────────

    def _build_request(
        self,
        method: str,
        path: str,
        payload: Optional[Mapping[str, Any]],
    ) -> httpx.Request:
        headers = {"Accept": JSON_MEDIA_TYPE}
        content: Optional[str] = None

        if payload is not None:
            try:
                content = _json.dumps(payload, allow_nan=False)
            except (TypeError, ValueError) as exc:
                raise MalformedRequestError(f"Request payload could not be encoded: {exc}") from exc
            headers["Content-Type"] = JSON_MEDIA_TYPE

        return httpx.Request(
            method,
            self._base_url.copy_with(path=path),
            headers=headers,
            content=content,
        )


__all__ = [
    "CommentHTTPSender",
    "HttpxCommentSender",
    "CommentHTTPClient",
    "SUCCESS_STATUS_CODES",
]
