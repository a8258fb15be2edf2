"""
Comments API
============

List, create and update comments.

Endpoints
---------
GET    /comments        → list comments
POST   /comment         → create a comment
PUT    /comment/{id}    → update a comment by ID
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from comment_client.api.core.errors import MalformedResponseError
from comment_client.http_client import CommentHTTPClient

JSON = Dict[str, Any]

REQUIRED_COMMENT_FIELDS = ("id", "name", "text")


# ───────────────────────────────────────────────────────────────
# Dataclasses
# ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Comment:
    """
    A single comment as returned by the API.

    Values are coerced loosely (``int(id)``, ``str(name)``, ``str(text)``) so
    that ``"12"`` and ``12`` parse to the same comment. This is a
    compatibility choice, not validation: only an ``id`` that ``int()``
    rejects is treated as malformed.
    """

    id: int
    name: str
    text: str

    raw: JSON = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Comment":
        if not isinstance(d, Mapping):
            raise MalformedResponseError(
                f"Expected a comment object, got {type(d).__name__}."
            )

        missing = [key for key in REQUIRED_COMMENT_FIELDS if key not in d]
        if missing:
            raise MalformedResponseError(
                f"Comment is missing required fields: {', '.join(missing)}."
            )

        try:
            comment_id = int(d["id"])
        except (TypeError, ValueError, OverflowError) as exc:
            raise MalformedResponseError(f"Comment id {d['id']!r} is not an integer.") from exc

        return cls(
            id=comment_id,
            name=str(d["name"]),
            text=str(d["text"]),
            raw=dict(d),
        )


@dataclass(frozen=True)
class CreateCommentRequest:
    """
    Parameters for POST /comment.
    """

    name: str
    text: str

    def to_payload(self) -> JSON:
        return {"name": self.name, "text": self.text}


@dataclass(frozen=True)
class UpdateCommentRequest:
    """
    Parameters for PUT /comment/{id}.

    ``id`` is interpolated into the path as given; it is not percent-encoded
    beyond httpx's standard path quoting, so ``/`` in an id adds a segment.
    """

    id: str
    name: str
    text: str

    @property
    def path(self) -> str:
        return f"/comment/{self.id}"

    def to_payload(self) -> JSON:
        return {"name": self.name, "text": self.text}


@dataclass(frozen=True)
class CommentsListResult:
    """
    Comments returned by GET /comments, in response order.
    """

    comments: Tuple[Comment, ...]

    @classmethod
    def from_list(cls, items: Any) -> "CommentsListResult":
        if not isinstance(items, list):
            raise MalformedResponseError(
                f"Expected a list of comments, got {type(items).__name__}."
            )
        return cls(comments=tuple(Comment.from_dict(item) for item in items))

    def __len__(self) -> int:
        return len(self.comments)

    def __iter__(self) -> Iterator[Comment]:
        return iter(self.comments)

    @property
    def first(self) -> Optional[Comment]:
        """
        Convenience: return the first comment, if any.
        """
        return self.comments[0] if self.comments else None


@dataclass(frozen=True)
class SingleCommentResult:
    """
    Response of POST /comment and PUT /comment/{id}.
    """

    comment: Comment

    @classmethod
    def from_dict(cls, d: Any) -> "SingleCommentResult":
        return cls(comment=Comment.from_dict(d))


# ───────────────────────────────────────────────────────────────
# CommentsMixin
# ───────────────────────────────────────────────────────────────

class CommentsMixin:
    """
    High-level wrapper for the Comments API.

        client.list_comments()
        client.create_comment(CreateCommentRequest(name="Ann", text="Hi"))
        client.update_comment(UpdateCommentRequest(id="12", name="Ann", text="Bye"))

    Assumes `self._http` is a CommentHTTPClient instance. Every call is one
    request/response round trip; failures propagate as CommentAPIError.
    """

    _http: CommentHTTPClient

    # Core endpoints ---------------------------------------------------------

    def list_comments(self) -> CommentsListResult:
        """
        List all comments.

        Returns:
            CommentsListResult: Parsed comments, in response order.
        """
        resp = self._http.get("/comments")
        return CommentsListResult.from_list(resp)

    def create_comment(self, request: CreateCommentRequest) -> SingleCommentResult:
        """
        Create a comment and return it as stored by the server.
        """
        resp = self._http.post("/comment", json=request.to_payload())
        return SingleCommentResult.from_dict(resp)

    def update_comment(self, request: UpdateCommentRequest) -> SingleCommentResult:
        """
        Replace the name and text of comment ``request.id``.
        """
        resp = self._http.put(request.path, json=request.to_payload())
        return SingleCommentResult.from_dict(resp)

    # Convenience helpers ----------------------------------------------------

    def list_comment_ids(self) -> List[int]:
        """
        Convenience: return just the list of comment IDs.
        """
        return [c.id for c in self.list_comments()]


__all__ = [
    "Comment",
    "CreateCommentRequest",
    "UpdateCommentRequest",
    "CommentsListResult",
    "SingleCommentResult",
    "CommentsMixin",
]
