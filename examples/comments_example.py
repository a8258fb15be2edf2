"""
Example showing how to wire CommentClient with the httpx sender.

This is a small, non-running example (placeholder base_url from the
environment or http://example.com). Failures are reported, not retried.
"""

from comment_client.api.comments import CreateCommentRequest, UpdateCommentRequest
from comment_client.api.core.configuration import ClientConfig
from comment_client.api.core.errors import CommentAPIError, CommentHTTPStatusError
from comment_client.client import CommentClient


if __name__ == "__main__":
    config = ClientConfig.from_env()

    with CommentClient.from_config(config) as api:
        try:
            created = api.create_comment(CreateCommentRequest(name="Ann", text="First!"))
            print("Created:", created.comment)

            updated = api.update_comment(
                UpdateCommentRequest(id=str(created.comment.id), name="Ann", text="Edited")
            )
            print("Updated:", updated.comment)

            for comment in api.list_comments():
                print(comment.id, comment.name, comment.text)
        except CommentHTTPStatusError as exc:
            print("Server answered", exc.status_code, exc.reason)
        except CommentAPIError as exc:
            print(f"Request failed ({exc.kind.value}):", exc.message)
