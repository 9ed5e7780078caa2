import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from chaiblog.schemas.blog import PostDetail, PostSummary

logger = logging.getLogger(__name__)

ALL_POSTS_QUERY = """
  query GetAllPosts($host: String!, $first: Int!) {
    publication(host: $host) {
      posts(first: $first) {
        edges {
          node {
            title
            slug
            publishedAt
            brief
          }
        }
      }
    }
  }
"""

POST_QUERY = """
  query GetPost($host: String!, $slug: String!) {
    publication(host: $host) {
      post(slug: $slug) {
        title
        subtitle
        publishedAt
        content {
          markdown
        }
        tags {
          name
        }
      }
    }
  }
"""


class UpstreamError(Exception):
    """The content API could not be reached or sent back something unusable."""


class HashnodeClient:
    def __init__(
        self,
        endpoint: str,
        publication_host: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.endpoint = endpoint
        self.publication_host = publication_host
        self.timeout = timeout
        self.transport = transport
        self._http: Optional[httpx.Client] = None

    @property
    def http(self) -> httpx.Client:
        """Connection pool, opened on first request."""
        if self._http is None:
            self._http = httpx.Client(timeout=self.timeout, transport=self.transport)
        return self._http

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        if self._http is not None:
            self._http.close()

    def list_posts(self, limit: int = 20) -> List[PostSummary]:
        data = self._query(
            ALL_POSTS_QUERY, {"host": self.publication_host, "first": limit}
        )
        publication = data.get("publication") or {}
        edges = (publication.get("posts") or {}).get("edges") or []
        try:
            return [PostSummary(**edge["node"]) for edge in edges]
        except (KeyError, TypeError, ValidationError) as e:
            raise UpstreamError(f"Malformed post list: {e}") from e

    def get_post(self, slug: str) -> Optional[PostDetail]:
        data = self._query(POST_QUERY, {"host": self.publication_host, "slug": slug})
        post = (data.get("publication") or {}).get("post")
        if not post:
            return None
        try:
            return PostDetail(
                title=post["title"],
                subtitle=post.get("subtitle"),
                publishedAt=post["publishedAt"],
                tags=[tag["name"] for tag in post.get("tags") or []],
                markdown=(post.get("content") or {}).get("markdown") or "",
            )
        except (KeyError, TypeError, ValidationError) as e:
            raise UpstreamError(f"Malformed post {slug}: {e}") from e

    def _query(self, query: str, variables: dict) -> dict:
        """POST a GraphQL document and return its ``data`` object ({} when absent)."""
        try:
            response = self.http.post(
                self.endpoint,
                json={"query": query, "variables": variables},
                headers={"Content-Type": "application/json"},
            )
            payload = response.json()
        except httpx.HTTPError as e:
            raise UpstreamError(f"Request to {self.endpoint} failed: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"Non-JSON response from {self.endpoint}") from e

        if not isinstance(payload, dict):
            raise UpstreamError(f"Unexpected payload from {self.endpoint}")
        if payload.get("errors"):
            logger.warning(f"GraphQL errors from {self.endpoint}: {payload['errors']}")
        return payload.get("data") or {}
