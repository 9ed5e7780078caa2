import json

import httpx

from chaiblog.services.hashnode_client import HashnodeClient


class FakeHashnodeClient:
    """
    Minimal content API stand-in for router tests.
    Records which slugs were requested.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.list_calls = []
        self.post_calls = []

    def list_posts(self, limit: int = 20):
        self.list_calls.append(limit)
        return self._list_posts_return

    def get_post(self, slug: str):
        self.post_calls.append(slug)
        return self._get_post_return


class FakeRenderer:
    """
    Markdown renderer stand-in that tags its input instead of styling it.
    """

    def __init__(self):
        self.calls = []

    def render(self, markdown: str) -> str:
        self.calls.append(markdown)
        return f"<<{markdown}>>\n"


def graphql_client(handler, calls=None) -> HashnodeClient:
    """
    Build a HashnodeClient whose transport answers with handler(request_body).
    handler returns either a dict (sent as JSON) or an httpx.Response.
    """

    def respond(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        if calls is not None:
            calls.append(body)
        result = handler(body)
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, json=result)

    return HashnodeClient(
        "https://gql.example.test",
        "blog.example.test",
        transport=httpx.MockTransport(respond),
    )
