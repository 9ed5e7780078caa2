import datetime

import httpx
import pytest

from chaiblog.services.hashnode_client import (
    ALL_POSTS_QUERY,
    POST_QUERY,
    HashnodeClient,
    UpstreamError,
)
from tests.conftest import graphql_client


def edges(*nodes):
    return {"data": {"publication": {"posts": {"edges": [{"node": n} for n in nodes]}}}}


def test_list_posts_sends_query_and_keeps_api_order():
    calls = []
    client = graphql_client(
        lambda body: edges(
            {
                "title": "Newer",
                "slug": "newer",
                "publishedAt": "2024-06-01T10:00:00.000Z",
                "brief": "b",
            },
            {
                "title": "Older",
                "slug": "older",
                "publishedAt": "2023-12-31T00:00:00.000Z",
                "brief": "",
            },
        ),
        calls,
    )

    posts = client.list_posts(20)

    assert [p.slug for p in posts] == ["newer", "older"]
    assert posts[0].publishedAt == datetime.datetime(
        2024, 6, 1, 10, tzinfo=datetime.timezone.utc
    )
    assert calls == [
        {
            "query": ALL_POSTS_QUERY,
            "variables": {"host": "blog.example.test", "first": 20},
        }
    ]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"data": None},
        {"data": {"publication": None}},
        {"data": {"publication": {"posts": {"edges": []}}}},
        {"errors": [{"message": "bad host"}]},
    ],
)
def test_list_posts_missing_path_is_empty(payload):
    client = graphql_client(lambda body: payload)

    assert client.list_posts() == []


def test_list_posts_raises_on_malformed_node():
    client = graphql_client(lambda body: edges({"slug": "no-title"}))

    with pytest.raises(UpstreamError):
        client.list_posts()


def test_list_posts_raises_on_non_json():
    client = graphql_client(lambda body: httpx.Response(502, text="<html>bad</html>"))

    with pytest.raises(UpstreamError):
        client.list_posts()


def test_list_posts_raises_on_transport_error():
    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    client = HashnodeClient(
        "https://gql.example.test",
        "blog.example.test",
        transport=httpx.MockTransport(refuse),
    )

    with pytest.raises(UpstreamError):
        client.list_posts()


def test_get_post_maps_fields():
    calls = []
    client = graphql_client(
        lambda body: {
            "data": {
                "publication": {
                    "post": {
                        "title": "Hello",
                        "subtitle": None,
                        "publishedAt": "2024-01-15T09:30:00Z",
                        "content": {"markdown": "# Hello"},
                        "tags": [{"name": "python"}, {"name": "apis"}],
                    }
                }
            }
        },
        calls,
    )

    post = client.get_post("hello")

    assert post.title == "Hello"
    assert post.subtitle is None
    assert post.tags == ["python", "apis"]
    assert post.markdown == "# Hello"
    assert calls[0]["query"] == POST_QUERY
    assert calls[0]["variables"] == {"host": "blog.example.test", "slug": "hello"}


def test_get_post_tolerates_missing_tags():
    client = graphql_client(
        lambda body: {
            "data": {
                "publication": {
                    "post": {
                        "title": "Hello",
                        "publishedAt": "2024-01-15T09:30:00Z",
                        "content": {"markdown": "text"},
                        "tags": None,
                    }
                }
            }
        }
    )

    assert client.get_post("hello").tags == []


def test_get_post_returns_none_when_missing():
    client = graphql_client(lambda body: {"data": {"publication": {"post": None}}})

    assert client.get_post("nope") is None


def test_get_post_raises_on_malformed_post():
    client = graphql_client(
        lambda body: {"data": {"publication": {"post": {"subtitle": "only"}}}}
    )

    with pytest.raises(UpstreamError):
        client.get_post("broken")


def test_client_closes_as_context_manager():
    with graphql_client(lambda body: {}) as client:
        assert client.list_posts() == []

    assert client.http.is_closed


def test_client_opens_connection_pool_lazily():
    calls = []
    client = graphql_client(lambda body: {}, calls)

    assert client._http is None
    client.close()
    assert client._http is None

    client.list_posts()
    assert client._http is not None
    assert len(calls) == 1
