import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from chaiblog import dependencies as deps
from chaiblog.services.hashnode_client import HashnodeClient
from chaiblog.services.html_template import wrap_pre
from chaiblog.services.terminal_renderer import MarkdownRenderer
from chaiblog.services.text_formatter import format_listing, format_post
from chaiblog.settings import Settings
from chaiblog.utils import is_terminal_agent

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def list_posts(
    client: HashnodeClient = Depends(deps.get_hashnode_client),
    settings: Settings = Depends(deps.get_settings),
):
    """Listing of the most recent posts with a curl command for each."""
    try:
        posts = client.list_posts(settings.POSTS_LIMIT)
        output = format_listing(posts, settings.HOST, settings.HASHNODE_FULL_URL)
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        return HTMLResponse(wrap_pre("Error fetching articles."), status_code=500)
    return HTMLResponse(wrap_pre(output))


@router.get("/{slug}", response_class=HTMLResponse)
def get_post(
    slug: str,
    user_agent: Optional[str] = Header(default=None),
    client: HashnodeClient = Depends(deps.get_hashnode_client),
    renderer: MarkdownRenderer = Depends(deps.get_renderer),
    settings: Settings = Depends(deps.get_settings),
) -> Response:
    """Render a single post for terminals, redirect everyone else to the blog."""
    post_url = settings.post_url(slug)
    if not is_terminal_agent(user_agent, settings.TERMINAL_AGENT_MARKER):
        return RedirectResponse(post_url, status_code=302)

    try:
        post = client.get_post(slug)
        if not post:
            return HTMLResponse(
                wrap_pre("\nError: Article not found.\n"), status_code=404
            )
        output = format_post(post, post_url, renderer)
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        return HTMLResponse(
            wrap_pre("Something went wrong fetching the article."), status_code=500
        )
    return HTMLResponse(wrap_pre(output))
