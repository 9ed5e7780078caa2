from fastapi import Depends

from chaiblog.services.hashnode_client import HashnodeClient
from chaiblog.services.terminal_renderer import RichMarkdownRenderer
from chaiblog.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_hashnode_client(current_settings: Settings = Depends(get_settings)):
    client = HashnodeClient(
        current_settings.HASHNODE_GQL_URI,
        current_settings.HASHNODE_PUBLICATION_HOST,
        timeout=current_settings.HASHNODE_TIMEOUT_SECONDS,
    )
    try:
        yield client
    finally:
        client.close()


def get_renderer(current_settings: Settings = Depends(get_settings)):
    return RichMarkdownRenderer(width=current_settings.RENDER_WIDTH)
