import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from chaiblog.routers import posts
from chaiblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Server starting on port {settings.PORT}")
    logger.info(
        f"Serving {settings.HASHNODE_PUBLICATION_HOST} via {settings.HASHNODE_GQL_URI}"
    )
    try:
        yield
    finally:
        logger.info("Chai & Blogs shutting down")


app = FastAPI(
    title="Chai & Blogs",
    description="Blog posts rendered for the terminal",
    lifespan=lifespan,
)

app.include_router(posts.router)


def run():
    uvicorn.run(app, host=settings.BIND_ADDRESS, port=settings.PORT)
