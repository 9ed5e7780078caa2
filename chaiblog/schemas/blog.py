from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    title: str
    slug: str
    publishedAt: datetime
    brief: str = ""


class PostDetail(BaseModel):
    title: str
    subtitle: Optional[str] = None
    publishedAt: datetime
    tags: List[str] = Field(default_factory=list)
    markdown: str = ""
