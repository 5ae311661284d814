import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Status(str, Enum):
    PUBLISHED = "published"
    DRAFT = "draft"


class Layout(str, Enum):
    POST = "post"


class DocumentSummary(BaseModel):
    id: str
    slug: str
    title: str = Field(min_length=1)
    layout: Layout = Layout.POST
    author: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    comments: Optional[bool] = None
    status: Status
    date: Optional[datetime.date] = None
    excerpt: Optional[str] = None
    readingTime: Optional[str] = None


class DocumentDetail(DocumentSummary):
    body: str

    def summary(self) -> DocumentSummary:
        return DocumentSummary(**self.model_dump(exclude={"body"}))

