from pydantic import BaseModel, Field
from typing import Any, List, Optional
from models.common import LocalizedText, SLUG_PATTERN

class PageSeo(BaseModel):
    title: Optional[LocalizedText] = None
    description: Optional[LocalizedText] = None
    keywords: List[str] = Field(default_factory=list)

class PageCreate(BaseModel):
    title: LocalizedText
    slug: str = Field(..., min_length=1, pattern=SLUG_PATTERN)
    content: Any = Field(default_factory=dict)
    seo: PageSeo = Field(default_factory=PageSeo)
    locale: Optional[str] = None

class PageUpdate(BaseModel):
    id: str = Field(..., min_length=1)
    title: Optional[LocalizedText] = None
    slug: Optional[str] = Field(None, min_length=1, pattern=SLUG_PATTERN)
    content: Optional[Any] = None
    seo: Optional[PageSeo] = None
    locale: Optional[str] = None
