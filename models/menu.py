from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Literal, Optional, Union
from models.common import LocalizedText, SLUG_PATTERN

# Bulk documents (menu.json / beverages.json)

class CatalogImage(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: str = Field(..., min_length=1)
    width: Optional[int] = Field(None, gt=0)
    height: Optional[int] = Field(None, gt=0)

class CatalogCategory(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    name: LocalizedText
    slug: Optional[str] = None
    description: Optional[LocalizedText] = None

class CatalogItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    name: LocalizedText
    description: Optional[LocalizedText] = None
    price: Optional[Union[str, int, float]] = None
    categoryId: str = Field(..., min_length=1)
    image: Optional[Union[str, CatalogImage]] = None

class CatalogDocument(BaseModel):
    """Whole-collection payload for a bulk update; both arrays are required."""
    model_config = ConfigDict(extra="allow")

    categories: List[CatalogCategory]
    items: List[CatalogItem]

# Entity-level editor payloads

class CategoryCreate(BaseModel):
    type: Literal["category"]
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    locale: Optional[str] = None

class ItemCreate(BaseModel):
    type: Literal["item"]
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: str = Field(..., min_length=1)
    categoryId: str = Field(..., min_length=1)
    image: Optional[Union[str, CatalogImage]] = None
    locale: Optional[str] = None

class CategoryUpdate(BaseModel):
    type: Literal["category"]
    id: str = Field(..., min_length=1)
    name: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    locale: Optional[str] = None

class ItemUpdate(BaseModel):
    type: Literal["item"]
    id: str = Field(..., min_length=1)
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[str] = Field(None, min_length=1)
    categoryId: Optional[str] = Field(None, min_length=1)
    image: Optional[Union[str, CatalogImage]] = None
    locale: Optional[str] = None

CatalogEntityCreate = Annotated[Union[CategoryCreate, ItemCreate], Field(discriminator="type")]
CatalogEntityUpdate = Annotated[Union[CategoryUpdate, ItemUpdate], Field(discriminator="type")]
