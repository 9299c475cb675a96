from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field, PlainSerializer, field_validator

# Decimal in memory, JSON number on the wire.
MoneyOut = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# --- Page ---

class PageCreate(BaseModel):
    slug: str = Field(min_length=1)
    title: str
    meta_title: str | None = None
    meta_description: str | None = None
    content: str
    is_published: bool = True


class PageUpdate(BaseModel):
    slug: str | None = Field(None, min_length=1)
    title: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    content: str | None = None
    is_published: bool | None = None

    @field_validator("slug", "title", "content", "is_published")
    @classmethod
    def _reject_null(cls, value):
        # Omit a field to leave it unchanged; these columns cannot be cleared.
        if value is None:
            raise ValueError("may be omitted but not set to null")
        return value


class PageResponse(BaseModel):
    id: int
    slug: str
    title: str
    meta_title: str | None
    meta_description: str | None
    content: str
    is_published: bool
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Service ---

class ServiceCreate(BaseModel):
    title: str
    description: str
    icon: str | None = None
    price: Decimal | None = Field(None, max_digits=10, decimal_places=2)
    is_active: bool = True
    order_index: int


class ServiceResponse(BaseModel):
    id: int
    title: str
    description: str
    icon: str | None
    price: MoneyOut | None
    is_active: bool
    order_index: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Product ---

class ProductCreate(BaseModel):
    name: str
    description: str
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    image_url: str | None = None
    category: str | None = None
    is_featured: bool = False
    is_active: bool = True


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str
    price: MoneyOut
    image_url: str | None
    category: str | None
    is_featured: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Gallery ---

class GalleryItemCreate(BaseModel):
    title: str
    description: str | None = None
    image_url: str
    category: str | None = None
    order_index: int
    is_active: bool = True


class GalleryItemResponse(BaseModel):
    id: int
    title: str
    description: str | None
    image_url: str
    category: str | None
    order_index: int
    is_active: bool
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Blog post ---

class BlogPostCreate(BaseModel):
    title: str
    slug: str = Field(min_length=1)
    excerpt: str | None = None
    content: str
    featured_image: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    is_published: bool = False


class BlogPostResponse(BaseModel):
    id: int
    title: str
    slug: str
    excerpt: str | None
    content: str
    featured_image: str | None
    meta_title: str | None
    meta_description: str | None
    is_published: bool
    published_at: datetime | None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- FAQ ---

class FaqCreate(BaseModel):
    question: str
    answer: str
    category: str | None = None
    order_index: int
    is_active: bool = True


class FaqResponse(BaseModel):
    id: int
    question: str
    answer: str
    category: str | None
    order_index: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Contact message ---

class ContactMessageCreate(BaseModel):
    name: str
    email: EmailStr
    phone: str | None = None
    subject: str | None = None
    message: str


class ContactMessageResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: str | None
    subject: str | None
    message: str
    is_read: bool
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Health ---

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
