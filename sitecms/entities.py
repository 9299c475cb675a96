"""
Entity descriptors.

Each content kind is described once here: which model backs it, which
flag hides it from public reads, how its lists are ordered, whether it
has a slug, and which columns hold money.  The repository and the query
builder are driven entirely by these descriptors.
"""
import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from sitecms.models import FAQ, BlogPost, ContactMessage, GalleryItem, Page, Product, Service


class Ordering(str, enum.Enum):
    RANK = "rank"  # order_index ascending
    RECENCY = "recency"  # newest first


@dataclass(frozen=True)
class EntityDescriptor:
    name: str
    model: type
    ordering: Ordering
    visibility_flag: str | None = None
    recency_column: str = "created_at"
    slug_column: str | None = None
    money_fields: tuple[str, ...] = ()
    on_create: Callable[[dict], dict] | None = None

    @property
    def table(self) -> str:
        return self.model.__tablename__

    def column(self, name: str):
        return getattr(self.model, name)


def _stamp_published_at(values: dict) -> dict:
    """Set ``published_at`` exactly when the post is created published."""
    values["published_at"] = (
        datetime.now(timezone.utc) if values.get("is_published") else None
    )
    return values


PAGE = EntityDescriptor(
    name="page",
    model=Page,
    ordering=Ordering.RECENCY,
    visibility_flag="is_published",
    slug_column="slug",
)

SERVICE = EntityDescriptor(
    name="service",
    model=Service,
    ordering=Ordering.RANK,
    visibility_flag="is_active",
    money_fields=("price",),
)

PRODUCT = EntityDescriptor(
    name="product",
    model=Product,
    ordering=Ordering.RECENCY,
    visibility_flag="is_active",
    money_fields=("price",),
)

GALLERY_ITEM = EntityDescriptor(
    name="gallery_item",
    model=GalleryItem,
    ordering=Ordering.RANK,
    visibility_flag="is_active",
)

BLOG_POST = EntityDescriptor(
    name="blog_post",
    model=BlogPost,
    ordering=Ordering.RECENCY,
    visibility_flag="is_published",
    recency_column="published_at",
    slug_column="slug",
    on_create=_stamp_published_at,
)

FAQ_ENTRY = EntityDescriptor(
    name="faq",
    model=FAQ,
    ordering=Ordering.RANK,
    visibility_flag="is_active",
)

CONTACT_MESSAGE = EntityDescriptor(
    name="contact_message",
    model=ContactMessage,
    ordering=Ordering.RECENCY,
)

DESCRIPTORS: dict[str, EntityDescriptor] = {
    d.name: d
    for d in (PAGE, SERVICE, PRODUCT, GALLERY_ITEM, BLOG_POST, FAQ_ENTRY, CONTACT_MESSAGE)
}
