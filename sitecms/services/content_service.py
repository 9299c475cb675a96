"""
Content handlers.

Each public function here is one remote operation of the site backend.
They hold no state: every call builds a ``ContentRepository`` over the
store it was given and reads through to the database.

Money-valued kinds (services, products) pass through the money codec
inside the repository; the others never touch it.
"""
import logging

from sitecms.entities import (
    BLOG_POST,
    CONTACT_MESSAGE,
    FAQ_ENTRY,
    GALLERY_ITEM,
    PAGE,
    PRODUCT,
    SERVICE,
    EntityDescriptor,
)
from sitecms.models import FAQ, BlogPost, ContactMessage, GalleryItem, Page, Product, Service
from sitecms.repository import ContentRepository
from sitecms.schemas import (
    BlogPostCreate,
    ContactMessageCreate,
    FaqCreate,
    GalleryItemCreate,
    PageCreate,
    PageUpdate,
    ProductCreate,
    ServiceCreate,
)
from sitecms.store import EntityStore

logger = logging.getLogger(__name__)


def _repo(store: EntityStore, descriptor: EntityDescriptor) -> ContentRepository:
    return ContentRepository(store, descriptor)


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

async def get_pages(store: EntityStore, page: int | None = None, limit: int | None = None) -> list[Page]:
    """Published pages, newest first."""
    return await _repo(store, PAGE).list(page, limit)


async def get_page_by_slug(store: EntityStore, slug: str) -> Page | None:
    return await _repo(store, PAGE).get_by_slug(slug)


async def create_page(store: EntityStore, data: PageCreate) -> Page:
    page = await _repo(store, PAGE).create(data)
    logger.info("Created page id=%d slug=%r", page.id, page.slug)
    return page


async def update_page(store: EntityStore, page_id: int, data: PageUpdate) -> Page | None:
    """
    Partially update the page with *page_id*.

    Only fields present in the request are written; ``updated_at``
    advances.  Returns None when the page does not exist.  Unpublished
    pages can be updated too.
    """
    page = await _repo(store, PAGE).update(page_id, data)
    if page is not None:
        logger.info("Updated page id=%d", page.id)
    return page


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------

async def get_services(store: EntityStore, page: int | None = None, limit: int | None = None) -> list[Service]:
    """Active services by ``order_index``."""
    return await _repo(store, SERVICE).list(page, limit)


async def create_service(store: EntityStore, data: ServiceCreate) -> Service:
    return await _repo(store, SERVICE).create(data)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------

async def get_products(store: EntityStore, page: int | None = None, limit: int | None = None) -> list[Product]:
    """Active products, newest first."""
    return await _repo(store, PRODUCT).list(page, limit)


async def create_product(store: EntityStore, data: ProductCreate) -> Product:
    return await _repo(store, PRODUCT).create(data)


# ---------------------------------------------------------------------------
# Gallery
# ---------------------------------------------------------------------------

async def get_gallery_items(store: EntityStore, page: int | None = None, limit: int | None = None) -> list[GalleryItem]:
    return await _repo(store, GALLERY_ITEM).list(page, limit)


async def create_gallery_item(store: EntityStore, data: GalleryItemCreate) -> GalleryItem:
    return await _repo(store, GALLERY_ITEM).create(data)


# ---------------------------------------------------------------------------
# Blog
# ---------------------------------------------------------------------------

async def get_blog_posts(store: EntityStore, page: int | None = None, limit: int | None = None) -> list[BlogPost]:
    """Published posts, most recently published first."""
    return await _repo(store, BLOG_POST).list(page, limit)


async def get_blog_post_by_slug(store: EntityStore, slug: str) -> BlogPost | None:
    return await _repo(store, BLOG_POST).get_by_slug(slug)


async def create_blog_post(store: EntityStore, data: BlogPostCreate) -> BlogPost:
    """
    Create a post.  ``published_at`` is stamped only when the post is
    created published; drafts keep it null.
    """
    post = await _repo(store, BLOG_POST).create(data)
    logger.info(
        "Created blog post id=%d slug=%r published=%s", post.id, post.slug, post.is_published
    )
    return post


# ---------------------------------------------------------------------------
# FAQ
# ---------------------------------------------------------------------------

async def get_faqs(store: EntityStore, page: int | None = None, limit: int | None = None) -> list[FAQ]:
    return await _repo(store, FAQ_ENTRY).list(page, limit)


async def create_faq(store: EntityStore, data: FaqCreate) -> FAQ:
    return await _repo(store, FAQ_ENTRY).create(data)


# ---------------------------------------------------------------------------
# Contact messages
# ---------------------------------------------------------------------------

async def create_contact_message(store: EntityStore, data: ContactMessageCreate) -> ContactMessage:
    message = await _repo(store, CONTACT_MESSAGE).create(data)
    logger.info("Contact message id=%d received", message.id)
    return message


async def get_contact_messages(
    store: EntityStore, page: int | None = None, limit: int | None = None
) -> list[ContactMessage]:
    """All messages, read or unread, newest first."""
    return await _repo(store, CONTACT_MESSAGE).list(page, limit)
