"""
Pagination policy and query builder tests: no database needed; the
statements are compiled and inspected as SQL text.
"""
import pytest

from sitecms.entities import (
    BLOG_POST,
    CONTACT_MESSAGE,
    DESCRIPTORS,
    FAQ_ENTRY,
    GALLERY_ITEM,
    PAGE,
    PRODUCT,
    SERVICE,
    Ordering,
)
from sitecms.exceptions import InvalidPagination
from sitecms.pagination import Pagination, normalize
from sitecms.queries import list_query, slug_query


def _sql(stmt) -> str:
    return str(stmt.compile(compile_kwargs={"literal_binds": True}))


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------

def test_normalize_defaults():
    assert normalize() == Pagination(1, 10)
    assert normalize(page=3) == Pagination(3, 10)
    assert normalize(limit=25) == Pagination(1, 25)


def test_offset():
    assert normalize(1, 10).offset == 0
    assert normalize(3, 20).offset == 40


def test_limit_bounds_are_inclusive():
    assert normalize(limit=1).limit == 1
    assert normalize(limit=100).limit == 100


@pytest.mark.parametrize("page, limit", [(0, 10), (-1, 10), (1, 0), (1, 101)])
def test_out_of_range_is_rejected_not_clamped(page, limit):
    with pytest.raises(InvalidPagination):
        normalize(page, limit)


# ---------------------------------------------------------------------------
# descriptors
# ---------------------------------------------------------------------------

def test_every_kind_is_registered():
    assert set(DESCRIPTORS) == {
        "page", "service", "product", "gallery_item", "blog_post", "faq", "contact_message",
    }


def test_orderings():
    assert {d.name for d in DESCRIPTORS.values() if d.ordering is Ordering.RANK} == {
        "service", "gallery_item", "faq",
    }
    assert BLOG_POST.recency_column == "published_at"
    assert PRODUCT.recency_column == "created_at"


def test_only_priced_kinds_use_money_codec():
    assert SERVICE.money_fields == ("price",)
    assert PRODUCT.money_fields == ("price",)
    for d in (PAGE, GALLERY_ITEM, BLOG_POST, FAQ_ENTRY, CONTACT_MESSAGE):
        assert d.money_fields == ()


# ---------------------------------------------------------------------------
# list / slug queries
# ---------------------------------------------------------------------------

def test_rank_query_orders_by_order_index_then_id():
    sql = _sql(list_query(FAQ_ENTRY, normalize(2, 5)))
    assert "faq.is_active IS true" in sql or "faq.is_active IS 1" in sql
    assert "ORDER BY faq.order_index ASC, faq.id ASC" in sql
    assert "LIMIT 5" in sql
    assert "OFFSET 5" in sql


def test_recency_query_orders_newest_first():
    sql = _sql(list_query(BLOG_POST, normalize()))
    assert "ORDER BY blog_posts.published_at DESC, blog_posts.id DESC" in sql


def test_contact_messages_have_no_visibility_filter():
    stmt = list_query(CONTACT_MESSAGE, normalize())
    assert stmt.whereclause is None
    sql = _sql(stmt)
    assert "WHERE" not in sql
    assert "ORDER BY contact_messages.created_at DESC" in sql


def test_slug_query_requires_visibility():
    sql = _sql(slug_query(PAGE, "about"))
    assert "pages.slug = 'about'" in sql
    assert "pages.is_published IS" in sql


def test_slug_query_on_kind_without_slug():
    with pytest.raises(TypeError):
        slug_query(PRODUCT, "anything")


@pytest.mark.parametrize("descriptor", [PAGE, SERVICE, PRODUCT, GALLERY_ITEM, BLOG_POST, FAQ_ENTRY])
def test_flagged_kinds_filter_only_on_their_flag(descriptor):
    where = _sql(list_query(descriptor, normalize())).split("WHERE", 1)[1]
    assert f"{descriptor.table}.{descriptor.visibility_flag} IS" in where
    assert "ORDER BY" in where
