"""
Query builder: turns an entity descriptor into SELECT statements.

Public reads of a kind with a visibility flag always carry it; there is no way to
build a list or slug query that returns hidden rows.  Orderings always
end in the primary key so rows that tie on rank or timestamp come back
in a stable, insertion-derived order.
"""
from sqlalchemy import Select, asc, desc, select

from sitecms.entities import EntityDescriptor, Ordering
from sitecms.pagination import Pagination


def visibility_clause(descriptor: EntityDescriptor):
    """``<flag> IS true`` for kinds with a visibility flag, else None."""
    if descriptor.visibility_flag is None:
        return None
    return descriptor.column(descriptor.visibility_flag).is_(True)


def order_clauses(descriptor: EntityDescriptor) -> tuple:
    pk = descriptor.column("id")
    if descriptor.ordering is Ordering.RANK:
        return (asc(descriptor.column("order_index")), asc(pk))
    return (desc(descriptor.column(descriptor.recency_column)), desc(pk))


def list_query(descriptor: EntityDescriptor, pagination: Pagination) -> Select:
    stmt = select(descriptor.model)
    visible = visibility_clause(descriptor)
    if visible is not None:
        stmt = stmt.where(visible)
    return (
        stmt.order_by(*order_clauses(descriptor))
        .offset(pagination.offset)
        .limit(pagination.limit)
    )


def slug_query(descriptor: EntityDescriptor, slug: str) -> Select:
    """Visible row with *slug*; a hidden row with that slug is not returned."""
    if descriptor.slug_column is None:
        raise TypeError(f"{descriptor.name} has no slug")
    stmt = select(descriptor.model).where(descriptor.column(descriptor.slug_column) == slug)
    visible = visibility_clause(descriptor)
    if visible is not None:
        stmt = stmt.where(visible)
    return stmt.limit(1)


def id_query(descriptor: EntityDescriptor, entity_id: int) -> Select:
    """Primary-key lookup, regardless of visibility (write paths only)."""
    return select(descriptor.model).where(descriptor.column("id") == entity_id)
