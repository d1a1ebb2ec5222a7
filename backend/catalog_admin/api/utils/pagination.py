"""
Pagination Helpers - paging and filtering of list queries

List endpoints answer {items, total, page, page_size}, items being the
requested slice after ordering.
"""
from typing import Any, Callable, Optional, Sequence, Tuple, Union
from sqlalchemy.orm import Query
from sqlalchemy import or_

OrderBy = Union[Any, Sequence[Any]]


def paginate_response(
    query: Query,
    page: int = 1,
    page_size: int = 10,
    order_by: Optional[OrderBy] = None,
    transform_fn: Optional[Callable[[Any], Any]] = None
) -> dict:
    """
    Slice a query into one page ready for a ListResponse schema.

    Args:
        query: SQLAlchemy query, already filtered
        page: Page number (1-indexed)
        page_size: Rows per page
        order_by: A column or a tuple of columns
        transform_fn: Applied to every row of the page

    Usage:
        return paginate_response(query, page, page_size, (Banner.supplier_id, Banner.order))
        return paginate_response(query, page, page_size, Supplier.name, transform_fn=self._with_count)
    """
    # Total ignores ORDER BY
    total = query.order_by(None).count()

    if isinstance(order_by, (tuple, list)):
        query = query.order_by(*order_by)
    elif order_by is not None:
        query = query.order_by(order_by)

    rows = query.offset((page - 1) * page_size).limit(page_size).all()

    return {
        "items": [transform_fn(row) for row in rows] if transform_fn else rows,
        "total": total,
        "page": page,
        "page_size": page_size
    }


def apply_search_filter(query: Query, search_term: Optional[str], *fields) -> Query:
    """
    Case-insensitive substring match on any of the given fields.

    Usage:
        query = apply_search_filter(query, search, Product.name)
    """
    if not search_term or not fields:
        return query

    pattern = f"%{search_term}%"
    return query.filter(or_(*(field.ilike(pattern) for field in fields)))


def apply_filters(query: Query, *conditions: Tuple[Any, Any]) -> Query:
    """
    Equality filters given as (column, value) pairs. A None value means
    the filter was not requested and is skipped.

    Usage:
        query = apply_filters(query, (Banner.supplier_id, supplier_id), (Banner.is_active, is_active))
    """
    for column, value in conditions:
        if value is not None:
            query = query.filter(column == value)
    return query
