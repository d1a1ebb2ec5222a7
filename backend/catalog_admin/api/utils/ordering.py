"""
Ordering Helpers - persist positions computed by drag-and-drop lists

The client moves an element (remove at old index, insert at new index),
renumbers the list 1..N and posts the whole list back. The server only
writes the numbers it receives.
"""
import logging
from typing import Any, Iterable, Optional, Tuple, Type, TypeVar
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

T = TypeVar('T')


def reorder_rows(
    db: Session,
    model: Type[T],
    items: Iterable[Any],
    scope: Optional[Tuple[Any, Any]] = None,
    commit: bool = True
) -> int:
    """
    Write the order column of each listed row, one UPDATE per entry.

    Rows that do not belong to the scope are skipped without error. All
    UPDATEs share the session transaction and are committed together.

    Args:
        db: Database session
        model: Model with an `order` column
        items: Objects with `id` and `order` attributes
        scope: (column, value) restricting the rows that may change
        commit: Commit after the last UPDATE

    Returns:
        Number of rows actually updated

    Usage:
        reorder_rows(db, Banner, payload.banners, scope=(Banner.supplier_id, payload.supplier_id))
        reorder_rows(db, ProductCategory, payload.categories)
    """
    updated = 0

    try:
        for item in items:
            query = db.query(model).filter(model.id == item.id)
            if scope is not None:
                column, value = scope
                query = query.filter(column == value)
            updated += query.update({model.order: item.order}, synchronize_session=False)

        if commit:
            db.commit()
    except Exception:
        db.rollback()
        logger.error("Reorder of %s failed, no position was changed", model.__tablename__)
        raise

    logger.info("Reordered %d %s row(s)", updated, model.__tablename__)
    return updated
