"""
Database Helpers - lookups and write-time checks shared by every route
"""
from typing import Type, TypeVar, Optional, Any, Dict
from sqlalchemy.orm import Session
from fastapi import HTTPException
from catalog_admin.core.exceptions import ValidationFailed
from catalog_admin.schemas.common import MAX_ROW_ID

T = TypeVar('T')


def _storable_id(value: Any) -> bool:
    """IDs outside the INTEGER range cannot match any row"""
    return isinstance(value, int) and 0 < value <= MAX_ROW_ID


def get_by_id(
    db: Session,
    model: Type[T],
    entity_id: int,
    raise_not_found: bool = True,
    error_message: str = None,
    options: list = None
) -> Optional[T]:
    """
    Fetch an entity by ID.

    Args:
        db: Database session
        model: SQLAlchemy model class
        entity_id: Entity ID
        raise_not_found: Raise HTTPException 404 when missing
        error_message: Custom error message (optional)
        options: Loader options such as joinedload (optional)

    Returns:
        The entity or None

    Raises:
        HTTPException 404 if raise_not_found=True and the entity does not exist

    Usage:
        product = get_by_id(db, Product, product_id)
        product = get_by_id(db, Product, product_id, options=[selectinload(Product.galleries)])
    """
    entity = None
    if _storable_id(entity_id):
        query = db.query(model).filter(model.id == entity_id)
        for opt in options or []:
            query = query.options(opt)
        entity = query.first()

    if not entity and raise_not_found:
        msg = error_message or f"{model.__name__} not found"
        raise HTTPException(status_code=404, detail=msg)

    return entity


def validate_fk(
    db: Session,
    model: Type[T],
    fk_id: Optional[int],
    field_name: str
) -> T:
    """
    Check that a foreign key points at an existing row.

    Args:
        db: Database session
        model: Model the foreign key points at
        fk_id: ID to check
        field_name: Request field, used as the error key

    Returns:
        The referenced entity

    Raises:
        ValidationFailed on field_name if the row does not exist

    Usage:
        supplier = validate_fk(db, Supplier, data.supplier_id, "supplier_id")
    """
    entity = db.get(model, fk_id) if _storable_id(fk_id) else None

    if not entity:
        label = field_name.replace("_", " ")
        raise ValidationFailed.single(field_name, f"The selected {label} is invalid.")

    return entity


def validate_unique(
    db: Session,
    model: Type[T],
    field_name: str,
    field_value: Any,
    scope: Dict[str, Any] = None,
    exclude_id: int = None,
    message: str = None
) -> None:
    """
    Check that a value is not used yet, optionally inside a parent scope.

    Args:
        db: Database session
        model: Model class
        field_name: Column to check
        field_value: Value of the column
        scope: Extra equality filters, e.g. {"product_id": 3}
        exclude_id: Row to ignore (for updates)
        message: Custom error message

    Raises:
        ValidationFailed on field_name if the value is taken

    Usage:
        validate_unique(db, ProductGallery, "order", 2, scope={"product_id": product.id})
        validate_unique(db, Banner, "order", 1, scope={"supplier_id": 4}, exclude_id=banner.id)
    """
    field = getattr(model, field_name)
    query = db.query(model).filter(field == field_value)

    for column, value in (scope or {}).items():
        query = query.filter(getattr(model, column) == value)

    if exclude_id:
        query = query.filter(model.id != exclude_id)

    if query.first():
        label = field_name.replace("_", " ")
        raise ValidationFailed.single(field_name, message or f"The {label} has already been taken.")


def bulk_validate_ids(
    db: Session,
    model: Type[T],
    ids: list[int],
    field_prefix: str
) -> None:
    """
    Check that every ID of a list exists, reporting each bad entry by index.

    Args:
        db: Database session
        model: Model class
        ids: IDs in request order
        field_prefix: Name of the list field, e.g. "banners"

    Raises:
        ValidationFailed with keys like "banners.1.id"
    """
    if not ids:
        return

    lookup = [entity_id for entity_id in ids if _storable_id(entity_id)]
    found_ids = {row.id for row in db.query(model.id).filter(model.id.in_(lookup)).all()}

    errors = {}
    for index, entity_id in enumerate(ids):
        if entity_id not in found_ids:
            key = f"{field_prefix}.{index}.id"
            errors[key] = [f"The selected {key} is invalid."]

    if errors:
        raise ValidationFailed(errors)
