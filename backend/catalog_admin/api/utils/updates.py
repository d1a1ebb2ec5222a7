"""
Update Helpers - apply validated changes to an entity
"""
from typing import TypeVar, List, Union
from sqlalchemy.orm import Session
from pydantic import BaseModel

T = TypeVar('T')


def update_entity(
    db: Session,
    entity: T,
    update_data: Union[BaseModel, dict],
    exclude_fields: List[str] = None,
    commit: bool = True
) -> T:
    """
    Update an entity from a pydantic schema or a plain dict.

    Only the fields explicitly set on the schema are written.

    Args:
        db: Database session
        entity: Entity to update
        update_data: Schema or dict with the new values
        exclude_fields: Fields to ignore
        commit: Commit and refresh afterwards

    Returns:
        The updated entity

    Usage:
        product = update_entity(db, product, product_update)
        banner = update_entity(db, banner, {"image_path": path}, commit=False)
    """
    if isinstance(update_data, BaseModel):
        data = update_data.model_dump(exclude_unset=True)
    else:
        data = dict(update_data)

    if exclude_fields:
        data = {k: v for k, v in data.items() if k not in exclude_fields}

    for field, value in data.items():
        if hasattr(entity, field):
            setattr(entity, field, value)

    if commit:
        db.commit()
        db.refresh(entity)

    return entity
