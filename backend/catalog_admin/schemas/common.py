from pydantic import BaseModel, Field

# Largest values the INTEGER columns can hold
MAX_ROW_ID = 2**63 - 1
MAX_POSITION = 2**31 - 1


class OptionResponse(BaseModel):
    """(id, name) pair for select inputs"""
    id: int
    name: str

    class Config:
        from_attributes = True


class ReorderItem(BaseModel):
    """New 1-based position of one row"""
    id: int = Field(..., ge=1, le=MAX_ROW_ID, description="Row ID")
    order: int = Field(..., ge=1, le=MAX_POSITION, description="New position (1-based)")


class ReorderResponse(BaseModel):
    """Result of a reorder request"""
    message: str
    updated: int = Field(..., description="Rows whose order was written")
