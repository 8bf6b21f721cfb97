from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    price: Optional[float] = None
    description: Optional[str] = Field(default=None, max_length=2000)
    isbn: Optional[str] = Field(default=None, max_length=32)
    nb_of_page: Optional[int] = Field(default=None, alias="nbOfPage")
    illustrations: Optional[bool] = None

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @field_validator("nb_of_page")
    @classmethod
    def validate_nb_of_page(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("nbOfPage must be a positive integer")
        return value

    @field_validator("price")
    @classmethod
    def validate_price(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value < 0:
            raise ValueError("price must not be negative")
        return value


class BookCreate(BookBase):
    """Payload for inserting a new book. Identity is assigned by the store."""


class BookUpdate(BookBase):
    """Full replacement copy of a stored book; the identity comes from the path."""


class BookOut(BookBase):
    id: int

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        extra="forbid",
    )
