"""
Pydantic models for book data.

These schemas define the JSON representation of a book exchanged via
the API.  ``BookBase`` holds the shared fields and their validation
rules; ``BookCreate`` is the request body for creation and full
replacement, and ``BookRead`` adds the identifier for responses.

The publication year travels as ``publicationYear`` on the wire.
Both the alias and the Python field name are accepted on input.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class BookBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255, examples=["Dune"])
    author: str = Field(..., min_length=1, max_length=255, examples=["Frank Herbert"])
    description: Optional[str] = Field(
        None, max_length=1000, examples=["Desert planet, spice and politics"]
    )
    publication_year: int = Field(..., alias="publicationYear", examples=[1965])
    isbn: Optional[str] = Field(None, examples=["978-0-441-17271-9"])
    genre: Optional[str] = Field(None, max_length=100, examples=["Ciencia ficción"])
    available: bool = Field(True, description="Whether the book can be lent")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("title", "author")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class BookCreate(BookBase):
    """Schema for creating or replacing a book.

    An ``id`` sent by the client is accepted for compatibility but
    never used: the store assigns identifiers on creation and the path
    parameter identifies the book on replacement.
    """

    id: Optional[int] = None


class BookRead(BookBase):
    """Schema for reading a book from the API."""

    id: int

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
