"""Shared field types for request/response schemas."""

from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, Field


def _check_uuid(value: str) -> str:
    try:
        return str(UUID(value))
    except ValueError:
        raise ValueError("must be a valid UUID") from None


UuidStr = Annotated[str, AfterValidator(_check_uuid)]
"""A UUID kept in its canonical lowercase, hyphenated string form."""

Name = Annotated[str, Field(min_length=1, max_length=255)]
ShortText = Annotated[str, Field(max_length=255)]

Money = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]
"""A positive amount that fits a NUMERIC(10, 2) column without rounding."""
