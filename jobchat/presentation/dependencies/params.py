"""Parsing of raw path / query / body ids into value objects."""

from typing import Optional, TypeVar
from fastapi import HTTPException, status

T = TypeVar("T")


def parse_id(id_type: type[T], raw: Optional[str], field: str) -> Optional[T]:
    """
    Wrap raw in id_type, or None when raw is empty.

    Raises:
        HTTPException 400 if raw is not a valid id
    """
    if not raw:
        return None
    try:
        return id_type(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {field}: {raw}",
        ) from None
