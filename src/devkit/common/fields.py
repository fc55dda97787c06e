"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictStr

type JsonDict = dict[str, object]

NonEmptyString = Annotated[StrictStr, Field(min_length=1)]

# File extension without the leading dot (e.g. "rs")
Extension = Annotated[
    StrictStr,
    Field(
        pattern=r"^[A-Za-z0-9_]+$",
        description="File extension without the leading dot",
    ),
]

__all__ = [
    "Extension",
    "JsonDict",
    "NonEmptyString",
]
