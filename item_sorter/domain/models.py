"""
Domain models for item-sorter.

Defines the fixed-shape item record produced by the loader, the resource
descriptor consumed by resource loaders, and the typed intermediate the parser
emits for each decoded element.
"""
from __future__ import annotations

import datetime as dt
from typing import Dict, Mapping, Union

from pydantic import BaseModel, Field

Scalar = Union[str, int, float, bool, None]
DecodedItem = Mapping[str, Scalar]

FORMAT_JSON = "json"


class Record(BaseModel):
    """
    A single item loaded from a resource.

    `cost` is kept as text on purpose: costs are compared lexically, without
    regard to currency or numeric value.
    """

    id: int = Field(..., description="Item identifier.")
    color: str = Field(..., description="Color label.")
    cost: str = Field(..., description="Cost as decimal text.")
    date: dt.date = Field(..., description="Calendar date of the item.")

    model_config = {"frozen": True}

    @classmethod
    def field_names(cls) -> list[str]:
        return list(cls.model_fields)

    def as_row(self) -> Dict[str, str]:
        """Render every field as text, in declaration order."""
        return {
            "id": str(self.id),
            "color": self.color,
            "cost": self.cost,
            "date": self.date.isoformat(),
        }


class Resource(BaseModel):
    """
    Identifies what to load and from where.

    `path` is a filesystem path or URL; for database resources it is the
    document name only.
    """

    format: str = Field(..., description="Serialization format, e.g. 'json'.")
    path: str = Field(..., description="Path, URL, or database document name.")

    model_config = {"frozen": True}


def JsonResource(path: str) -> Resource:
    """Build a resource whose content is JSON."""
    return Resource(format=FORMAT_JSON, path=path)


__all__ = ["Record", "Resource", "JsonResource", "DecodedItem", "Scalar", "FORMAT_JSON"]
