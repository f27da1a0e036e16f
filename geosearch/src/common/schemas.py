from __future__ import annotations
from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(v: Any) -> str:
    return v if isinstance(v, str) else ""


def _as_labels(v: Any) -> List[str]:
    # a single label is a one-element list; any other shape counts as absent
    if isinstance(v, str):
        return [v]
    if isinstance(v, (list, tuple)):
        return [x for x in v if isinstance(x, str)]
    return []


class Item(BaseModel):
    """A searchable record as seen by the engine. Extra caller keys are kept."""
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = ""
    description: str = ""
    location: str = ""
    type: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    @field_validator("name", "description", "location", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator("type", "tags", mode="before")
    @classmethod
    def _labels(cls, v: Any) -> List[str]:
        return _as_labels(v)


class Region(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = ""
    settlements: List[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator("settlements", mode="before")
    @classmethod
    def _settlements(cls, v: Any) -> List[str]:
        if isinstance(v, (list, tuple)):
            return [x for x in v if isinstance(x, str)]
        return []


def as_item(record: Any) -> Item:
    """Coerce a caller record (model, mapping, or anything else) into an Item."""
    if isinstance(record, Item):
        return record
    if isinstance(record, BaseModel):
        record = record.model_dump()
    if not isinstance(record, dict):
        return Item()
    return Item.model_validate({k: v for k, v in record.items() if isinstance(k, str)})


def as_region(record: Any) -> Region:
    if isinstance(record, Region):
        return record
    if isinstance(record, BaseModel):
        record = record.model_dump()
    if not isinstance(record, dict):
        return Region()
    return Region.model_validate({k: v for k, v in record.items() if isinstance(k, str)})
