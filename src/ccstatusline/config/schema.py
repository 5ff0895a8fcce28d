"""Configuration schema using Pydantic for validation."""

from typing import Any, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


class WidgetConfigModel(BaseModel):
    """Configuration for a single widget instance.

    Instances are frozen; editor actions return updated copies.
    """

    type: str
    id: str = Field(default_factory=lambda: str(uuid4()))
    color: Optional[str] = None
    bold: bool = False
    raw_value: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("metadata", mode="before")
    @classmethod
    def _none_metadata_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def with_metadata(self, **updates: str) -> "WidgetConfigModel":
        """Return a copy with the given metadata keys replaced."""
        return self.model_copy(update={"metadata": {**self.metadata, **updates}})


class StatusLineConfig(BaseModel):
    """Complete status line configuration."""

    version: int = 1
    lines: list[list[WidgetConfigModel]] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    def find_item(self, item_id: str) -> Optional[WidgetConfigModel]:
        """Find a configured widget item by id."""
        for line in self.lines:
            for item in line:
                if item.id == item_id:
                    return item
        return None

    def replace_item(self, item: WidgetConfigModel) -> "StatusLineConfig":
        """Return a copy with the item of the same id swapped for ``item``."""
        lines = [[item if w.id == item.id else w for w in line] for line in self.lines]
        return self.model_copy(update={"lines": lines})
