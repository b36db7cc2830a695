"""Shared base for models serialized with camelCase wire names."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Difficulty = Literal["Beginner", "Intermediate", "Advanced"]
Priority = Literal["high", "medium", "low"]
LearningPriorityLevel = Literal["High", "Medium", "Low"]
ResourceType = Literal["video", "article", "course", "practice", "project"]


class WireModel(BaseModel):
    """Model whose JSON form uses the camelCase keys the web client expects."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
