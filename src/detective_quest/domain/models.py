"""Content models for the mansion map and the clue/suspect associations."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContentModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class RoomSpec(ContentModel):
    name: str = Field(min_length=1)
    clue: Optional[str] = None
    left: Optional[str] = None
    right: Optional[str] = None

    @field_validator("clue")
    @classmethod
    def _blank_clue_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class SuspectLink(ContentModel):
    clue: str = Field(min_length=1)
    suspect: str = Field(min_length=1)


class MansionContent(ContentModel):
    root: str = Field(min_length=1)
    rooms: List[RoomSpec] = Field(min_length=1)
    suspects: List[SuspectLink] = Field(default_factory=list)

    def room_specs(self) -> dict[str, RoomSpec]:
        return {spec.name: spec for spec in self.rooms}
