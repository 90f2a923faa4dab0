"""Pydantic models for structured roll output."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RollResult(BaseModel):
    notation: str = Field(description="Grouped notation of the rolled dice, e.g. '2d4 + 1d20'.")
    kind: str = Field(description="Name of the rollable type the dice were rolled over.")
    faces: list[int] = Field(
        min_length=1,
        description="Current value of every die, in collection order.",
    )
    total: int = Field(description="Sum of all faces.")
