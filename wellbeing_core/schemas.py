"""
Request models for the presentation layer.

Parse loosely typed payloads (form fields, JSON) into core value
objects. Clamping, needs fallback and gate logic stay in the core;
these models only coerce shapes and types.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .desire import DesireVerdict, evaluate_desire
from .experience import Experience, make_experience
from .world import StateOfTheWorld


class ExperienceParams(BaseModel):
    """
    Reported pain and pleasure of one subject at one instant.
    """
    pain: float = Field(
        default=0.0,
        description="Pain quantity. Sign is ignored, magnitude capped at 10."
    )
    pleasure_quantity: float = Field(
        default=0.0,
        description="Pleasure quantity. Sign is ignored, magnitude capped at 10."
    )
    pleasure_quality: float = Field(
        default=0.0,
        description="Pleasure quality (higher vs. lower pleasures). Capped at 10."
    )

    def to_experience(self) -> Experience:
        return make_experience(self.pain, self.pleasure_quantity, self.pleasure_quality)


class StateOfTheWorldParams(BaseModel):
    """
    One snapshot of a subject's situation, with affected third parties.
    """
    potential_desires: List[Any] = Field(
        default_factory=list,
        description="Potential informed desires of the subject. Only the count matters."
    )
    needs: Optional[Dict[str, Union[float, str]]] = Field(
        default=None,
        description="Basic needs (hunger, thirst, health, security, housing) in [0, 10]. Missing or invalid -> defaults."
    )
    affected_others_current: List[StateOfTheWorldParams] = Field(
        default_factory=list,
        description="States of affected third parties before the desire is satisfied."
    )
    affected_others_result: List[StateOfTheWorldParams] = Field(
        default_factory=list,
        description="Same third parties, same order, after the desire is satisfied."
    )

    @field_validator('needs', mode='after')
    @classmethod
    def coerce_need_values(cls, value):
        if value is None:
            return value
        coerced = {}
        for key, need in value.items():
            if isinstance(need, str):
                try:
                    need = float(need)
                except ValueError:
                    pass
            coerced[key] = need
        return coerced

    def to_state(self) -> StateOfTheWorld:
        return StateOfTheWorld(
            potential_desires=self.potential_desires,
            needs=self.needs,
            affected_others_current=[s.to_state() for s in self.affected_others_current],
            affected_others_result=[s.to_state() for s in self.affected_others_result],
        )


class EvaluateDesireParams(BaseModel):
    """
    A desire: the current state of the world and the wished-for one.
    """
    current: StateOfTheWorldParams = Field(
        description="State of the world before the desire is satisfied."
    )
    wished: StateOfTheWorldParams = Field(
        description="State of the world the subject aims at."
    )

    def evaluate(self) -> DesireVerdict:
        return evaluate_desire(self.current.to_state(), self.wished.to_state())


StateOfTheWorldParams.model_rebuild()
