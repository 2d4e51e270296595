"""
Local user preferences.

UserSettings is stored per local profile, independent of the remote
identity, with camelCase keys (``displayName``, ``weeklyWorkoutGoal``, ...).
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models.workout import Number

UnitSystem = Literal["metric", "imperial"]
Theme = Literal["light", "dark"]

DEFAULT_THEME: Theme = "light"


class UserSettings(BaseModel):
    """
    Dashboard preferences record.

    Examples:
        >>> UserSettings().unit_system
        'metric'
        >>> UserSettings.model_validate({"weeklyWorkoutGoal": 4}).weekly_workout_goal
        4
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    display_name: str = ""
    weekly_workout_goal: Optional[Number] = Field(default=None, ge=0)
    preferred_split: str = ""
    unit_system: UnitSystem = "metric"


DEFAULT_SETTINGS = UserSettings()
