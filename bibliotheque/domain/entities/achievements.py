"""Challenge and badge entities."""

from pydantic import BaseModel, ConfigDict, Field


class AchievementProgress(BaseModel):
    """Evaluated state of one challenge or badge.

    ``progress`` is not capped; callers cap it at 100 for display.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Stable identifier of the achievement")
    title: str
    description: str
    icon: str = ""
    current: float = Field(description="Current value of the tracked metric")
    target: float = Field(gt=0)
    progress: float = Field(ge=0, description="Percent of target reached, uncapped")
    completed: bool
