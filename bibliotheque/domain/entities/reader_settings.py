"""Per-reader settings entities."""

from pydantic import BaseModel, ConfigDict, Field


class ReaderSettings(BaseModel):
    """Settings for one reader."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ian",
                "goal": 24,
            }
        }
    )

    name: str = Field(default="", description="Display name of the reader")
    goal: int = Field(default=24, description="Annual target number of books")
