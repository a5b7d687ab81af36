from pydantic import BaseModel, ConfigDict, Field


class DesignLimits(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_windows: int = Field(default=20, ge=1, le=100)
    max_colors: int = Field(default=20, ge=1, le=100)
    min_dimension: int = Field(default=1, ge=1)
    max_dimension: int = Field(default=100, ge=1, le=1000)
    default_width: int = Field(default=6, ge=1, le=1000)
    default_height: int = Field(default=6, ge=1, le=1000)
    default_num_colors: int = Field(default=3, ge=1, le=100)
    default_num_windows: int = Field(default=1, ge=1, le=100)


LIMITS = DesignLimits()

MAX_WINDOWS = LIMITS.max_windows
MAX_COLORS = LIMITS.max_colors
