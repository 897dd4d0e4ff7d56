"""Configuration schema using Pydantic for validation."""

from typing import Literal, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

ColorLevel = Literal["none", "basic", "256", "truecolor"]
FlexMode = Literal["full", "full-minus-40", "full-until-compact"]


class WidgetItemModel(BaseModel):
    """Configuration for a single widget instance."""

    type: str
    id: str = Field(default_factory=lambda: str(uuid4()))
    color: Optional[str] = None
    background_color: Optional[str] = None
    bold: Optional[bool] = None
    raw_value: bool = False
    merge_prev: bool = False
    merge_next: bool = False
    padding: Optional[str] = None
    metadata: dict[str, str] = Field(default_factory=dict)


class ThemeColor(BaseModel):
    """One foreground/background pair of a Powerline theme."""

    fg: str
    bg: str


class PowerlineConfig(BaseModel):
    """Powerline layout settings."""

    enabled: bool = False
    theme: Union[str, list[ThemeColor]] = "default"
    separator: str = "\ue0b0"
    start_cap: Optional[str] = None
    end_cap: Optional[str] = None
    auto_align: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("theme")
    @classmethod
    def theme_not_empty(
        cls, value: Union[str, list[ThemeColor]]
    ) -> Union[str, list[ThemeColor]]:
        if isinstance(value, list) and not value:
            raise ValueError("theme must contain at least one color pair")
        return value


class StatusLineConfig(BaseModel):
    """Complete status line configuration."""

    version: int = 1
    color_level: ColorLevel = "basic"
    flex_mode: FlexMode = "full-minus-40"
    compact_threshold: float = Field(default=60.0, ge=0, le=100)
    terminal_width: Optional[int] = Field(default=None, ge=0)
    default_padding: str = " "
    default_separator: Optional[str] = "|"
    separator_color: Optional[str] = "dim"
    override_foreground_color: Optional[str] = None
    override_background_color: Optional[str] = None
    global_bold: bool = False
    powerline: PowerlineConfig = Field(default_factory=PowerlineConfig)
    lines: list[list[WidgetItemModel]] = Field(default_factory=list)

    model_config = {"extra": "forbid"}
