"""Data contracts for the theme preference endpoint."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ThemeUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    dark: bool


class ThemeResponse(BaseModel):
    mode: Literal["auto", "light", "dark"]
    dark: bool
    theme: Literal["light", "dark"]
    persisted: bool = False
