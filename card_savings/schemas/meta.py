"""Pydantic schemas for the health-check and host configuration endpoints."""

from typing import Literal

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str


class HostConfigResponse(BaseModel):
    mode: Literal["auto", "light", "dark"]
    transparentBackground: bool
    version: str
    source: str
