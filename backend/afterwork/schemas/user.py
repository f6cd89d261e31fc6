"""Pydantic schemas for user records."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class UserUpdate(BaseModel):
    name: Optional[str] = None
    notifications: Optional[bool] = None
    channels: Optional[list[str]] = None
    work_start: Optional[str] = Field(default=None, pattern=r"^\d{1,2}:\d{2}$")
    work_end: Optional[str] = Field(default=None, pattern=r"^\d{1,2}:\d{2}$")
    manual_override: Optional[bool] = None
    override_until: Optional[datetime] = None


class UserOut(BaseModel):
    user_id: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None
    notifications: Optional[bool] = None
    channels: Optional[list[str]] = None
    work_start: Optional[str] = None
    work_end: Optional[str] = None
    manual_override: Optional[bool] = None
    override_until: Optional[datetime] = None
    current_status: Optional[str] = None
    last_processed: Optional[datetime] = None

    model_config = {"from_attributes": True}
