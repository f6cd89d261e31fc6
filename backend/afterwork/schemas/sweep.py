"""Pydantic schemas for on-demand sweeps."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class SweepOut(BaseModel):
    processed: list[str] = []
    skipped: list[str] = []
    failed: list[str] = []
    completed_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
