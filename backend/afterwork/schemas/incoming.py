"""Pydantic schemas for the chat webhook."""
from __future__ import annotations
from typing import Optional, Union
from pydantic import BaseModel


class Sender(BaseModel):
    id: Optional[Union[str, int]] = None
    name: Optional[str] = None


class Message(BaseModel):
    text: Optional[str] = None


class IncomingPayload(BaseModel):
    sender: Optional[Sender] = None
    message: Optional[Message] = None


class Reply(BaseModel):
    text: str
