"""Pydantic models describing the mailterm configuration document."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AccountConfig(BaseModel):
    """Credentials and server settings for the single configured mailbox."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)
    host: str = "imap.gmail.com"
    port: int = Field(default=993, gt=0, lt=65536)
    ssl: bool = True
    mailbox: str = "INBOX"
    page_size: int = Field(default=8, gt=0)
    timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("username", "host", "mailbox")
    @classmethod
    def _strip(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("value must not be blank")
        return stripped
