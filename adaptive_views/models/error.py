"""
View models for adaptive-views
"""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field


class ErrorViewModel(BaseModel):
    """Model passed to the Error view."""

    request_id: Optional[str] = Field(None, description="Identifier of the failed request")

    @property
    def show_request_id(self) -> bool:
        return bool(self.request_id)
