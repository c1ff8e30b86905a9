"""
Data Models
===========
Pydantic models for SDK data structures.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Context(BaseModel):
    """Evaluation context handed to strategies by the evaluation engine."""

    model_config = ConfigDict(extra="forbid")

    app_name: Optional[str] = None
    environment: Optional[str] = None
    user_id: Optional[str] = None
    session_id: Optional[str] = None
    remote_address: Optional[str] = None
    properties: dict[str, str] = Field(default_factory=dict)
