"""
Profile row model.

One row per user in the ``profiles`` table; read-only from the dashboard.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Profile(BaseModel):
    """A row of the ``profiles`` table."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(..., description="Profile ID (same as the auth user ID)")
    full_name: Optional[str] = None
    username: Optional[str] = None
    updated_at: Optional[str] = None
