"""
Session value object.

A Session is issued and invalidated by the gateway's auth subsystem. The
dashboard only mirrors it for the lifetime of a guarded view.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Session(BaseModel):
    """
    Authenticated user context.

    Examples:
        >>> session = Session(access_token="jwt", user_id="u1", email="a@b.co")
        >>> session.user_id
        'u1'
    """

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(..., description="Opaque bearer token")
    user_id: str = Field(..., min_length=1, description="Gateway user ID")
    email: Optional[str] = Field(default=None, description="User email, if known")
