"""
Availability endpoint payload models.

Pydantic models for decoding the availability endpoint's JSON body.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserNameAvailableMessage(BaseModel):
    """Response body of GET /isUserNameAvailable."""

    model_config = ConfigDict(populate_by_name=True)

    is_available: bool = Field(..., alias="isAvailable")
    user_name: str = Field(..., alias="userName")
