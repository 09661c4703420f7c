"""
Pydantic models for user data.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Juan Pérez"])
    email: str = Field(..., examples=["juan@example.com"])
    age: int = Field(..., ge=0, le=120, examples=[25])


class UserDeleted(BaseModel):
    """Summary returned after a user has been removed."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    deleted_user: UserRead = Field(..., alias="deletedUser")
    remaining_users: int = Field(..., alias="remainingUsers")
