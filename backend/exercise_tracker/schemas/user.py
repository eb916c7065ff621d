"""User Schemas — public projection of a registered user."""

from pydantic import BaseModel


class UserResponse(BaseModel):
    """The only user fields ever exposed."""
    username: str
    id: str
