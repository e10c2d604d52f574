import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class AuthUser(BaseModel):
    """
    Represents the authenticated principal carried in an access token.
    """

    user_id: uuid.UUID = Field(..., alias="sub")
    email: Optional[EmailStr] = None
    role: str
    team_id: Optional[uuid.UUID] = None

    model_config = ConfigDict(populate_by_name=True)


class PasswordCredentials(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
