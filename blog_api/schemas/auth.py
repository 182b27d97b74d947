from pydantic import BaseModel


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str
    user_id: str
    jti: str
    token_type: str


class AuthenticatedUser(BaseModel):
    """The caller resolved from the bearer token."""

    id: str
    username: str
