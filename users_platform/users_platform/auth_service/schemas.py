from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# range of a 64-bit signed INTEGER primary key
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class CamelModel(BaseModel):
    """Wire models use camelCase keys but accept field names as well."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(CamelModel):
    access_token: str
    refresh_token: str


class RegisterRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    full_name: str = Field(min_length=1)


class UserResponse(CamelModel):
    """Public projection of a user record."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    email: str
    full_name: str


RegisterResponse = UserResponse


class RefreshTokenResponse(LoginResponse):
    pass


class ValidateRefreshTokenRequest(CamelModel):
    user_id: int = Field(ge=MIN_ID, le=MAX_ID)
    refresh_token: str = Field(min_length=1)


class ValidateRefreshTokenResponse(CamelModel):
    user_id: int


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str
