from pydantic import BaseModel, ConfigDict, Field

from typing import Optional


class SignupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: Optional[str] = Field(default=None, alias="fullName")
    # Required in practice; blank or missing values are rejected by the service with a 400
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AccountResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    full_name: str = Field(alias="fullName")
    role: str
    token: str
    status: str
    email: str


class StatusResponse(BaseModel):
    status: str
    role: str


class MessageResponse(BaseModel):
    message: str
