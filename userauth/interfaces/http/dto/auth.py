from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict

from . import rules


class RegisterRequestDTO(BaseModel):
    name: Annotated[str, AfterValidator(rules.check_name)]
    email: Annotated[str, AfterValidator(rules.check_email)]
    password: Annotated[str, AfterValidator(rules.check_password)]

    model_config = ConfigDict(extra="ignore")


class LoginRequestDTO(BaseModel):
    name: Annotated[str, AfterValidator(rules.check_present)]
    email: Annotated[str, AfterValidator(rules.check_login_email)]
    password: Annotated[str, AfterValidator(rules.check_not_empty)]

    model_config = ConfigDict(extra="ignore")


class RegisteredUserDTO(BaseModel):
    id: str


class RegisterResponseDTO(BaseModel):
    message: str = "User registered successfully"
    token: str
    user: RegisteredUserDTO


class LoginResponseDTO(BaseModel):
    token: str


class UserSummaryDTO(BaseModel):
    id: str
    name: str
    email: str
