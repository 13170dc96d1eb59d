from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(BaseModel):
    id: str
    username: str
    email: str
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class AuthSession(BaseModel):
    user: User
    token: str


class LoginCredentials(BaseModel):
    email: str
    password: str


class RegisterCredentials(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    email: str
    password: str
    confirm_password: str = Field(alias="confirmPassword")
