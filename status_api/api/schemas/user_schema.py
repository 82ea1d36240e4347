# status_api/api/schemas/user_schema.py
from dataclasses import asdict
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from status_api.entities.user import User, UserPatch

# strict: tipo JSON errado = corpo ilegível (400); campo ausente = validação (422)
_request_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    strict=True,
    extra="ignore",
)


class UserRequest(BaseModel):
    model_config = _request_config

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    age: int | None = None
    is_active: bool = True
    is_system_account: bool = False

    def to_entity(self) -> User:
        return User(
            email=self.email or "",
            first_name=self.first_name or "",
            last_name=self.last_name or "",
            age=self.age if self.age is not None else 0,
            is_active=self.is_active,
            is_system_account=self.is_system_account,
        )


class UserPatchRequest(BaseModel):
    model_config = _request_config

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    age: int | None = None
    is_active: bool | None = None

    def to_patch(self) -> UserPatch:
        return UserPatch(
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
            is_active=self.is_active,
        )


class UserResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    email: str
    first_name: str
    last_name: str
    age: int
    created_at: datetime
    updated_at: datetime | None = None
    is_active: bool
    is_system_account: bool

    @classmethod
    def from_entity(cls, user: User) -> dict:
        return cls.model_validate(asdict(user)).model_dump(mode="json", by_alias=True)
