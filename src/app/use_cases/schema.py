"""
Base class for use case response DTOs.

Fields are declared snake_case and serialized camelCase, the shape the
web client consumes.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.entities import User


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserSummary(CamelModel):
    """A user as embedded in other resources"""

    id: UUID
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserSummary":
        return cls(id=user.id, name=user.name, email=user.email)


class TeamSummary(CamelModel):
    id: UUID
    name: str
