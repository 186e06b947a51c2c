from dataclasses import dataclass

from ..domain.entities import User
from ..domain.roles import Role


@dataclass
class RegisterUserInput:
    email: str | None
    password: str | None
    role: Role | str | None


@dataclass
class UserDTO:
    email: str
    role: str
    can_access_admin_area: bool

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        # пароль наружу не отдаём
        return cls(
            email=user.email,
            role=user.role.value,
            can_access_admin_area=user.can_access_admin_area(),
        )
