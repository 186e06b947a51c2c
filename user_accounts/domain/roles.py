from enum import Enum

from .exceptions import UnknownRoleError


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: "str | Role | None") -> "Role | None":
        """Приводит имя роли ("admin", "ADMIN", " User ") к Role.

        None возвращается как есть: отсутствие роли отклоняет уже конструктор User.
        """
        if value is None or isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownRoleError(str(value))
        key = value.strip().lower()
        for role in cls:
            if key == role.value:
                return role
        raise UnknownRoleError(value)
