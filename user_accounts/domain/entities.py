from dataclasses import dataclass, field

from . import email_validator, password_policy
from .exceptions import InvalidEmailError, MissingRoleError, UnknownRoleError, WeakPasswordError
from .roles import Role


@dataclass(frozen=True)
class User:
    """Неизменяемый пользователь.

    Все инварианты проверяются в конструкторе в порядке email -> password -> role,
    наружу уходит только первая ошибка. Email хранится обрезанным, пароль — как есть.
    """
    email: str
    password: str = field(repr=False)
    role: Role

    def __post_init__(self):
        if not email_validator.is_valid(self.email):
            raise InvalidEmailError()
        if not password_policy.is_strong(self.password):
            raise WeakPasswordError()
        if self.role is None:
            raise MissingRoleError()
        if not isinstance(self.role, Role):
            raise UnknownRoleError(str(self.role))
        # frozen dataclass: нормализуем email через object.__setattr__
        object.__setattr__(self, "email", self.email.strip())

    @classmethod
    def create(cls, email: str | None, password: str | None, role: Role | None) -> "User":
        return cls(email=email, password=password, role=role)

    def can_access_admin_area(self) -> bool:
        return self.role == Role.ADMIN
