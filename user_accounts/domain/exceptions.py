class InvalidUserError(ValueError):
    """Базовая ошибка валидации пользователя"""
    message = "invalid user"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidEmailError(InvalidUserError):
    message = "email must be valid"


class WeakPasswordError(InvalidUserError):
    message = "password must be strong"


class MissingRoleError(InvalidUserError):
    message = "role must not be null"


class UnknownRoleError(InvalidUserError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"unknown role: {value}")
