import structlog

from ..domain.entities import User
from ..domain import password_policy
from ..domain.exceptions import InvalidUserError, UnknownRoleError, WeakPasswordError
from ..domain.roles import Role
from .dto import RegisterUserInput

logger = structlog.get_logger()


def _resolve_role(role):
    try:
        return Role.parse(role)
    except UnknownRoleError:
        # User отклонит роль сам, после проверки email и пароля
        return role


class UserService:
    """Регистрация пользователя: прямой проброс в User.create.

    Состояния нет, ошибки валидации пробрасываются без изменений.
    """

    def register(self, email: str | None, password: str | None, role: Role | str | None) -> User:
        try:
            user = User.create(email, password, _resolve_role(role))
        except InvalidUserError as e:
            logger.info("user_registration_rejected", reason=type(e).__name__, detail=str(e))
            if isinstance(e, WeakPasswordError):
                logger.debug("weak_password", violations=password_policy.violations(password))
            raise
        logger.info("user_registered", email=user.email, role=user.role.value)
        return user

    def register_from(self, payload: RegisterUserInput) -> User:
        return self.register(payload.email, payload.password, payload.role)
