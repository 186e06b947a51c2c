from .application.user_service import UserService
from .infrastructure.logging_config import configure_logging

# Настройка структурированного логирования
configure_logging()

user_service = UserService()
