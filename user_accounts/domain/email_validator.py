import re

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_valid(candidate: str | None) -> bool:
    """Простая проверка формата email (без RFC 5322), пробелы по краям игнорируются"""
    if candidate is None or not candidate.strip():
        return False
    return EMAIL_PATTERN.fullmatch(candidate.strip()) is not None
