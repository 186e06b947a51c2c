import re

MIN_LENGTH = 8

# правило -> шаблон, который должен найтись в пароле
CHARACTER_RULES = {
    "lowercase": re.compile(r"[a-z]"),
    "uppercase": re.compile(r"[A-Z]"),
    "digit": re.compile(r"[0-9]"),
    "special": re.compile(r"[^A-Za-z0-9]"),
}


def violations(candidate: str | None) -> list[str]:
    """Возвращает список нарушенных правил; пустой список — пароль надёжный.

    Пароль не обрезается: длина и классы символов считаются по исходной строке.
    """
    if candidate is None or not candidate.strip():
        return ["blank"]
    failed = []
    if len(candidate) < MIN_LENGTH:
        failed.append("min_length")
    for name, pattern in CHARACTER_RULES.items():
        if not pattern.search(candidate):
            failed.append(name)
    return failed


def is_strong(candidate: str | None) -> bool:
    return not violations(candidate)
