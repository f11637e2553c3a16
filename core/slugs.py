import random

SLUG_MAX_LENGTH = 255
SLUG_SUFFIX_MIN = 1000
SLUG_SUFFIX_MAX = 9999
# "-" + четыре цифры суффикса
SLUG_BASE_MAX_LENGTH = SLUG_MAX_LENGTH - 5


def generate_slug(value: str) -> str:
    """
    Slug из отображаемого имени: пробелы -> дефисы, нижний регистр
    и случайный четырехзначный суффикс. Уникальность не проверяется.
    Основа обрезается, чтобы slug помещался в колонку.
    """
    base = value.replace(' ', '-').lower()[:SLUG_BASE_MAX_LENGTH]
    return f"{base}-{random.randint(SLUG_SUFFIX_MIN, SLUG_SUFFIX_MAX)}"


def resolve_slug(value: str, explicit_slug=None) -> str:
    """Явно переданный slug или новый, сгенерированный из value"""
    if explicit_slug and explicit_slug.strip():
        return explicit_slug.strip()
    return generate_slug(value)
