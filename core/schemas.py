from ninja import Schema
from typing import Dict, Optional
from pydantic import Field, constr


# Обязательная строка: пробелы по краям обрезаются, пустая строка не проходит
RequiredStr = constr(strip_whitespace=True, min_length=1)
RequiredName = constr(strip_whitespace=True, min_length=1, max_length=255)
# Явно заданный slug, пустой означает "сгенерировать заново"
SlugStr = constr(strip_whitespace=True, max_length=255)

# Номер страницы больше этого отклоняется валидацией
MAX_PAGE = 1_000_000


class ListFilters(Schema):
    search: Optional[str] = None


class PageMeta(Schema):
    current_page: int
    last_page: int
    per_page: int
    total: int
    from_: Optional[int] = Field(None, alias="from")
    to: Optional[int] = None


class MessageOut(Schema):
    success: bool = True
    message: str


class ErrorResponse(Schema):
    detail: str
    code: Optional[str] = None


class ValidationErrorResponse(Schema):
    detail: str
    errors: Dict[str, str]
