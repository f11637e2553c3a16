"""
Основной API объект Django Ninja
"""
from typing import Dict

from ninja import NinjaAPI
from ninja.errors import AuthenticationError, ValidationError
from ninja_jwt.authentication import JWTAuth
from ninja_jwt.exceptions import AuthenticationFailed
from django.utils import timezone
import structlog

from core.exceptions import AdminAPIException, FormValidationError
from articles.api import articles_router, categories_router
from uploads.api import router as uploads_router
from users.api import router as auth_router

logger = structlog.get_logger(__name__)

# Создаем основной API объект
api = NinjaAPI(
    title="Content Admin API",
    version="1.0.0",
    description="""
    API админ-панели контента:
    - категории и статьи (списки с поиском и пагинацией, создание, изменение, удаление)
    - загрузка изображений для редактора
    - аутентификация через JWT
    """,
    docs_url="/docs",
    openapi_url="/openapi.json",
    auth=JWTAuth(),
)

# Регистрируем роутеры
api.add_router("/auth", auth_router)
api.add_router("/categories", categories_router)
api.add_router("/articles", articles_router)
api.add_router("/upload", uploads_router)


def format_validation_errors(errors) -> Dict[str, str]:
    """
    Ошибки pydantic -> {поле: сообщение}, по одному сообщению на поле.
    loc имеет вид ("body", "payload", "name") или ("query", "page")
    """
    formatted = {}
    for error in errors:
        parts = [str(part) for part in error.get("loc", ())][1:]
        if len(parts) > 1:
            parts = parts[1:]
        field = ".".join(parts) or "non_field_errors"
        if field in formatted:
            continue

        label = field.split(".")[-1].replace("_", " ")
        if error.get("type") in ("missing", "string_too_short"):
            formatted[field] = f"The {label} field is required."
        else:
            formatted[field] = error.get("msg", "Invalid value.")
    return formatted


# Обработчики ошибок
@api.exception_handler(ValidationError)
def validation_error_handler(request, exc):
    """Обработка ошибок валидации схем"""
    errors = format_validation_errors(exc.errors)
    logger.warning("validation_failed", errors=errors)
    return api.create_response(
        request,
        {"detail": "Validation error", "errors": errors},
        status=422,
    )

@api.exception_handler(AuthenticationFailed)
@api.exception_handler(AuthenticationError)
def authentication_error_handler(request, exc):
    """Обработка ошибок аутентификации"""
    logger.warning("authentication_failed", ip=request.META.get('REMOTE_ADDR'))
    return api.create_response(
        request,
        {"detail": "Unauthorized"},
        status=401,
    )

@api.exception_handler(AdminAPIException)
def admin_api_exception_handler(request, exc):
    """Обработка исключений сервисного слоя"""
    body = {"detail": exc.detail, "code": exc.code}
    if isinstance(exc, FormValidationError):
        body["errors"] = exc.errors

    logger.warning("request_error", detail=exc.detail, code=exc.code, status_code=exc.status_code)
    return api.create_response(request, body, status=exc.status_code)

@api.exception_handler(Exception)
def general_exception_handler(request, exc):
    """Обработка всех остальных исключений"""
    logger.error("unexpected_error", error=str(exc), exc_info=exc)
    return api.create_response(
        request,
        {"detail": "Internal server error"},
        status=500,
    )

# Health check endpoint
@api.get("/health", auth=None, tags=["system"])
def health_check(request):
    """Проверка работоспособности API"""
    return {
        "status": "healthy",
        "service": "content-admin-api",
        "timestamp": timezone.now().isoformat(),
    }
