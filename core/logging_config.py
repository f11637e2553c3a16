"""
Настройка structlog и декоратор логирования операций сервисного слоя
"""
import functools
import time

import structlog

logger = structlog.get_logger('core.operations')


def configure_logging():
    """Настройка structlog поверх стандартного logging (см. LOGGING в settings)"""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_user_info(request):
    """Получение информации о пользователе из запроса"""
    user = getattr(request, 'auth', None)
    if user is None or not hasattr(user, 'username'):
        user = getattr(request, 'user', None)

    if user is not None and getattr(user, 'is_authenticated', False):
        return {
            'user_id': str(user.pk),
            'username': user.username,
        }
    return {'user_id': None, 'username': 'anonymous'}


def log_operation(operation: str):
    """
    Декоратор для методов сервисов: пишет длительность операции
    и причину ошибки, исключение пробрасывается дальше
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log = logger.bind(operation=operation)
            started = time.monotonic()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                log.warning(
                    "operation_failed",
                    error=str(exc),
                    error_type=type(exc).__name__,
                    duration_ms=round((time.monotonic() - started) * 1000, 2),
                )
                raise
            log.debug(
                "operation_completed",
                duration_ms=round((time.monotonic() - started) * 1000, 2),
            )
            return result
        return wrapper
    return decorator
