"""
Middleware для логирования всех HTTP запросов
"""
import time
import uuid

import structlog

from .logging_config import get_user_info

logger = structlog.get_logger(__name__)


def get_client_ip(request):
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')


class RequestLoggingMiddleware:
    """
    Привязывает request_id к контексту structlog и логирует
    каждый запрос со статусом и длительностью
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.META.get('HTTP_X_REQUEST_ID') or uuid.uuid4().hex
        request.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.path,
        )

        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = round((time.monotonic() - started) * 1000, 2)

        # request.auth выставляется django-ninja уже внутри view
        log_data = {
            'status_code': response.status_code,
            'duration_ms': duration_ms,
            'ip_address': get_client_ip(request),
            'user_agent': request.META.get('HTTP_USER_AGENT', ''),
            **get_user_info(request),
        }

        if response.status_code >= 500:
            logger.error("request_failed", **log_data)
        elif response.status_code >= 400:
            logger.warning("request_rejected", **log_data)
        else:
            logger.info("request_completed", **log_data)

        response['X-Request-ID'] = request_id
        structlog.contextvars.clear_contextvars()
        return response
