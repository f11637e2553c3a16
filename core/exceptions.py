"""
Исключения API, которые обработчики NinjaAPI превращают в JSON-ответы
"""
from typing import Dict, Optional


class AdminAPIException(Exception):
    """Базовое исключение API с кодом ошибки и HTTP статусом"""

    status_code = 400
    code = "bad_request"
    detail = "Bad request"

    def __init__(
        self,
        detail: Optional[str] = None,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        if detail is not None:
            self.detail = detail
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.detail)


class NotFoundError(AdminAPIException):
    status_code = 404
    code = "not_found"
    detail = "Not found"


class FormValidationError(AdminAPIException):
    """Ошибки валидации полей формы: {поле: сообщение}"""

    status_code = 422
    code = "validation_error"
    detail = "Validation error"

    def __init__(self, errors: Dict[str, str], detail: Optional[str] = None):
        self.errors = errors
        super().__init__(detail=detail)


class UploadError(AdminAPIException):
    status_code = 422
    code = "upload_rejected"
    detail = "Upload rejected"


class StorageError(AdminAPIException):
    status_code = 500
    code = "storage_error"
    detail = "Unable to store the uploaded file"
