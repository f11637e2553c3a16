"""
Проверка и сохранение изображений, загружаемых из редактора
"""
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage
from PIL import Image, UnidentifiedImageError
import structlog

from core.exceptions import StorageError, UploadError
from core.logging_config import log_operation

logger = structlog.get_logger(__name__)

def get_extension(file_name: str) -> str:
    return os.path.splitext(file_name or '')[1].lstrip('.').lower()


def detect_image_format(upload):
    """
    Формат изображения по содержимому файла (JPEG, PNG, GIF...).
    None, если Pillow не смог распознать и проверить файл.
    """
    try:
        upload.seek(0)
        with Image.open(upload) as image:
            image_format = image.format
            image.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError):
        return None
    finally:
        upload.seek(0)
    return image_format


def validate_image(upload) -> str:
    """
    Проверяет тип, размер и содержимое файла.
    Тип определяется по содержимому, content_type от клиента не учитывается.
    Возвращает расширение файла.
    """
    extension = get_extension(upload.name)
    allowed_extensions = settings.UPLOAD_ALLOWED_EXTENSIONS
    type_error = UploadError(
        f"The file must be a file of type: {', '.join(allowed_extensions)}.",
        code="invalid_type",
    )

    if extension not in allowed_extensions:
        raise type_error

    max_kb = settings.UPLOAD_MAX_SIZE_KB
    if upload.size > max_kb * 1024:
        raise UploadError(
            f"The file must not be greater than {max_kb} kilobytes.",
            code="file_too_large",
        )

    # Принимаются только растровые изображения, svg сюда не проходит
    image_format = detect_image_format(upload)
    if image_format is None:
        raise UploadError("The file must be an image.", code="not_an_image")

    if settings.UPLOAD_IMAGE_FORMATS.get(extension) != image_format:
        logger.warning("image_format_mismatch", extension=extension, image_format=image_format)
        raise type_error

    return extension


@log_operation("store_image")
def store_image(upload) -> str:
    """
    Сохраняет изображение под уникальным именем в публичной директории.
    Возвращает путь внутри хранилища.
    """
    extension = validate_image(upload)
    target = f"{settings.UPLOAD_DIRECTORY}/{uuid.uuid4()}.{extension}"

    try:
        stored_name = default_storage.save(target, upload)
    except OSError as exc:
        # Удаляем частично записанный файл, если он успел появиться
        if default_storage.exists(target):
            default_storage.delete(target)
        logger.error("image_store_failed", target=target, error=str(exc))
        raise StorageError(str(exc)) from exc

    logger.info(
        "image_uploaded",
        stored_name=stored_name,
        original_name=upload.name,
        size=upload.size,
        content_type=upload.content_type,
    )
    return stored_name


def public_url(request, stored_name: str) -> str:
    return request.build_absolute_uri(default_storage.url(stored_name))
