from typing import Optional

from ninja import File, Router
from ninja.files import UploadedFile
import structlog

from core.exceptions import StorageError, UploadError
from uploads.schemas import UploadErrorOut, UploadOut
from uploads.services import public_url, store_image

router = Router(tags=["uploads"])
logger = structlog.get_logger(__name__)

@router.post(
    "",
    response={200: UploadOut, 400: UploadErrorOut, 422: UploadErrorOut, 500: UploadErrorOut},
)
def upload_image(request, file: Optional[UploadedFile] = File(None)):
    """Загрузка изображения для редактора, возвращает публичный URL"""
    if file is None:
        logger.warning("image_upload_rejected", code="missing_file")
        return 400, {"error": "No file uploaded"}

    try:
        stored_name = store_image(file)
    except (UploadError, StorageError) as exc:
        logger.warning("image_upload_rejected", code=exc.code, error=exc.detail)
        return exc.status_code, {"error": exc.detail}

    return 200, {"location": public_url(request, stored_name)}
