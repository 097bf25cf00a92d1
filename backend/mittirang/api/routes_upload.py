from fastapi import APIRouter, Depends, File, UploadFile

from mittirang.adapters.media_storage import LocalMediaStorage, StorageError
from mittirang.api.deps import get_settings, get_storage, require_admin
from mittirang.config import Settings
from mittirang.errors import ErrorType
from mittirang.exceptions import AppException

router = APIRouter(prefix="/api/upload", tags=["upload"])


@router.post("", summary="Upload a product image")
async def upload_image(
    file: UploadFile = File(...),
    _admin: str = Depends(require_admin),
    storage: LocalMediaStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    """
    multipart field "file"; returns { "url": "/media/products/<name>" }
    which the admin form appends to the product's images list.
    """
    if not (file.content_type or "").startswith("image/"):
        raise AppException(ErrorType.INVALID_UPLOAD, "Only image files can be uploaded")

    data = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if not data:
        raise AppException(ErrorType.INVALID_UPLOAD, "No file uploaded")
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise AppException(ErrorType.UPLOAD_TOO_LARGE, "File is too large")

    try:
        url = storage.save(data, filename=file.filename, content_type=file.content_type)
    except StorageError as e:
        raise AppException(ErrorType.STORAGE_ERROR, str(e))
    return {"message": "File uploaded successfully", "url": url}
