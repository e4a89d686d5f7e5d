"""Media library routes. Uploads are multipart with a single ``file`` field."""

from fastapi import APIRouter, Depends, File, Form, UploadFile

from fullsco.api.crud import mount_crud
from fullsco.api.deps import require_admin, service_dependency
from fullsco.config import settings
from fullsco.schemas.common import Envelope, ok
from fullsco.schemas.media import BulkDeleteRequest, MediaFileResponse
from fullsco.services.media import MediaService

router = APIRouter()
get_media = service_dependency(MediaService)


def media_filters(mime_type: str | None = None) -> dict:
    return {"mime_type": mime_type}


@router.post(
    "/",
    response_model=Envelope[MediaFileResponse],
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def upload_media(
    file: UploadFile = File(...),
    title: str | None = Form(None),
    alt: str | None = Form(None),
    service: MediaService = Depends(get_media),
):
    # One byte over the limit is enough to reject the upload
    data = await file.read(settings.max_upload_size + 1)
    await file.close()
    media = await service.upload(
        original_filename=file.filename or "",
        content_type=file.content_type,
        data=data,
        title=title,
        alt=alt,
    )
    return ok(MediaFileResponse.model_validate(media), "File uploaded")


@router.post(
    "/bulk-delete",
    response_model=Envelope[dict],
    dependencies=[Depends(require_admin)],
)
async def bulk_delete_media(data: BulkDeleteRequest, service: MediaService = Depends(get_media)):
    deleted = await service.bulk_delete(data.ids)
    return ok({"deleted": deleted}, f"Deleted {deleted} file(s)")


mount_crud(
    router,
    MediaService,
    response_model=MediaFileResponse,
    operations=("list", "get", "update", "delete"),
    list_filters=media_filters,
    read_guard=require_admin,
)
