"""
Post image REST API.

Endpoints:
  PUT /post-image    multipart upload (field "image", optional form field "oldPath")
  PUT /delete-image  JSON body {"imagePath": "..."}

The GraphQL createPost / updatePost mutations only carry the imageUrl;
clients upload the file here first and pass the returned filePath along.
"""

# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.auth_gate import Identity, require_authenticated
from ...application.dto.image_dto import DeleteImageRequest
from ...domain.repositories.image_storage import ImageStorage
from ...di.container import get_container
from .dependencies import get_identity

logger = logging.getLogger(__name__)

router = APIRouter(tags=["images"])

NO_FILE_MESSAGE = "No file provided!"


@router.put("/post-image", status_code=status.HTTP_201_CREATED)
async def upload_post_image(
    image: Optional[UploadFile] = File(default=None),
    old_path: Optional[str] = Form(default=None, alias="oldPath"),
    identity: Identity = Depends(get_identity),
):
    """
    Store an uploaded post image.

    Returns:
      201 {"message": "file stored", "filePath": "<upload dir>/<name>"}
      200 {"message": "No file provided!"} when no acceptable image was sent
    """
    require_authenticated(identity)

    if image is None or not image.filename:
        return JSONResponse(status_code=status.HTTP_200_OK, content={"message": NO_FILE_MESSAGE})

    storage = get_container().get(ImageStorage)
    file_path = await storage.save(image.filename, image.content_type, image.file)
    if file_path is None:
        return JSONResponse(status_code=status.HTTP_200_OK, content={"message": NO_FILE_MESSAGE})

    if old_path:
        await storage.delete(old_path)

    logger.info("Stored image %s", file_path)
    return {"message": "file stored", "filePath": file_path}


@router.put("/delete-image")
async def delete_image(
    request: DeleteImageRequest,
    identity: Identity = Depends(get_identity),
) -> dict:
    require_authenticated(identity)

    await get_container().get(ImageStorage).delete(request.image_path)
    return {"message": "image deleted"}
