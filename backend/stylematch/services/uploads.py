"""
Image ingress for multipart uploads
"""
from typing import Optional

from fastapi import UploadFile

from stylematch.errors import InvalidUploadError
from stylematch.models.analysis import UploadedImage

DEFAULT_MIME_TYPE = "application/octet-stream"


async def read_upload(upload: Optional[UploadFile], max_bytes: int) -> UploadedImage:
    """
    Buffer an uploaded image fully in memory

    The client's declared MIME type is passed through as-is.
    """
    if upload is None:
        raise InvalidUploadError("No image uploaded")

    # At most one byte past the limit is buffered
    data = await upload.read(max_bytes + 1)
    if not data:
        raise InvalidUploadError("No image uploaded")
    if len(data) > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise InvalidUploadError(f"Image exceeds the {limit_mb}MB upload limit")

    return UploadedImage(
        data=data,
        mime_type=upload.content_type or DEFAULT_MIME_TYPE,
        filename=upload.filename,
    )
