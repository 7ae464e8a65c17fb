"""
CV upload in twee stappen:
1. upload-URL aanvragen via /cv/upload
2. ruwe bytes met PUT naar die URL sturen

Type en grootte worden enkel hier (client-side) gecontroleerd.
"""
import logging
import mimetypes
import os

import requests

from .api import ApiError

logger = logging.getLogger(__name__)

MAX_CV_SIZE = 10 * 1024 * 1024  # 10MB
ALLOWED_CV_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


# .docx staat niet in elke mimetypes-tabel
CV_EXTENSIONS = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


class UploadError(Exception):
    pass


def guess_content_type(filename):
    extension = os.path.splitext(filename or "")[1].lower()
    return CV_EXTENSIONS.get(extension) or mimetypes.guess_type(filename or "")[0]


def validate_cv(filename, data, content_type=None):
    """Geeft het content-type terug, of UploadError als het bestand niet mag."""
    content_type = content_type or guess_content_type(filename)
    if content_type not in ALLOWED_CV_TYPES:
        raise UploadError("Please select a PDF, DOC, or DOCX file.")
    if len(data) > MAX_CV_SIZE:
        raise UploadError("File size must be less than 10MB.")
    return content_type


def upload_cv(api_client, filename, data, content_type=None):
    """
    Upload een CV en geef de upload-URL terug.
    - Geen retry: elke fout wordt een UploadError.
    """
    content_type = validate_cv(filename, data, content_type)

    try:
        target = api_client.cv.request_upload()
    except ApiError as e:
        logger.error("Upload error: %s", e)
        raise UploadError("Failed to get upload URL") from e

    upload_url = target.get("uploadURL") if isinstance(target, dict) else None
    if not upload_url:
        raise UploadError("Failed to get upload URL")

    try:
        response = api_client.session.put(
            upload_url,
            data=data,
            headers={"Content-Type": content_type},
        )
    except requests.RequestException as e:
        logger.error("Upload error: %s", e)
        raise UploadError("Failed to upload file") from e

    if not response.ok:
        logger.error("Upload error: %s %s", response.status_code, upload_url)
        raise UploadError("Failed to upload file")

    return upload_url
