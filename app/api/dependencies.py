"""
app/api/dependencies.py

Shared FastAPI dependencies for request validation.
"""

from __future__ import annotations

from fastapi import File, HTTPException, UploadFile, status

JSON_CONTENT_TYPES = {
    "application/json",
    "text/json",
}


def get_json_uploads(files: list[UploadFile] | None = File(default=None)) -> list[UploadFile]:
    """
    Validate that every uploaded file is JSON by extension or MIME type.

    An empty selection is allowed and yields an empty list.
    """

    uploads = list(files or [])
    for upload in uploads:
        filename = (upload.filename or "").strip().lower()
        content_type = (upload.content_type or "").split(";", 1)[0].strip().lower()

        if not filename.endswith(".json") and content_type not in JSON_CONTENT_TYPES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Only JSON files are allowed: {upload.filename or '<unnamed>'}.",
            )

    return uploads
