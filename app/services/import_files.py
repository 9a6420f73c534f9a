"""
app/services/import_files.py

File handles accepted by the quest import service.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from fastapi import UploadFile


class ImportFileReadError(ValueError):
    """
    Raised when an import file cannot be read as UTF-8 text.
    """


class ImportFile(Protocol):
    name: str

    def read_text(self) -> str:
        ...


def _decode(raw: bytes, name: str) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ImportFileReadError(f"{name} must be UTF-8 encoded.") from exc


class PathImportFile:
    """
    Local file on disk.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self.name = self._path.name

    def read_text(self) -> str:
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise ImportFileReadError(f"Unable to read {self._path}: {exc}") from exc
        return _decode(raw, self.name)


class UploadImportFile:
    """
    Multipart upload received by the API.
    """

    def __init__(self, upload: UploadFile, *, max_bytes: int) -> None:
        self._upload = upload
        self._max_bytes = max(1, max_bytes)
        self.name = upload.filename or "upload.json"

    def read_text(self) -> str:
        raw_file = self._upload.file
        try:
            raw_file.seek(0)
            raw = raw_file.read(self._max_bytes + 1)
        except OSError as exc:
            raise ImportFileReadError(f"Unable to read {self.name}: {exc}") from exc
        if len(raw) > self._max_bytes:
            raise ImportFileReadError(f"{self.name} exceeds the {self._max_bytes} byte limit.")
        return _decode(raw, self.name)
