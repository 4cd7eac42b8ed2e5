from fastapi import UploadFile
from pathlib import Path
from typing import List, Optional
import logging
import os
import secrets
import shutil
import time

from app.utils.exceptions import (
    NoFilesProvidedError,
    TooManyFilesError,
    UploadedFileNotFoundError,
)

logger = logging.getLogger(__name__)


def generate_filename(original_name: Optional[str]) -> str:
    """``<ms timestamp>-<jeton aléatoire><extension d'origine>``"""
    extension = os.path.splitext(os.path.basename(original_name or ""))[1]
    return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}{extension}"


class UploadStorage:
    """Images produit stockées à plat dans un répertoire partagé.

    Aucun lien avec les documents produit : un fichier jamais rattaché (ou
    dont le produit a été supprimé) reste simplement sur le disque.
    """

    def __init__(self, directory: str, max_files: int = 10):
        self.directory = Path(directory)
        self.max_files = max_files

    def ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def save_all(self, files: Optional[List[UploadFile]]) -> List[str]:
        files = [f for f in (files or []) if f is not None and f.filename]

        if not files:
            logger.error("No files received for upload.")
            raise NoFilesProvidedError()

        if len(files) > self.max_files:
            logger.warning(f"Upload rejected: {len(files)} files (max {self.max_files})")
            raise TooManyFilesError(self.max_files)

        self.ensure_directory()
        filenames = [self._save(upload) for upload in files]

        logger.info(f"Files uploaded successfully: {filenames}")
        return filenames

    def resolve(self, filename: str) -> Path:
        if (
            not filename
            or filename in (".", "..")
            or "/" in filename
            or "\\" in filename
        ):
            raise UploadedFileNotFoundError(filename)

        path = self.directory / filename
        if not path.is_file():
            raise UploadedFileNotFoundError(filename)

        return path

    def _save(self, upload: UploadFile) -> str:
        while True:
            filename = generate_filename(upload.filename)
            try:
                # "x" never overwrites an existing upload
                with open(self.directory / filename, "xb") as out:
                    upload.file.seek(0)
                    shutil.copyfileobj(upload.file, out)
                return filename
            except FileExistsError:
                continue
