from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse
from typing import List, Optional

from app.core.dependencies import get_upload_storage
from app.schemas.upload import UploadResponse
from app.services.upload_service import UploadStorage

router = APIRouter(tags=["Uploads"])

# Mounted without the /api prefix: stored files are linked as /uploads/<name>
files_router = APIRouter(prefix="/uploads", tags=["Uploads"])


@router.post("/upload", response_model=UploadResponse)
def upload_files(
    files: Optional[List[UploadFile]] = File(None),
    storage: UploadStorage = Depends(get_upload_storage),
):
    return {"filenames": storage.save_all(files)}


@files_router.get("/{filename}")
def get_uploaded_file(
    filename: str, storage: UploadStorage = Depends(get_upload_storage)
):
    return FileResponse(storage.resolve(filename))
