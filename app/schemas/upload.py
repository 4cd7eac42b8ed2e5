from pydantic import BaseModel
from typing import List


class UploadResponse(BaseModel):
    filenames: List[str]
