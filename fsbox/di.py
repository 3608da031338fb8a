# fsbox/di.py
from dataclasses import dataclass
from typing import Optional
from fsbox.config import Settings
from fsbox.services.filesystem import FileSystemService
from fsbox.services.storage import LocalStorage

@dataclass
class Container:
    settings: Settings
    fs_service: FileSystemService

def build_container(settings: Optional[Settings] = None) -> Container:
    s = settings or Settings()
    storage = LocalStorage(chunk_size=s.COPY_CHUNK_SIZE)
    fs = FileSystemService(s.SANDBOX_ROOT, storage=storage)
    return Container(s, fs)
