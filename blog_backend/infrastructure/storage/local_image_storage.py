# Standard library imports
import logging
import uuid
from pathlib import Path
from typing import BinaryIO, Optional, Union

# Local application imports
from ...domain.repositories.image_storage import ImageStorage

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {"image/png", "image/jpg", "image/jpeg"}
CHUNK_SIZE = 1024 * 1024


class LocalImageStorage(ImageStorage):
    """Stores images on the local filesystem under the upload directory"""

    def __init__(self, upload_dir: Union[str, Path], root_dir: Optional[Path] = None) -> None:
        self.root_dir = (root_dir or Path.cwd()).resolve()
        self.upload_dir = Path(upload_dir)
        self._absolute_upload_dir = (self.root_dir / self.upload_dir).resolve()

    def _ensure_upload_dir(self) -> Path:
        self._absolute_upload_dir.mkdir(parents=True, exist_ok=True)
        return self._absolute_upload_dir

    async def save(self, filename: str, content_type: Optional[str], stream: BinaryIO) -> Optional[str]:
        if content_type not in ALLOWED_CONTENT_TYPES:
            logger.info("Rejected upload %r with content type %s", filename, content_type)
            return None

        # Keep the original name for readability, minus any directory part
        safe_name = f"{uuid.uuid4().hex}{Path(filename or 'image').name}"
        final_path = self._ensure_upload_dir() / safe_name

        with open(final_path, "wb") as f:
            while True:
                chunk = stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                f.write(chunk)

        return (self.upload_dir / safe_name).as_posix()

    async def delete(self, path: str) -> None:
        if not path:
            return
        target = (self.root_dir / path.replace("\\", "/")).resolve()
        if self._absolute_upload_dir not in target.parents:
            logger.warning("Refusing to delete %s: outside the upload directory", path)
            return
        try:
            target.unlink()
        except FileNotFoundError:
            logger.warning("Image %s was already removed", path)
