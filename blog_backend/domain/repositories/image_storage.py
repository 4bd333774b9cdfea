from abc import ABC, abstractmethod
from typing import BinaryIO, Optional


class ImageStorage(ABC):
    """Storage interface for uploaded post images"""

    @abstractmethod
    async def save(self, filename: str, content_type: Optional[str], stream: BinaryIO) -> Optional[str]:
        """
        Store an uploaded image.

        Returns the stored path (relative, usable as a URL), or None when
        the content type is not an accepted image type.
        """
        pass

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Remove a stored image; missing files are ignored"""
        pass
