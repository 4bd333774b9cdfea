from .local_image_storage import LocalImageStorage, ALLOWED_CONTENT_TYPES

__all__ = ["LocalImageStorage", "ALLOWED_CONTENT_TYPES"]
