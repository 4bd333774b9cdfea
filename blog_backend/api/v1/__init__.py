from .image_controller import router as image_router


__all__ = ["image_router"]
