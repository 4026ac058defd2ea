from .content_set_use_case import ContentSetUseCase

__all__ = ["ContentSetUseCase"]
