from .content_set_repository import ContentSetRepository

__all__ = ["ContentSetRepository"]
