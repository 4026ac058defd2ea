from .content_set_repository import ContentSetRepositoryProtocol

__all__ = ["ContentSetRepositoryProtocol"]
