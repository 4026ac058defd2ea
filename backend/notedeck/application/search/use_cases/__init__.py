from .content_search_use_case import ContentSearchUseCase

__all__ = ["ContentSearchUseCase"]
