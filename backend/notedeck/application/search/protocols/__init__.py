from .search_index import SearchIndexProtocol

__all__ = ["SearchIndexProtocol"]
