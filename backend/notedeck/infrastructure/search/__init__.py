from .content_search_index import ContentSearchIndex
from .full_text_index import FullTextIndex, IndexHit, compile_fts5_query
from .single_flight import SingleFlight

__all__ = ["ContentSearchIndex", "FullTextIndex", "IndexHit", "SingleFlight", "compile_fts5_query"]
