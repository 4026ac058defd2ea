from .dependencies import get_current_owner

__all__ = ["get_current_owner"]
