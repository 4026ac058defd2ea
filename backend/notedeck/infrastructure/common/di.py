import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from notedeck.core import container
from notedeck.database import DatabaseSession

T = TypeVar("T")

# container.db is shared by every request; overriding it and building the
# provider must happen as one step or threadpool requests can swap sessions.
_resolve_lock = threading.Lock()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency that builds `provider` against the request's session.

    The override is only held while the object graph is built; the returned
    use case keeps its own references to the session.
    """

    def dependency(db: DatabaseSession) -> T:
        with _resolve_lock:
            container.db.override(db)
            try:
                return provider()
            finally:
                container.db.reset_override()

    return dependency
