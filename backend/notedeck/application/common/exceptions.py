"""
Exceptions raised by infrastructure adapters through application ports.

Use cases catch these and turn them into Failure values; they never cross
the application boundary.
"""


class DuplicateContentSetError(Exception):
    """The store rejected an insert because (owner, name) is taken."""

    def __init__(self, owner: object, name: str) -> None:
        self.owner = owner
        self.name = name
        super().__init__(f"Content set '{name}' already exists for owner {owner}")


class IndexBuildError(Exception):
    """The full-text index could not be built."""


class GenerationServiceError(Exception):
    """The generative text service failed to produce a reply."""
