"""Validation shared by the content set request schemas."""

# Static path segments under /notes and /flashcard-sets, plus the dot
# segments clients normalize away before sending.
RESERVED_NAMES = frozenset({"search", "by-ids", ".", ".."})


def validate_addressable_name(value: str) -> str:
    """
    Reject names that could never be reached as a single `/{name}` path segment.

    Raises:
        ValueError: If the name contains '/' or collides with a static route
    """
    if "/" in value:
        raise ValueError("name must not contain '/'")
    if value in RESERVED_NAMES:
        raise ValueError(f"name {value!r} is reserved")
    return value
