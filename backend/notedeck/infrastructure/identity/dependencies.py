"""
Owner resolution for incoming requests.

Authentication happens upstream; the gateway forwards the verified owner in
the ``X-Owner-Id`` header and this service trusts it as-is.
"""

from typing import Annotated

from fastapi import Header, HTTPException, status

OWNER_HEADER = "X-Owner-Id"


def get_current_owner(
    x_owner_id: Annotated[str | None, Header(alias=OWNER_HEADER)] = None,
) -> str:
    """Return the owner supplied by the gateway, or 401 if it is missing."""
    if x_owner_id is None or not x_owner_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {OWNER_HEADER} header",
        )
    return x_owner_id
