"""Liveness probe endpoint."""

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/ping")
async def ping() -> dict[str, str]:
    """
    Liveness probe.

    Returns:
        Fixed pong payload
    """
    return {"message": "pong"}
