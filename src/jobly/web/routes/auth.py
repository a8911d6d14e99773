"""Token introspection route."""

from fastapi import APIRouter, Depends

from jobly.models import Claims
from jobly.web.deps import require_logged_in

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/whoami")
async def whoami(claims: Claims = Depends(require_logged_in)):
    """Echo the caller's decoded token."""
    return {"user": claims.model_dump(by_alias=True)}
