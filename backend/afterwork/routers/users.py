"""User record API routes."""
import logging
from fastapi import APIRouter, Depends, HTTPException

from afterwork.context import ServiceContext, get_context
from afterwork.schemas.user import UserOut, UserUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=list[UserOut])
def list_users(ctx: ServiceContext = Depends(get_context)):
    """List all user records."""
    return ctx.store.list_all()


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, ctx: ServiceContext = Depends(get_context)):
    """Fetch a single user record by chat id."""
    record = ctx.store.get(user_id)
    if not record:
        raise HTTPException(status_code=404, detail="User not found")
    return record


@router.patch("/{user_id}", response_model=UserOut)
def update_user(user_id: str, payload: UserUpdate, ctx: ServiceContext = Depends(get_context)):
    """Merge preferences (including a manual override) into an existing record."""
    if not ctx.store.get(user_id):
        raise HTTPException(status_code=404, detail="User not found")
    record = ctx.store.merge(user_id, **payload.model_dump(exclude_unset=True))
    logger.info("Updated user %s", user_id)
    return record
