"""Health endpoint: proves the store is writable."""
import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from afterwork.context import ServiceContext, get_context
from afterwork.errors import StoreError

logger = logging.getLogger(__name__)
router = APIRouter()

SERVICE_NAME = "AfterWork Buddy"


@router.get("/health")
def health_check(ctx: ServiceContext = Depends(get_context)):
    try:
        ctx.store.write_heartbeat(ctx.now())
    except StoreError as exc:
        logger.warning("Health check failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "unhealthy", "error": str(exc)},
        )
    return {"status": "healthy", "service": SERVICE_NAME, "timestamp": ctx.now().isoformat()}
