"""On-demand sweep trigger."""
import logging
from fastapi import APIRouter, Depends

from afterwork.context import ServiceContext, get_context
from afterwork.schemas.sweep import SweepOut
from afterwork.services.sweep import scheduled_channel_check

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/sweep", response_model=SweepOut)
def run_sweep(ctx: ServiceContext = Depends(get_context)):
    """Run one full sweep now, same as a scheduled trigger."""
    logger.info("Manual sweep requested")
    return scheduled_channel_check(ctx)
