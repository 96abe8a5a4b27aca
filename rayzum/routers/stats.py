import logging

from fastapi import APIRouter, Depends, HTTPException, status

from rayzum.dependencies import get_current_owner, get_store
from rayzum.services.stats_service import get_stats
from rayzum.store import EntityStore

logger = logging.getLogger(__name__)
router = APIRouter(tags=["stats"])


@router.get("/stats")
def get_owner_stats(
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    """Record counts per collection for the current owner."""
    try:
        return get_stats(store, owner_id)
    except Exception as e:
        logger.exception("Stats failed for owner=%s: %s", owner_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to load stats") from e
