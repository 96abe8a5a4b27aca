import logging

from fastapi import APIRouter, Depends, HTTPException, status

from rayzum.core.errors import RayzumError
from rayzum.dependencies import get_current_owner, get_store
from rayzum.schemas.resume import PrintableResume, ResumeCreate, ResumeResponse, ResumeUpdate
from rayzum.services.cascade_service import delete_resume
from rayzum.services.resume_render_service import build_printable_resume
from rayzum.services.resume_service import (
    create_resume,
    get_resume_with_details,
    list_resumes,
    update_resume,
)
from rayzum.store import EntityStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.get("", response_model=list[ResumeResponse])
def list_all(
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    resumes = list_resumes(store, owner_id)
    logger.debug("GET /resumes owner=%s count=%d", owner_id, len(resumes))
    return resumes


@router.get("/{resume_id}", response_model=ResumeResponse)
def get_one(
    resume_id: int,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    resume = get_resume_with_details(store, owner_id, resume_id)
    if not resume:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    return resume


@router.get("/{resume_id}/preview", response_model=PrintableResume)
def preview(
    resume_id: int,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    """Resume joined with live experience/education data, in display order."""
    printable = build_printable_resume(store, owner_id, resume_id)
    if not printable:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    return printable


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
def create(
    data: ResumeCreate,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    try:
        return create_resume(store, owner_id, data.model_dump(exclude_unset=True))
    except RayzumError:
        raise
    except Exception as e:
        logger.exception("Failed creating resume for owner=%s: %s", owner_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create resume") from e


@router.put("/{resume_id}", response_model=ResumeResponse)
def update(
    resume_id: int,
    data: ResumeUpdate,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    try:
        resume = update_resume(store, owner_id, resume_id, data.model_dump(exclude_unset=True))
    except RayzumError:
        raise
    except Exception as e:
        logger.exception("Failed updating resume %s for owner=%s: %s", resume_id, owner_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update resume") from e
    if not resume:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    return resume


@router.delete("/{resume_id}")
def delete(
    resume_id: int,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    try:
        deleted = delete_resume(store, owner_id, resume_id)
    except Exception as e:
        logger.exception("Failed deleting resume %s for owner=%s: %s", resume_id, owner_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete resume") from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    return {"message": "Resume deleted successfully"}
