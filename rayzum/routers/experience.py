import logging

from fastapi import APIRouter, Depends, HTTPException, status

from rayzum.core.errors import RayzumError
from rayzum.dependencies import get_current_owner, get_store
from rayzum.schemas.experience import (
    ExperienceCreate,
    ExperienceResponse,
    ExperienceUpdate,
    HighlightCreate,
    HighlightResponse,
)
from rayzum.services.cascade_service import delete_experience_template
from rayzum.services.experience_service import (
    add_highlight,
    create_experience,
    get_experience_with_highlights,
    list_experiences,
    update_experience,
)
from rayzum.store import EntityStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/experience", tags=["experience"])


@router.get("", response_model=list[ExperienceResponse])
def list_all(
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    return list_experiences(store, owner_id)


@router.get("/{template_id}", response_model=ExperienceResponse)
def get_one(
    template_id: int,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    experience = get_experience_with_highlights(store, owner_id, template_id)
    if not experience:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return experience


@router.post("", response_model=ExperienceResponse, status_code=status.HTTP_201_CREATED)
def create(
    data: ExperienceCreate,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    try:
        return create_experience(
            store,
            owner_id,
            job_title=data.job_title,
            company_name=data.company_name,
            start_date=data.start_date,
            end_date=data.end_date,
            highlights=[h.text for h in data.highlights],
        )
    except RayzumError:
        raise
    except Exception as e:
        logger.exception("Failed creating experience for owner=%s: %s", owner_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create experience") from e


@router.put("/{template_id}", response_model=ExperienceResponse)
def update(
    template_id: int,
    data: ExperienceUpdate,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    changes = data.model_dump(exclude_unset=True, exclude={"highlights"})
    highlights = [h.text for h in data.highlights] if data.highlights is not None else None
    try:
        experience = update_experience(store, owner_id, template_id, changes, highlights=highlights)
    except RayzumError:
        raise
    except Exception as e:
        logger.exception("Failed updating experience %s for owner=%s: %s", template_id, owner_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update experience") from e
    if not experience:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return experience


@router.post("/{template_id}/highlights", response_model=HighlightResponse, status_code=status.HTTP_201_CREATED)
def create_highlight(
    template_id: int,
    data: HighlightCreate,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    highlight = add_highlight(store, owner_id, template_id, data.text)
    if not highlight:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return highlight


@router.delete("/{template_id}")
def delete(
    template_id: int,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    try:
        deleted = delete_experience_template(store, owner_id, template_id)
    except Exception as e:
        logger.exception("Failed deleting experience %s for owner=%s: %s", template_id, owner_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete experience") from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return {"message": "Experience deleted successfully"}
