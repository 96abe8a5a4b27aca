import logging

from fastapi import APIRouter, Depends, HTTPException, status

from rayzum.core.errors import RayzumError
from rayzum.dependencies import get_current_owner, get_store
from rayzum.schemas.education import EducationItemCreate, EducationItemResponse, EducationItemUpdate
from rayzum.services.cascade_service import delete_education_item
from rayzum.services.default_service import DefaultCategory, get_default, set_default
from rayzum.services.education_service import (
    create_education_item,
    get_education_item,
    list_education_items,
    update_education_item,
)
from rayzum.store import EntityStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/education-items", tags=["education"])


@router.get("", response_model=list[EducationItemResponse])
def list_items(
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    return list_education_items(store, owner_id)


@router.get("/default", response_model=EducationItemResponse)
def get_default_item(
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    item = get_default(store, owner_id, DefaultCategory.EDUCATION_ITEM)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No default education item set")
    return item


@router.get("/{item_id}", response_model=EducationItemResponse)
def get_item(
    item_id: int,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    item = get_education_item(store, owner_id, item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Education item not found")
    return item


@router.post("", response_model=EducationItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(
    data: EducationItemCreate,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    try:
        return create_education_item(store, owner_id, data.school, data.degree, data.year)
    except RayzumError:
        raise
    except Exception as e:
        logger.exception("Failed creating education item for owner=%s: %s", owner_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create education item") from e


@router.put("/{item_id}", response_model=EducationItemResponse)
def update_item(
    item_id: int,
    data: EducationItemUpdate,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    try:
        item = update_education_item(store, owner_id, item_id, data.model_dump(exclude_unset=True))
    except RayzumError:
        raise
    except Exception as e:
        logger.exception("Failed updating education item %s for owner=%s: %s", item_id, owner_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update education item") from e
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Education item not found")
    return item


@router.put("/{item_id}/default", response_model=EducationItemResponse)
def make_default(
    item_id: int,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    item = set_default(store, owner_id, DefaultCategory.EDUCATION_ITEM, item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Education item not found")
    return item


@router.delete("/{item_id}")
def delete_item(
    item_id: int,
    store: EntityStore = Depends(get_store),
    owner_id: str = Depends(get_current_owner),
):
    try:
        deleted = delete_education_item(store, owner_id, item_id)
    except Exception as e:
        logger.exception("Failed deleting education item %s for owner=%s: %s", item_id, owner_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete education item") from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Education item not found")
    return {"message": "Education item deleted successfully"}
