import logging

from fastapi import APIRouter, Depends, HTTPException, status

from rayzum.core.errors import RayzumError
from rayzum.dependencies import get_current_owner, get_store
from rayzum.schemas.contact import ContactCreate, ContactResponse, ContactUpdate
from rayzum.services.cascade_service import delete_contact
from rayzum.services.contact_service import create_contact, get_contact, list_contacts, update_contact
from rayzum.services.default_service import DefaultCategory, get_default, set_default
from rayzum.store import EntityStore

logger = logging.getLogger(__name__)


def build_contact_router(category: DefaultCategory, prefix: str, label: str) -> APIRouter:
    """Same CRUD + default surface for names, phones and emails."""
    router = APIRouter(prefix=prefix, tags=["personal"])
    not_found = f"{label} not found"

    @router.get("", response_model=list[ContactResponse])
    def list_all(
        store: EntityStore = Depends(get_store),
        owner_id: str = Depends(get_current_owner),
    ):
        return list_contacts(store, owner_id, category)

    @router.get("/default", response_model=ContactResponse)
    def get_default_contact(
        store: EntityStore = Depends(get_store),
        owner_id: str = Depends(get_current_owner),
    ):
        record = get_default(store, owner_id, category)
        if not record:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No default {label.lower()} set")
        return record

    @router.get("/{contact_id}", response_model=ContactResponse)
    def get_one(
        contact_id: int,
        store: EntityStore = Depends(get_store),
        owner_id: str = Depends(get_current_owner),
    ):
        record = get_contact(store, owner_id, category, contact_id)
        if not record:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return record

    @router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
    def create(
        data: ContactCreate,
        store: EntityStore = Depends(get_store),
        owner_id: str = Depends(get_current_owner),
    ):
        try:
            return create_contact(store, owner_id, category, data.value)
        except RayzumError:
            raise
        except Exception as e:
            logger.exception("Failed adding %s for owner=%s: %s", label.lower(), owner_id, e)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to add {label.lower()}") from e

    @router.put("/{contact_id}", response_model=ContactResponse)
    def update(
        contact_id: int,
        data: ContactUpdate,
        store: EntityStore = Depends(get_store),
        owner_id: str = Depends(get_current_owner),
    ):
        try:
            record = update_contact(store, owner_id, category, contact_id, data.value)
        except RayzumError:
            raise
        except Exception as e:
            logger.exception("Failed updating %s %s for owner=%s: %s", label.lower(), contact_id, owner_id, e)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update {label.lower()}") from e
        if not record:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return record

    @router.put("/{contact_id}/default", response_model=ContactResponse)
    def make_default(
        contact_id: int,
        store: EntityStore = Depends(get_store),
        owner_id: str = Depends(get_current_owner),
    ):
        record = set_default(store, owner_id, category, contact_id)
        if not record:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return record

    @router.delete("/{contact_id}")
    def delete(
        contact_id: int,
        store: EntityStore = Depends(get_store),
        owner_id: str = Depends(get_current_owner),
    ):
        try:
            deleted = delete_contact(store, owner_id, category, contact_id)
        except Exception as e:
            logger.exception("Failed deleting %s %s for owner=%s: %s", label.lower(), contact_id, owner_id, e)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to delete {label.lower()}") from e
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return {"message": f"{label} deleted successfully"}

    return router


names = build_contact_router(DefaultCategory.NAME, "/names", "Name")
phones = build_contact_router(DefaultCategory.PHONE, "/phones", "Phone")
emails = build_contact_router(DefaultCategory.EMAIL, "/emails", "Email")
