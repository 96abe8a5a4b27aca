import pytest

from rayzum.core.errors import ConflictError, ValidationError
from rayzum.services.contact_service import create_contact, get_contact, list_contacts, update_contact
from rayzum.services.default_service import DefaultCategory, set_default


def test_create_strips_value_and_starts_not_default(store, owner):
    rec = create_contact(store, owner, DefaultCategory.NAME, "  Ada Lovelace ")
    assert rec["value"] == "Ada Lovelace"
    assert rec["is_default"] is False


def test_create_rejects_blank(store, owner):
    with pytest.raises(ValidationError) as ex:
        create_contact(store, owner, DefaultCategory.EMAIL, "   ")
    assert ex.value.status_code == 400


def test_create_rejects_duplicate_value(store, owner):
    create_contact(store, owner, DefaultCategory.PHONE, "555-0100")
    with pytest.raises(ConflictError) as ex:
        create_contact(store, owner, DefaultCategory.PHONE, "555-0100")
    assert "phone" in ex.value.message


def test_same_value_allowed_in_other_category_and_owner(store, owner):
    create_contact(store, owner, DefaultCategory.NAME, "Ada")
    create_contact(store, "other", DefaultCategory.NAME, "Ada")
    assert len(list_contacts(store, owner, DefaultCategory.NAME)) == 1


def test_list_is_newest_first_with_default_flag(store, owner):
    ada = create_contact(store, owner, DefaultCategory.NAME, "Ada")
    grace = create_contact(store, owner, DefaultCategory.NAME, "Grace")
    set_default(store, owner, DefaultCategory.NAME, ada["id"])

    names = list_contacts(store, owner, DefaultCategory.NAME)
    assert [n["value"] for n in names] == ["Grace", "Ada"]
    assert [n["is_default"] for n in names] == [False, True]
    assert get_contact(store, owner, DefaultCategory.NAME, grace["id"])["is_default"] is False


def test_update_contact(store, owner):
    rec = create_contact(store, owner, DefaultCategory.EMAIL, "old@example.com")
    updated = update_contact(store, owner, DefaultCategory.EMAIL, rec["id"], "new@example.com")
    assert updated["value"] == "new@example.com"
    assert updated["updated_at"] is not None


def test_update_contact_missing_and_conflict(store, owner):
    assert update_contact(store, owner, DefaultCategory.NAME, 99, "Ada") is None

    a = create_contact(store, owner, DefaultCategory.NAME, "Ada")
    create_contact(store, owner, DefaultCategory.NAME, "Grace")
    with pytest.raises(ConflictError):
        update_contact(store, owner, DefaultCategory.NAME, a["id"], "Grace")
    # same value on itself is fine
    assert update_contact(store, owner, DefaultCategory.NAME, a["id"], "Ada")["value"] == "Ada"
