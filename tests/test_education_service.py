import pytest

from rayzum.core.errors import ConflictError, ValidationError
from rayzum.services.default_service import DefaultCategory, set_default
from rayzum.services.education_service import (
    create_education_item,
    get_education_item,
    list_education_items,
    update_education_item,
)


def test_create_and_get(store, owner):
    item = create_education_item(store, owner, " MIT ", "BS", "2010")
    assert item["school"] == "MIT"
    assert item["is_default"] is False
    assert get_education_item(store, owner, item["id"])["degree"] == "BS"
    assert get_education_item(store, owner, 999) is None


def test_create_requires_all_fields(store, owner):
    with pytest.raises(ValidationError):
        create_education_item(store, owner, "MIT", "", "2010")


def test_duplicate_entry_conflicts(store, owner):
    create_education_item(store, owner, "MIT", "BS", "2010")
    with pytest.raises(ConflictError):
        create_education_item(store, owner, "MIT", "BS", "2010")
    create_education_item(store, owner, "MIT", "MS", "2010")


def test_list_orders_by_year_desc_and_marks_default(store, owner):
    old = create_education_item(store, owner, "State", "BS", "2008")
    new = create_education_item(store, owner, "MIT", "MS", "2012")
    set_default(store, owner, DefaultCategory.EDUCATION_ITEM, old["id"])

    items = list_education_items(store, owner)
    assert [i["id"] for i in items] == [new["id"], old["id"]]
    assert [i["is_default"] for i in items] == [False, True]


def test_partial_update(store, owner):
    item = create_education_item(store, owner, "MIT", "BS", "2010")
    updated = update_education_item(store, owner, item["id"], {"year": "2011"})
    assert (updated["school"], updated["degree"], updated["year"]) == ("MIT", "BS", "2011")
    assert update_education_item(store, owner, 999, {"year": "2011"}) is None


def test_update_into_existing_entry_conflicts(store, owner):
    a = create_education_item(store, owner, "MIT", "BS", "2010")
    create_education_item(store, owner, "MIT", "BS", "2011")
    with pytest.raises(ConflictError):
        update_education_item(store, owner, a["id"], {"year": "2011"})
