from datetime import date

import pytest

from rayzum.core.errors import ValidationError
from rayzum.services.experience_service import (
    add_highlight,
    create_experience,
    get_all_experiences_with_highlights,
    get_experience_with_highlights,
    list_experiences,
    update_experience,
)


def test_create_with_highlights_skips_blank_texts(store, owner):
    exp = create_experience(
        store,
        owner,
        job_title="Eng",
        company_name="Acme",
        start_date=date(2020, 1, 1),
        highlights=["Shipped X", "  ", "Led Y"],
    )
    assert exp["start_date"] == "2020-01-01"
    assert exp["end_date"] is None
    assert [h["text"] for h in exp["highlights"]] == ["Shipped X", "Led Y"]


def test_create_requires_title_company_and_start(store, owner):
    with pytest.raises(ValidationError):
        create_experience(store, owner, job_title="", company_name="Acme", start_date="2020-01-01")
    with pytest.raises(ValidationError):
        create_experience(store, owner, job_title="Eng", company_name="Acme", start_date=None)


def test_highlights_belong_to_their_template(store, owner):
    a = create_experience(store, owner, "Eng", "Acme", "2020-01-01", highlights=["a1", "a2"])
    b = create_experience(store, owner, "Lead", "Globex", "2021-01-01", highlights=["b1"])

    everything = {e["id"]: e for e in get_all_experiences_with_highlights(store, owner)}
    assert [h["text"] for h in everything[a["id"]]["highlights"]] == ["a1", "a2"]
    assert [h["text"] for h in everything[b["id"]]["highlights"]] == ["b1"]


def test_list_orders_by_start_date_desc(store, owner):
    older = create_experience(store, owner, "Eng", "Acme", "2018-05-01")
    newer = create_experience(store, owner, "Lead", "Globex", "2021-01-01")
    assert [e["id"] for e in list_experiences(store, owner)] == [newer["id"], older["id"]]


def test_add_highlight(store, owner):
    exp = create_experience(store, owner, "Eng", "Acme", "2020-01-01")
    highlight = add_highlight(store, owner, exp["id"], " Shipped X ")
    assert highlight["text"] == "Shipped X"
    assert get_experience_with_highlights(store, owner, exp["id"])["highlights"] == [highlight]
    assert add_highlight(store, owner, 999, "nope") is None


def test_update_fields_keeps_highlights_when_not_given(store, owner):
    exp = create_experience(store, owner, "Eng", "Acme", "2020-01-01", highlights=["Shipped X"])
    updated = update_experience(store, owner, exp["id"], {"job_title": "Senior Eng", "end_date": date(2022, 6, 30)})
    assert updated["job_title"] == "Senior Eng"
    assert updated["company_name"] == "Acme"
    assert updated["end_date"] == "2022-06-30"
    assert updated["highlights"] == exp["highlights"]


def test_update_replaces_highlights(store, owner):
    exp = create_experience(store, owner, "Eng", "Acme", "2020-01-01", highlights=["old 1", "old 2"])
    updated = update_experience(store, owner, exp["id"], {}, highlights=["new"])
    assert [h["text"] for h in updated["highlights"]] == ["new"]


def test_update_missing_template(store, owner):
    assert update_experience(store, owner, 404, {"job_title": "x"}) is None
