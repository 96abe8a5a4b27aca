from rayzum.services.contact_service import create_contact
from rayzum.services.default_service import DefaultCategory
from rayzum.services.education_service import create_education_item
from rayzum.services.experience_service import create_experience, update_experience
from rayzum.services.resume_render_service import build_printable_resume, format_month_year, format_period
from rayzum.services.resume_service import create_resume


def test_format_month_year():
    assert format_month_year("2020-01-15") == "January 2020"
    assert format_month_year("2021-11-01T00:00:00") == "November 2021"
    assert format_month_year(None) == ""
    assert format_month_year("sometime") == "sometime"


def test_format_period_uses_present_for_open_end():
    assert format_period("2020-01-01", None) == "January 2020 – Present"
    assert format_period("2018-03-01", "2019-12-31") == "March 2018 – December 2019"


def test_printable_resume_joins_live_data_in_display_order(store, owner):
    name = create_contact(store, owner, DefaultCategory.NAME, "Ada")
    a = create_experience(store, owner, "Eng", "Acme", "2020-01-01", highlights=["a1", "a2", "a3"])
    b = create_experience(store, owner, "Lead", "Globex", "2021-06-01", "2022-02-01", highlights=["b1"])
    e1 = create_education_item(store, owner, "MIT", "BS", "2010")
    e2 = create_education_item(store, owner, "Stanford", "MS", "2012")
    resume = create_resume(
        store,
        owner,
        {
            "title": "R1",
            "name_id": name["id"],
            "experience_ids": [
                {"template_id": b["id"], "selected_highlight_ids": [b["highlights"][0]["id"]]},
                {"template_id": a["id"], "selected_highlight_ids": [a["highlights"][2]["id"], a["highlights"][0]["id"]]},
            ],
            "education_ids": [e2["id"], e1["id"]],
        },
    )

    printable = build_printable_resume(store, owner, resume["id"])

    assert printable["name"] == "Ada"
    assert printable["phone"] is None
    assert [e["job_title"] for e in printable["experiences"]] == ["Lead", "Eng"]
    assert printable["experiences"][0]["period"] == "June 2021 – February 2022"
    assert printable["experiences"][1]["period"] == "January 2020 – Present"
    # template order, restricted to the selection
    assert [h["text"] for h in printable["experiences"][1]["highlights"]] == ["a1", "a3"]
    assert [e["school"] for e in printable["education"]] == ["Stanford", "MIT"]


def test_printable_resume_drops_stale_highlights(store, owner):
    exp = create_experience(store, owner, "Eng", "Acme", "2020-01-01", highlights=["old 1", "old 2"])
    resume = create_resume(
        store,
        owner,
        {"title": "R1", "experience_ids": [{"template_id": exp["id"], "selected_highlight_ids": [exp["highlights"][1]["id"]]}]},
    )
    # the replacement takes id 1, so the selected id 2 no longer exists
    update_experience(store, owner, exp["id"], {"job_title": "Senior Eng"}, highlights=["new"])

    printable = build_printable_resume(store, owner, resume["id"])
    assert printable["experiences"][0]["job_title"] == "Senior Eng"
    assert printable["experiences"][0]["highlights"] == []


def test_printable_resume_missing(store, owner):
    assert build_printable_resume(store, owner, 1) is None
