from datetime import date, datetime

import pytest
from pydantic import ValidationError

from resume_builder.models import Resume, Strength, WorkExperience, Education, Course, Interest, User
from resume_builder.schemas.render import OwnerProfile, PersonalInfoOverrides
from resume_builder.services.resume_normalizer import (
    DateStyle,
    format_date,
    merge_personal_info,
    normalize_bullet_points,
    normalize_resume,
    parse_personal_info,
    select_template_key,
)


# ============================================================================
# format_date
# ============================================================================

def test_display_format_from_iso_string():
    assert format_date("2024-01-15", DateStyle.DISPLAY) == "01/2024"


def test_iso_format_is_idempotent():
    once = format_date("2024-01-15", DateStyle.ISO)
    assert once == "2024-01-15"
    assert format_date(once, DateStyle.ISO) == once


def test_native_dates_and_datetimes():
    assert format_date(date(2020, 3, 9)) == "2020-03-09"
    assert format_date(datetime(2020, 3, 9, 17, 45)) == "2020-03-09"
    assert format_date(date(2020, 3, 9), DateStyle.DISPLAY) == "03/2020"


def test_iso_datetime_string():
    assert format_date("2023-07-01T00:00:00.000Z") == "2023-07-01"


def test_month_precision_strings():
    assert format_date("2022-11") == "2022-11-01"
    assert format_date("11/2022", DateStyle.DISPLAY) == "11/2022"


@pytest.mark.parametrize("value", ["Summer 2020", "not a date", "2024-13-45"])
def test_unparsable_strings_are_returned_unchanged(value):
    assert format_date(value, DateStyle.DISPLAY) == value
    assert format_date(value, DateStyle.ISO) == value


def test_missing_dates_are_empty():
    assert format_date(None) == ""
    assert format_date("") == ""


# ============================================================================
# Personal info
# ============================================================================

def test_content_value_wins_over_profile():
    overrides = parse_personal_info({"personalInfo": {"name": "Jane"}})
    info = merge_personal_info(overrides, OwnerProfile(name="John"))
    assert info.name == "Jane"


def test_profile_fills_missing_content_value():
    info = merge_personal_info(parse_personal_info({}), OwnerProfile(name="John"))
    assert info.name == "John"


def test_both_missing_gives_empty_string():
    info = merge_personal_info(parse_personal_info(None), None)
    assert info.name == ""


def test_profile_field_mapping():
    owner = OwnerProfile(
        name="John",
        email="john@example.com",
        phone="555-0100",
        location="Boston",
        portfolio_url="https://john.dev",
        linkedin_url="https://linkedin.com/in/john",
    )
    info = merge_personal_info(PersonalInfoOverrides(), owner)
    assert info.email == "john@example.com"
    assert info.phone == "555-0100"
    assert info.city == "Boston"
    assert info.website == "https://john.dev"
    assert info.linkedin == "https://linkedin.com/in/john"
    # No profile fallback for these
    assert info.state == ""
    assert info.summary == ""
    assert info.github == ""


def test_blank_content_values_fall_back_to_profile():
    overrides = parse_personal_info({"personalInfo": {"name": "   ", "city": ""}})
    info = merge_personal_info(overrides, OwnerProfile(name="John", location="Boston"))
    assert info.name == "John"
    assert info.city == "Boston"


@pytest.mark.parametrize("content", [
    "{not json",
    "[1, 2, 3]",
    42,
    {"personalInfo": "Jane"},
    {"personalInfo": None},
])
def test_malformed_content_is_treated_as_empty(content):
    assert parse_personal_info(content) == PersonalInfoOverrides()


def test_content_blob_as_json_string():
    overrides = parse_personal_info('{"personalInfo": {"name": "Jane", "github": "github.com/jane"}}')
    assert overrides.name == "Jane"
    assert overrides.github == "github.com/jane"


def test_wrongly_typed_fields_are_ignored_individually():
    overrides = parse_personal_info({"personalInfo": {"name": ["Jane"], "phone": 5550100, "email": "jane@example.com"}})
    assert overrides.name is None
    assert overrides.phone == "5550100"
    assert overrides.email == "jane@example.com"


# ============================================================================
# Collections
# ============================================================================

def test_bullet_points_accept_dicts_and_strings():
    raw = [{"description": "Shipped v2"}, "Mentored two engineers", {"description": ""}, {"other": 1}, 7]
    assert normalize_bullet_points(raw) == ["Shipped v2", "Mentored two engineers"]


@pytest.mark.parametrize("raw", [None, "Shipped v2", {"description": "x"}, 3])
def test_non_list_bullet_points_become_empty(raw):
    assert normalize_bullet_points(raw) == []


def build_resume(**overrides):
    values = {
        "id": 1,
        "title": "Test Resume",
        "content": {"personalInfo": {"name": "Jane", "summary": "Builds things"}},
    }
    values.update(overrides)
    return Resume(**values)


def test_normalize_full_resume():
    resume = build_resume(
        job_title="Engineer",
        strengths=[Strength(skill_name="Go", rating=9), Strength(skill_name="Rust", rating=15)],
        work_experience=[
            WorkExperience(
                company="Acme",
                position="Developer",
                start_date=date(2020, 1, 15),
                end_date="2022-06-30",
                current=False,
                bullet_points=[{"description": "Built APIs"}],
            ),
            WorkExperience(
                company="Globex",
                position="Lead",
                start_date="2022-07-01",
                end_date=date(2023, 1, 1),
                current=True,
                bullet_points="legacy text",
            ),
        ],
        education=[
            Education(institution="MIT", degree="BSc", field="CS", start_date=date(2015, 9, 1), end_date=date(2019, 6, 1), gpa=3.9),
        ],
        courses=[Course(title="Distributed Systems", provider="Coursera")],
        interests=[Interest(name="Chess", icon="♟")],
    )
    owner = User(name="John", email="john@example.com", location="Boston")

    model = normalize_resume(resume, owner, profile_picture="data:image/png;base64,AAA")

    assert model.title == "Test Resume"
    assert model.job_title == "Engineer"
    assert model.profile_picture == "data:image/png;base64,AAA"
    assert model.personal_info.name == "Jane"
    assert model.personal_info.email == "john@example.com"
    assert model.personal_info.city == "Boston"
    assert model.personal_info.summary == "Builds things"

    assert [(s.skill_name, s.rating) for s in model.strengths] == [("Go", 9), ("Rust", 10)]

    first, second = model.work_experience
    assert first.start_date == "2020-01-15"
    assert first.end_date == "2022-06-30"
    assert first.bullet_points == ["Built APIs"]
    assert second.current is True
    assert second.end_date is None
    assert second.bullet_points == []

    assert model.education[0].start_date == "2015-09-01"
    assert model.education[0].gpa == 3.9
    assert model.courses[0].link is None
    assert model.interests[0].name == "Chess"


def test_normalize_defaults_collections_and_job_title():
    model = normalize_resume(build_resume(content=None), None)
    assert model.job_title == ""
    assert model.profile_picture is None
    assert model.strengths == []
    assert model.work_experience == []
    assert model.education == []
    assert model.courses == []
    assert model.interests == []
    assert model.personal_info.name == ""


def test_render_model_is_immutable():
    model = normalize_resume(build_resume(), None)
    with pytest.raises(ValidationError):
        model.title = "Changed"


# ============================================================================
# Template selection
# ============================================================================

def test_template_selection_order():
    assert select_template_key("classic", "modern") == "classic"
    assert select_template_key(None, "classic") == "classic"
    assert select_template_key("", None) == "modern"
    assert select_template_key("  ", "  ") == "modern"
