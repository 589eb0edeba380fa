from resume_builder.schemas.render import (
    CanonicalRenderModel, PersonalInfo, SkillRating, WorkEntry, EducationEntry,
    CourseEntry, InterestEntry
)
from resume_builder.services.resume_renderer import (
    DEFAULT_TEMPLATE,
    display_url,
    render_resume,
    safe_link,
    resolve_template_key,
)


def make_model(**overrides) -> CanonicalRenderModel:
    values = {
        "title": "Test Resume",
        "job_title": "Platform Engineer",
        "personal_info": PersonalInfo(
            name="Jane Doe",
            email="jane@example.com",
            city="Austin",
            state="TX",
            summary="Ten years of backend work.",
            website="https://www.jane.dev",
        ),
        "strengths": [SkillRating(skill_name="Go", rating=9)],
        "work_experience": [
            WorkEntry(
                company="Acme",
                position="Developer",
                start_date="2020-01-15",
                end_date="2022-06-30",
                bullet_points=["Built the billing API"],
            ),
            WorkEntry(company="Globex", position="Lead", start_date="2022-07-01", current=True),
        ],
        "education": [
            EducationEntry(institution="MIT", degree="BSc", field="CS", start_date="2015-09-01", end_date="2019-06-01", gpa=3.9),
        ],
        "courses": [CourseEntry(title="Distributed Systems", provider="Coursera", link="https://coursera.org/ds")],
        "interests": [InterestEntry(name="Chess")],
    }
    values.update(overrides)
    return CanonicalRenderModel(**values)


def test_modern_template_renders_all_sections():
    html = render_resume(make_model(), "modern")
    assert "Jane Doe" in html
    assert "Platform Engineer" in html
    assert "Go (9/10)" in html
    assert "width: 90%" in html
    assert "Work Experience" in html
    assert "Built the billing API" in html
    assert "01/2020 - 06/2022" in html
    assert "07/2022 - Present" in html
    assert "BSc in CS" in html
    assert "GPA: 3.9" in html
    assert "Distributed Systems" in html
    assert "Chess" in html
    assert "Austin, TX" in html
    assert "jane.dev" in html
    assert "https://www.jane.dev" not in html


def test_classic_template_differs_from_modern():
    model = make_model()
    classic = render_resume(model, "classic")
    assert "Times New Roman" in classic
    assert "Go (9/10)" in classic
    assert classic != render_resume(model, "modern")


def test_unknown_template_falls_back_to_default():
    model = make_model()
    assert resolve_template_key("fancy") == DEFAULT_TEMPLATE
    assert render_resume(model, "fancy") == render_resume(model, DEFAULT_TEMPLATE)


def test_empty_sections_are_omitted():
    model = make_model(
        strengths=[], work_experience=[], education=[], courses=[], interests=[],
        personal_info=PersonalInfo(name="Jane Doe"),
    )
    for template in ("modern", "classic"):
        html = render_resume(model, template)
        assert "Jane Doe" in html
        assert "Work Experience" not in html
        assert "Education" not in html
        assert "Skills" not in html
        assert "Courses" not in html
        assert "Interests" not in html
        assert "Professional Summary" not in html


def test_header_falls_back_to_title_without_name():
    html = render_resume(make_model(personal_info=PersonalInfo()), "modern")
    assert "Test Resume" in html


def test_profile_picture_only_rendered_when_present():
    assert "<img" not in render_resume(make_model(), "modern")
    html = render_resume(make_model(profile_picture="data:image/png;base64,AAA"), "modern")
    assert 'src="data:image/png;base64,AAA"' in html


def test_user_text_is_escaped():
    model = make_model(personal_info=PersonalInfo(name="<script>alert(1)</script>"))
    html = render_resume(model, "modern")
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_render_does_not_mutate_model():
    model = make_model()
    before = model.model_dump()
    render_resume(model, "classic")
    assert model.model_dump() == before


def test_display_url():
    assert display_url("https://www.example.com/me") == "example.com/me"
    assert display_url("http://example.com") == "example.com"
    assert display_url("github.com/jane") == "github.com/jane"
    assert display_url("") == ""


def test_course_links_only_allow_http():
    courses = [
        CourseEntry(title="Bad", link="javascript:alert(1)"),
        CourseEntry(title="Good", link="https://example.com/course"),
    ]
    for key in ("modern", "classic"):
        html = render_resume(make_model(courses=courses), key)
        assert "javascript:" not in html
        assert 'href="https://example.com/course"' in html
        assert "Bad" in html


def test_safe_link():
    assert safe_link("https://example.com") == "https://example.com"
    assert safe_link(" HTTP://example.com ") == "HTTP://example.com"
    assert safe_link("javascript:alert(1)") == ""
    assert safe_link("data:text/html,hi") == ""
    assert safe_link(None) == ""
