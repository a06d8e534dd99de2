"""test_ats_formatter.py
Test format_resume_ats output layout.
"""
from resume_tailor.ats_classes.ats_formatter import (
    format_education_heading,
    format_experience_heading,
    format_resume_ats,
)
from resume_tailor.models import EducationEntry, ExperienceEntry
from resume_tailor.parse_classes.resume_normalizer.resume_normalizer import normalize_resume
from resume_tailor.test_helpers.llm_client_test_helpers import MOCK_TAILORED_RESUME

EXPECTED_MOCK_ATS_TEXT = (
    "John Doe\n"
    "Greater New York | john.doe@example.com | 123-456-7890 | linkedin.com/in/john_doe23\n"
    "\n"
    "-- SUMMARY --\n"
    "Data engineer with a track record of shipping React and SQL analytics tooling.\n"
    "\n"
    "-- SKILLS --\n"
    "Languages: Python, SQL, TypeScript\n"
    "Frameworks: React, FastAPI\n"
    "Tools: Docker, Power BI\n"
    "Other: Data Cleaning\n"
    "\n"
    "-- EXPERIENCE --\n"
    "Comcast — Data Engineer | Colorado Springs, CO | May 2018–Present\n"
    "- Built SQL pipelines feeding React dashboards used by 40 analysts.\n"
    "- Cut ticket resolution time 27% by automating SysAid triage.\n"
    "\n"
    "-- PROJECTS --\n"
    "h2oFiltration | Tech: Python, Arduino\n"
    "- Designed a low-cost water filtration monitor.\n"
    "\n"
    "-- EDUCATION --\n"
    "San Diego State University — M.S. Computer Science | 2018\n"
)

EXPECTED_EMPTY_ATS_TEXT = (
    "NAME\n"
    "\n"
    "-- SUMMARY --\n—\n\n"
    "-- SKILLS --\n—\n\n"
    "-- EXPERIENCE --\n—\n\n"
    "-- PROJECTS --\n—\n\n"
    "-- EDUCATION --\n—\n"
)


class TestFormatResumeATS:

    def test_full_resume_layout(self):
        assert format_resume_ats(normalize_resume(MOCK_TAILORED_RESUME)) == EXPECTED_MOCK_ATS_TEXT

    def test_raw_mapping_is_normalized_first(self):
        assert format_resume_ats(MOCK_TAILORED_RESUME) == EXPECTED_MOCK_ATS_TEXT

    def test_empty_resume_template(self):
        assert format_resume_ats(normalize_resume({})) == EXPECTED_EMPTY_ATS_TEXT
        assert format_resume_ats(None) == EXPECTED_EMPTY_ATS_TEXT

    def test_deterministic(self):
        resume = normalize_resume(MOCK_TAILORED_RESUME)
        assert format_resume_ats(resume) == format_resume_ats(resume)

    def test_entry_without_bullets_gets_placeholder_bullet(self):
        text = format_resume_ats({"experience": [{"company": "Acme", "title": "Dev"}]})
        assert "-- EXPERIENCE --\nAcme — Dev\n- —\n" in text

    def test_internal_whitespace_collapsed_in_bullets(self):
        text = format_resume_ats({"projects": [{"name": "Tool", "bullets": ["Built   a\n  thing"]}]})
        assert "- Built a thing\n" in text

    def test_link_label_used_when_url_missing(self):
        text = format_resume_ats({"header": {"name": "A", "links": [{"label": "Portfolio"}]}})
        assert text.splitlines()[1] == "Portfolio"

    def test_ends_with_single_newline(self):
        text = format_resume_ats(MOCK_TAILORED_RESUME)
        assert text.endswith("\n") and not text.endswith("\n\n")


class TestEntryHeadings:

    def test_experience_heading_skips_missing_parts(self):
        entry = ExperienceEntry(company="Acme", title="Dev", end="2024")
        assert format_experience_heading(entry) == "Acme — Dev | 2024"

    def test_education_heading_without_degree(self):
        entry = EducationEntry(school="MIT", location="Cambridge, MA")
        assert format_education_heading(entry) == "MIT | Cambridge, MA"
