"""resume_normalizer.py
Turns an untrusted, JSON-like resume object (usually parsed LLM output) into a
strictly shaped ``Resume``.
"""
from typing import Any, List

from resume_tailor.models import (
    Resume,
    ResumeHeader,
    ResumeLink,
    ResumeSkills,
    ExperienceEntry,
    ProjectEntry,
    EducationEntry,
)
from resume_tailor.parse_classes.resume_normalizer.helpers.coerce import (
    get_field,
    to_trimmed_text,
    to_optional_text,
    to_text_list,
)

NAME_PLACEHOLDER = "NAME"


def normalize_resume(candidate: Any) -> Resume:
    """
    Build a valid ``Resume`` from any input shape. Never raises.

    Rules:
        - Scalars are coerced to strings and trimmed. Empty optional scalars
          become None; an empty ``header.name`` becomes ``"NAME"``.
        - ``summary`` is kept only when it is a string (trimmed), else ``""``.
        - List fields that are not lists become ``[]``; their elements are
          coerced to strings and empty ones are dropped.
        - Header links with neither label nor url are dropped.
        - Experience entries without company or title, projects without a
          name and education entries without a school are dropped.
        - Unknown keys are ignored.

    Passing an already normalized ``Resume`` returns an equal ``Resume``.

    Args:
        candidate (Any): Untrusted resume-like object (dict, Resume, None, ...).

    Returns:
        Resume: The normalized resume.
    """
    if isinstance(candidate, Resume):
        candidate = candidate.to_dict()

    header = get_field(candidate, "header")
    summary = get_field(candidate, "summary")
    skills = get_field(candidate, "skills")

    return Resume(
        header=ResumeHeader(
            name=to_trimmed_text(get_field(header, "name")) or NAME_PLACEHOLDER,
            location=to_optional_text(get_field(header, "location")),
            email=to_optional_text(get_field(header, "email")),
            phone=to_optional_text(get_field(header, "phone")),
            links=_normalize_links(get_field(header, "links")),
        ),
        summary=summary.strip() if isinstance(summary, str) else "",
        skills=ResumeSkills(
            languages=to_text_list(get_field(skills, "languages")),
            frameworks=to_text_list(get_field(skills, "frameworks")),
            tools=to_text_list(get_field(skills, "tools")),
            other=to_text_list(get_field(skills, "other")),
        ),
        experience=_normalize_experience(get_field(candidate, "experience")),
        projects=_normalize_projects(get_field(candidate, "projects")),
        education=_normalize_education(get_field(candidate, "education")),
    )


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def _normalize_links(raw_links: Any) -> List[ResumeLink]:
    links = [
        ResumeLink(
            label=to_trimmed_text(get_field(item, "label")),
            url=to_trimmed_text(get_field(item, "url")),
        )
        for item in _as_list(raw_links)
    ]
    return [link for link in links if link.label or link.url]


def _normalize_experience(raw_entries: Any) -> List[ExperienceEntry]:
    entries = [
        ExperienceEntry(
            company=to_trimmed_text(get_field(item, "company")),
            title=to_trimmed_text(get_field(item, "title")),
            location=to_optional_text(get_field(item, "location")),
            start=to_optional_text(get_field(item, "start")),
            end=to_optional_text(get_field(item, "end")),
            bullets=to_text_list(get_field(item, "bullets")),
        )
        for item in _as_list(raw_entries)
    ]
    # Drop after coercion so whitespace-only identifiers are rejected too
    return [e for e in entries if e.company and e.title]


def _normalize_projects(raw_entries: Any) -> List[ProjectEntry]:
    entries = [
        ProjectEntry(
            name=to_trimmed_text(get_field(item, "name")),
            tech=to_text_list(get_field(item, "tech")),
            bullets=to_text_list(get_field(item, "bullets")),
        )
        for item in _as_list(raw_entries)
    ]
    return [p for p in entries if p.name]


def _normalize_education(raw_entries: Any) -> List[EducationEntry]:
    entries = [
        EducationEntry(
            school=to_trimmed_text(get_field(item, "school")),
            degree=to_optional_text(get_field(item, "degree")),
            location=to_optional_text(get_field(item, "location")),
            year=to_optional_text(get_field(item, "year")),
            details=to_text_list(get_field(item, "details")),
        )
        for item in _as_list(raw_entries)
    ]
    return [e for e in entries if e.school]
