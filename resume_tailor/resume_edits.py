"""resume_edits.py
Copy-on-write edits on a normalized Resume.

Every function returns a new Resume and leaves its input untouched; parts of
the resume that are not edited are shared with the previous value. Edits
follow inline-edit semantics: a blank (whitespace-only) value keeps what was
there before.
"""
from dataclasses import replace
from typing import List, Optional, TypeVar

from resume_tailor.models import Resume

T = TypeVar("T")


def _keep_if_blank(new_value: Optional[str], old_value: Optional[str]) -> Optional[str]:
    if new_value is None or not new_value.strip():
        return old_value
    return new_value


def _item_at(items: List[T], index: int, label: str) -> T:
    if not 0 <= index < len(items):
        raise IndexError(f"{label} index {index} out of range ({len(items)} item(s)).")
    return items[index]


def _replace_at(items: List[T], index: int, value: T) -> List[T]:
    """Return a copy of ``items`` with ``items[index]`` replaced."""
    updated = list(items)
    updated[index] = value
    return updated


def _edit_line(lines: List[str], index: int, text: str, label: str) -> List[str]:
    current = _item_at(lines, index, label)
    return _replace_at(lines, index, _keep_if_blank(text, current))


def update_summary(resume: Resume, summary: str) -> Resume:
    return replace(resume, summary=_keep_if_blank(summary, resume.summary))


def update_header(
    resume: Resume,
    name: Optional[str] = None,
    location: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
) -> Resume:
    """Update header fields. Fields passed as None (or blank) are left as they are."""
    header = resume.header
    return replace(
        resume,
        header=replace(
            header,
            name=_keep_if_blank(name, header.name),
            location=_keep_if_blank(location, header.location),
            email=_keep_if_blank(email, header.email),
            phone=_keep_if_blank(phone, header.phone),
        ),
    )


def update_experience_bullet(resume: Resume, entry_index: int, bullet_index: int, text: str) -> Resume:
    """
    Replace one bullet of one experience entry.

    Raises:
        IndexError: If ``entry_index`` or ``bullet_index`` is out of range.
    """
    entry = _item_at(resume.experience, entry_index, "Experience")
    bullets = _edit_line(entry.bullets, bullet_index, text, "Bullet")
    return replace(
        resume,
        experience=_replace_at(resume.experience, entry_index, replace(entry, bullets=bullets)),
    )


def update_project_bullet(resume: Resume, project_index: int, bullet_index: int, text: str) -> Resume:
    project = _item_at(resume.projects, project_index, "Project")
    bullets = _edit_line(project.bullets, bullet_index, text, "Bullet")
    return replace(
        resume,
        projects=_replace_at(resume.projects, project_index, replace(project, bullets=bullets)),
    )


def update_education_detail(resume: Resume, entry_index: int, detail_index: int, text: str) -> Resume:
    entry = _item_at(resume.education, entry_index, "Education")
    details = _edit_line(entry.details, detail_index, text, "Detail")
    return replace(
        resume,
        education=_replace_at(resume.education, entry_index, replace(entry, details=details)),
    )
