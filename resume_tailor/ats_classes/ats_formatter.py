"""ats_formatter.py
Renders a normalized ``Resume`` as canonical single-column ATS text.

The output is deterministic: it is used for side-by-side comparison, as the
body for keyword matching, and as the text fallback for rendered documents.
"""
import re
from typing import Iterable, List, Mapping, Optional, Union

from resume_tailor.models import EducationEntry, ExperienceEntry, ProjectEntry, Resume, ResumeSkills
from resume_tailor.parse_classes.resume_normalizer.resume_normalizer import normalize_resume

NAME_PLACEHOLDER = "NAME"
EMPTY_PLACEHOLDER = "—"  # em dash
TITLE_SEPARATOR = " — "
DATE_RANGE_SEPARATOR = "–"  # en dash
FIELD_SEPARATOR = " | "

SECTION_ORDER = ["SUMMARY", "SKILLS", "EXPERIENCE", "PROJECTS", "EDUCATION"]

_WHITESPACE_RE = re.compile(r"\s+")
# C0 controls other than tab, newline and carriage return are not valid in XML documents
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def clean(text: Optional[str]) -> str:
    """Collapse internal whitespace to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def strip_control_chars(text: Optional[str]) -> str:
    return _CONTROL_CHARS_RE.sub("", text or "")


def join_non_empty(parts: Iterable[Optional[str]], separator: str) -> str:
    """Clean every part, drop empty ones and join the rest."""
    return separator.join(p for p in (clean(part) for part in parts) if p)


def section_header(title: str) -> str:
    return f"-- {title} --"


def format_contact_line(resume: Resume) -> str:
    """Location, email, phone and links (url, or label when no url) joined by " | "."""
    header = resume.header
    links = [link.url or link.label for link in header.links]
    return join_non_empty([header.location, header.email, header.phone, *links], FIELD_SEPARATOR)


def format_skill_lines(skills: ResumeSkills) -> List[str]:
    categories = [
        ("Languages", skills.languages),
        ("Frameworks", skills.frameworks),
        ("Tools", skills.tools),
        ("Other", skills.other),
    ]
    return [f"{label}: {', '.join(values)}" for label, values in categories if values]


def format_experience_heading(entry: ExperienceEntry) -> str:
    """Company — Title | Location | Start–End, skipping empty parts."""
    return join_non_empty(
        [
            join_non_empty([entry.company, entry.title], TITLE_SEPARATOR),
            entry.location,
            join_non_empty([entry.start, entry.end], DATE_RANGE_SEPARATOR),
        ],
        FIELD_SEPARATOR,
    )


def format_project_heading(project: ProjectEntry) -> str:
    tech = [t for t in (clean(t) for t in project.tech) if t]
    return clean(project.name) + (f" | Tech: {', '.join(tech)}" if tech else "")


def format_education_heading(entry: EducationEntry) -> str:
    school = clean(entry.school)
    if clean(entry.degree):
        school += f"{TITLE_SEPARATOR}{clean(entry.degree)}"
    return join_non_empty([school, entry.location, entry.year], FIELD_SEPARATOR) or EMPTY_PLACEHOLDER


def _bullet_lines(bullets: Iterable[str]) -> List[str]:
    cleaned = [b for b in (clean(bullet) for bullet in bullets) if b]
    if not cleaned:
        return [f"- {EMPTY_PLACEHOLDER}"]
    return [f"- {b}" for b in cleaned]


def format_resume_ats(resume: Union[Resume, Mapping, None]) -> str:
    """
    Format a resume as ATS text.

    Layout (sections always present, in this order)::

        <name or NAME>
        <location | email | phone | links>      (omitted when empty)

        -- SUMMARY --
        ...
        -- EDUCATION --
        ...

    Empty sections render a single em dash. Experience and project entries
    without bullets render ``- —``. The result is trimmed and ends with
    exactly one newline.

    Args:
        resume (Resume | Mapping | None): Resume to format. Anything that is not
            a ``Resume`` is normalized first.

    Returns:
        str: Canonical ATS text.
    """
    if not isinstance(resume, Resume):
        resume = normalize_resume(resume)

    out: List[str] = [clean(resume.header.name) or NAME_PLACEHOLDER]
    contact_line = format_contact_line(resume)
    if contact_line:
        out.append(contact_line)
    out.append("")

    # SUMMARY
    out.append(section_header("SUMMARY"))
    out.append(resume.summary.strip() if clean(resume.summary) else EMPTY_PLACEHOLDER)
    out.append("")

    # SKILLS
    out.append(section_header("SKILLS"))
    out.extend(format_skill_lines(resume.skills) or [EMPTY_PLACEHOLDER])
    out.append("")

    # EXPERIENCE
    out.append(section_header("EXPERIENCE"))
    if not resume.experience:
        out.extend([EMPTY_PLACEHOLDER, ""])
    for entry in resume.experience:
        out.append(format_experience_heading(entry))
        out.extend(_bullet_lines(entry.bullets))
        out.append("")

    # PROJECTS
    out.append(section_header("PROJECTS"))
    if not resume.projects:
        out.extend([EMPTY_PLACEHOLDER, ""])
    for project in resume.projects:
        out.append(format_project_heading(project))
        out.extend(_bullet_lines(project.bullets))
        out.append("")

    # EDUCATION
    out.append(section_header("EDUCATION"))
    if not resume.education:
        out.append(EMPTY_PLACEHOLDER)
    for entry in resume.education:
        out.append(format_education_heading(entry))
        out.extend(f"- {d}" for d in (clean(detail) for detail in entry.details) if d)

    return "\n".join(out).strip() + "\n"
