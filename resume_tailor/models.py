"""models.py
Holds standardized data models used across various functions.

Resume models are frozen: edits produce new values (see ``resume_edits.py``)
instead of mutating an existing resume.
"""
import base64
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field, replace


# ---------------------------------------------------------------------------
# Resume record
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ResumeLink:
    """A labelled link shown in the resume header (portfolio, LinkedIn, ...)."""
    label: str = ""
    url: str = ""


@dataclass(frozen=True)
class ResumeHeader:
    """
    Contact block at the top of the resume.

    Attributes:
        name (str): Full name of the candidate. The normalizer fills in the
            placeholder ``"NAME"`` when it is missing.
        location (Optional[str]): City / region.
        email (Optional[str]): Email address.
        phone (Optional[str]): Phone number.
        links (List[ResumeLink]): Ordered header links.
    """
    name: str = ""
    location: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    links: List[ResumeLink] = field(default_factory=list)


@dataclass(frozen=True)
class ResumeSkills:
    """Skills grouped in the fixed ATS category order."""
    languages: List[str] = field(default_factory=list)
    frameworks: List[str] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)
    other: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ExperienceEntry:
    company: str
    title: str
    location: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    bullets: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProjectEntry:
    name: str
    tech: List[str] = field(default_factory=list)
    bullets: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class EducationEntry:
    school: str
    degree: Optional[str] = None
    location: Optional[str] = None
    year: Optional[str] = None
    details: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Resume:
    """
    Canonical structured resume produced by the normalizer.

    All list fields are always present (possibly empty). Entries lacking
    their identifying field (company/title, project name, school) never
    make it into a normalized Resume.
    """
    header: ResumeHeader = field(default_factory=ResumeHeader)
    summary: str = ""
    skills: ResumeSkills = field(default_factory=ResumeSkills)
    experience: List[ExperienceEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dict. Unset optional fields are omitted."""
        return {
            "header": _drop_none({
                "name": self.header.name,
                "location": self.header.location,
                "email": self.header.email,
                "phone": self.header.phone,
                "links": [{"label": l.label, "url": l.url} for l in self.header.links],
            }),
            "summary": self.summary,
            "skills": {
                "languages": list(self.skills.languages),
                "frameworks": list(self.skills.frameworks),
                "tools": list(self.skills.tools),
                "other": list(self.skills.other),
            },
            "experience": [
                _drop_none({
                    "company": e.company,
                    "title": e.title,
                    "location": e.location,
                    "start": e.start,
                    "end": e.end,
                    "bullets": list(e.bullets),
                })
                for e in self.experience
            ],
            "projects": [
                {"name": p.name, "tech": list(p.tech), "bullets": list(p.bullets)}
                for p in self.projects
            ],
            "education": [
                _drop_none({
                    "school": e.school,
                    "degree": e.degree,
                    "location": e.location,
                    "year": e.year,
                    "details": list(e.details),
                })
                for e in self.education
            ],
        }


def _drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


# ---------------------------------------------------------------------------
# Text extraction
# ---------------------------------------------------------------------------
@dataclass
class ExtractedPage:
    """
    Represents a single page of text extracted from an uploaded document.

    Attributes:
        page_number (int): Index of the page within the document, counting
            sequentially. Starts at 1.
        fragments (List[str]): Discrete text fragments in extraction order.
    """
    page_number: int
    fragments: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Fragments joined by a single space."""
        return " ".join(self.fragments)


# ---------------------------------------------------------------------------
# Keyword matching
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class KeywordFrequency:
    """One entry of the keyword index: a normalized token and how often it occurs."""
    keyword: str
    count: int


@dataclass
class MatchResult:
    """
    Outcome of matching job keywords against a resume text.

    Attributes:
        score (int): Integer percentage (0-100) of keywords found.
        keywords (List[str]): Ranked job keywords.
        present (List[str]): Keywords found in the resume text.
        missing (List[str]): Keywords absent from the resume text.
    """
    score: int = 0
    keywords: List[str] = field(default_factory=list)
    present: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Tailoring outputs
# ---------------------------------------------------------------------------
@dataclass
class TailorResponse:
    """Model output after JSON coercion, before normalization."""
    resume: Any
    cover_letter: Any


@dataclass(frozen=True)
class DocumentBundle:
    """Rendered binary documents for one resume / cover letter pair."""
    resume_pdf: bytes = b""
    cover_letter_pdf: bytes = b""
    resume_docx: bytes = b""
    cover_letter_docx: bytes = b""

    def to_base64_dict(self) -> Dict[str, str]:
        return {
            "resume_pdf_base64": _b64(self.resume_pdf),
            "cover_letter_pdf_base64": _b64(self.cover_letter_pdf),
            "resume_docx_base64": _b64(self.resume_docx),
            "cover_letter_docx_base64": _b64(self.cover_letter_docx),
        }

    @property
    def is_empty(self) -> bool:
        return not any(
            [self.resume_pdf, self.cover_letter_pdf, self.resume_docx, self.cover_letter_docx]
        )


def _b64(payload: bytes) -> str:
    return base64.b64encode(payload).decode("ascii")


@dataclass(frozen=True)
class TailorResult:
    """
    Full result of a tailor (or regenerate) request.

    Attributes:
        original_resume (str): Text extracted from the upload (or pasted).
            Empty for regenerate requests.
        tailored_resume (str): Canonical ATS text of ``resume``.
        resume (Resume): Normalized structured resume.
        cover_letter (str): Cover letter text.
        documents (DocumentBundle): Rendered PDF/DOCX documents.
    """
    original_resume: str
    tailored_resume: str
    resume: Resume
    cover_letter: str
    documents: DocumentBundle = field(default_factory=DocumentBundle)

    def to_dict(self) -> Dict[str, Any]:
        """Transport payload with every document base64-encoded."""
        return {
            "original_resume": self.original_resume,
            "tailored_resume": self.tailored_resume,
            "resume": self.resume.to_dict(),
            "cover_letter": self.cover_letter,
            **self.documents.to_base64_dict(),
        }

    def strip_documents(self) -> "TailorResult":
        """Return a copy of this result without binary payloads."""
        return replace(self, documents=DocumentBundle())
