"""mock_resume_generator.py
Builds realistic resume text (as pasted by a user or extracted from an upload)
and job descriptions to feed the tailoring pipeline in tests.
"""
from dataclasses import dataclass
from typing import List, Optional
import copy

DEFAULT_SECTION_ORDER = [
    "contact_info",
    "work_experience",
    "education",
    "projects",
    "skills",
]

# -------------------------------------------------------------------------
# DUMMY RESUME BLOCKS (to construct resumes from)
# First example in each list is the default used
# -------------------------------------------------------------------------
DUMMY_RESUME_BLOCKS = {
    "contact_info": [
        "{name}  Greater New York  {phone}  {email}  linkedin.com/in/{linkedin_name}",
        "{name}\nGreater New York Area | {phone} | {email} | linkedin.com/in/{linkedin_name}",
    ],
    "work_experience": [
        "WORK EXPERIENCE\n"
        "Data Engineer\n"
        "{company_name}\n"
        "May 2018 - current Colorado Springs, CO\n"
        "• Streamlined customer support by using SysAid for ticket management, boosting satisfaction by 27%.\n"
        "• Built SQL reporting pipelines consumed by React dashboards.",

        "WORK EXPERIENCE\n"
        "MARCH 2021 - CURRENT\n"
        "Data Scientist | {company_name} | San Diego, CA\n"
        "● Pioneered segmentation in Google Analytics 4, leading to 3 successful campaigns.",
    ],
    "education": [
        "EDUCATION\nM.S. Computer Science, San Diego State University\nFebruary 2016 - June 2018",
        "EDUCATION\nM.A. English, University of Texas at San Antonio\nJanuary 2021 - May 2023",
    ],
    "projects": [
        "PROJECTS\nh2oFiltration – Group Member 2021\n• Designed a low-cost water filtration monitor.",
        "ACHIEVEMENTS\n2022 GREW ANNUAL REVENUE BY 11%",
    ],
    "skills": [
        "SKILLS\n{skills}",
        "Skills: {skills}",
    ],
}

MOCK_JOB_TEXT = (
    "We are hiring a Data Engineer to build SQL pipelines and React dashboards. "
    "You will work with Python, Docker and TypeScript, partner with analysts, "
    "and own data quality for our reporting platform."
)


@dataclass
class ResumeValues:
    """
    Fillable values substituted into the DUMMY_RESUME_BLOCKS templates.
    """
    name: str = "John Doe"
    email: str = "john.doe@example.com"
    phone: str = "123-456-7890"
    linkedin_name: str = "john_doe23"
    company_name: str = "Comcast"
    skills: str = "Python, SQL, React, Docker, Power BI"


@dataclass
class ResumeTemplates:
    contact_info: str = DUMMY_RESUME_BLOCKS["contact_info"][0]
    work_experience: str = DUMMY_RESUME_BLOCKS["work_experience"][0]
    education: str = DUMMY_RESUME_BLOCKS["education"][0]
    projects: str = DUMMY_RESUME_BLOCKS["projects"][0]
    skills: str = DUMMY_RESUME_BLOCKS["skills"][0]


class MockResumeGenerator:
    """
    Generate realistic mock resumes for testing purposes.

    Attributes:
        values (ResumeValues): Fillable field values for substitution.
        templates (ResumeTemplates): Templates for each resume section.
        section_order (List[str]): The sequence of sections to include.
    """

    def __init__(
        self,
        values: Optional[ResumeValues] = None,
        templates: Optional[ResumeTemplates] = None,
        section_order: Optional[List[str]] = None,
    ):
        self.values = values or ResumeValues()
        self.templates = templates or ResumeTemplates()
        self.section_order = DEFAULT_SECTION_ORDER if section_order is None else section_order

    def generate_sections(self) -> List[str]:
        """Render each section in `section_order`. Unknown section names are skipped."""
        fields = vars(self.values)
        return [
            getattr(self.templates, section).format(**fields)
            for section in self.section_order
            if hasattr(self.templates, section)
        ]

    def generate_text(self) -> str:
        """Full resume text with sections separated by blank lines."""
        return "\n\n".join(self.generate_sections())

    def generate_lines(self) -> List[str]:
        """Non-empty lines of the resume, e.g. to draw into a PDF or DOCX."""
        return [line.strip() for line in self.generate_text().splitlines() if line.strip()]

    def clone(
        self,
        values: Optional[ResumeValues] = None,
        templates: Optional[ResumeTemplates] = None,
        section_order: Optional[List[str]] = None,
    ) -> "MockResumeGenerator":
        """Copy this generator, optionally overriding specific attributes."""
        new_gen = copy.deepcopy(self)
        if values is not None:
            new_gen.values = values
        if templates is not None:
            new_gen.templates = templates
        if section_order is not None:
            new_gen.section_order = section_order
        return new_gen
