# llm_client_test_helpers.py

from typing import Literal
import json
import random
import uuid

from langchain_core.messages import AIMessage

MOCK_TAILORED_RESUME = {
    "header": {
        "name": "John Doe",
        "location": "Greater New York",
        "email": "john.doe@example.com",
        "phone": "123-456-7890",
        "links": [{"label": "LinkedIn", "url": "linkedin.com/in/john_doe23"}],
    },
    "summary": "Data engineer with a track record of shipping React and SQL analytics tooling.",
    "skills": {
        "languages": ["Python", "SQL", "TypeScript"],
        "frameworks": ["React", "FastAPI"],
        "tools": ["Docker", "Power BI"],
        "other": ["Data Cleaning"],
    },
    "experience": [
        {
            "company": "Comcast",
            "title": "Data Engineer",
            "location": "Colorado Springs, CO",
            "start": "May 2018",
            "end": "Present",
            "bullets": [
                "Built SQL pipelines feeding React dashboards used by 40 analysts.",
                "Cut ticket resolution time 27% by automating SysAid triage.",
            ],
        }
    ],
    "projects": [
        {
            "name": "h2oFiltration",
            "tech": ["Python", "Arduino"],
            "bullets": ["Designed a low-cost water filtration monitor."],
        }
    ],
    "education": [
        {
            "school": "San Diego State University",
            "degree": "M.S. Computer Science",
            "year": "2018",
            "details": [],
        }
    ],
}

MOCK_COVER_LETTER = (
    "Dear Hiring Manager,\n\n"
    "I am excited to apply for the Data Engineer role.\n\n"
    "Sincerely,\nJohn Doe"
)

_SUCCESS_PAYLOAD = {"resume": MOCK_TAILORED_RESUME, "cover_letter": MOCK_COVER_LETTER}

expected_test_responses = {
    "tailor_resume": {
        "success": _SUCCESS_PAYLOAD,
        "fenced": (
            "Here is your tailored resume:\n```json\n"
            + json.dumps(_SUCCESS_PAYLOAD)
            + "\n```\nLet me know if you want any changes!"
        ),
        "not_json": "I'm sorry, I can't tailor this resume.",
        "unbalanced": '{"resume": {"header": {"name": "John Doe"}, "cover_letter": "Dear',
        "missing_cover_letter": {"resume": MOCK_TAILORED_RESUME},
        "empty": "",
    }
}

def create_mock_llm_response(
    function_name: Literal["tailor_resume"],
    provider: Literal["anthropic"],
    response_type: Literal[
        "success", "fenced", "not_json", "unbalanced", "missing_cover_letter", "empty"
    ] = "success"
) -> AIMessage:
    """
    Create a simulated AIMessage to mimic LLM responses with realistic structure per provider.
    """
    try:
        content_value = expected_test_responses[function_name][response_type]
    except KeyError:
        content_value = "Generic response"

    # Convert dict responses to JSON string; leave strings as-is
    content = json.dumps(content_value) if isinstance(content_value, dict) else content_value

    # --- token counts ---
    input_tokens = random.randint(50, 150)
    output_tokens = random.randint(20, 100)
    total_tokens = input_tokens + output_tokens

    # --- build response metadata depending on provider ---
    if provider == "anthropic":
        response_metadata = {
            "id": str(uuid.uuid4()),
            "model": "claude-haiku-4-5",
            "stop_reason": "end_turn",
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "total_tokens": total_tokens
            }
        }
    else:
        raise ValueError(f"Unknown llm provider: {provider}")

    return AIMessage(
        content=content,
        additional_kwargs={},
        response_metadata=response_metadata,
        id=str(uuid.uuid4()),
        usage_metadata={
            "input_tokens": input_tokens,
            "output_tokens": output_tokens,
            "total_tokens": total_tokens
        }
    )
