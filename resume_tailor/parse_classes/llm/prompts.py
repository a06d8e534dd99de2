"""prompts.py
Prompts sent to the LLM when tailoring a resume.
"""

TAILOR_SYSTEM_PROMPT = "You write ATS-optimized resumes and concise cover letters."

MODEL_RULES = (
    "You are tailoring a resume for ATS.\n\n"
    "Return ONLY a single JSON object with this exact shape:\n"
    "{\n"
    "  \"resume\": {\n"
    "    \"header\": { \"name\": \"string\", \"location\": \"string\", \"email\": \"string\", "
    "\"phone\": \"string\", \"links\": [{\"label\":\"string\",\"url\":\"string\"}] },\n"
    "    \"summary\": \"string\",\n"
    "    \"skills\": { \"languages\": [\"...\"], \"frameworks\": [\"...\"], \"tools\": [\"...\"], "
    "\"other\": [\"...\"] },\n"
    "    \"experience\": [{ \"company\":\"string\",\"title\":\"string\",\"location\":\"string\","
    "\"start\":\"string\",\"end\":\"string\",\"bullets\":[\"...\"] }],\n"
    "    \"projects\": [{ \"name\":\"string\",\"tech\":[\"...\"],\"bullets\":[\"...\"] }],\n"
    "    \"education\": [{ \"school\":\"string\",\"degree\":\"string\",\"location\":\"string\","
    "\"year\":\"string\",\"details\":[\"...\"] }]\n"
    "  },\n"
    "  \"cover_letter\": \"string\"\n"
    "}\n\n"
    "Rules:\n"
    "- No markdown, no extra keys, no commentary.\n"
    "- Do not invent experience or credentials. Do not fabricate employers, schools, or dates.\n"
    "- Make bullets impact-focused (action + outcome; metrics if real).\n"
    "- Keep it concise (~1 page equivalent).\n"
    "- Cover letter: 3-5 short paragraphs, plain text, professional.\n"
)


def build_tailor_prompt(job_text: str, resume_text: str) -> str:
    """Assemble the user prompt from the rules, the job description and the resume text."""
    return (
        f"{MODEL_RULES}\n"
        "JOB DESCRIPTION:\n"
        f"{job_text}\n\n"
        "CANDIDATE RESUME (extracted text):\n"
        f"{resume_text}\n"
    )
