"""server.py
Server to launch a FastAPI / Swagger UI instance.
"""
from typing import Any, Dict, Optional

from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from resume_tailor.exceptions import (
    ExtractionEngineUnavailableError,
    FileParserError,
    FileTooLargeError,
    InputValidationError,
    LLMConfigError,
    LLMError,
    RenderError,
    UnparseableAIResponseError,
)
from resume_tailor.logging import LoggerFactory
from resume_tailor.resume_tailor_framework import ResumeTailorFramework


app = FastAPI(title="Resume Tailor API", version="1.0")

logger = LoggerFactory().get_logger(name="api_server", logger_type="default")


class RenderInputs(BaseModel):
    resume: Any = None
    cover_letter: str = ""


class ScoreInputs(BaseModel):
    job_text: str = ""
    resume_text: str = ""


# Initiate ResumeTailorFramework for use when server calls (LLM client is created on first tailor)
tailor_framework = ResumeTailorFramework()


# --------------------------------------------------------------
# ERROR MAPPING
# --------------------------------------------------------------
def error_response(status_code: int, exc: Exception, **extra: Any) -> JSONResponse:
    """JSON error body: {"error": <message>, "code": <error_code>, ...extra}."""
    body: Dict[str, Any] = {
        "error": getattr(exc, "message", None) or str(exc),
        "code": getattr(exc, "error_code", "internal_error"),
    }
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(InputValidationError)
async def handle_input_validation_error(request: Request, exc: InputValidationError):
    return error_response(400, exc, field=exc.field_name)


@app.exception_handler(FileTooLargeError)
async def handle_file_too_large(request: Request, exc: FileTooLargeError):
    return error_response(413, exc)


@app.exception_handler(ExtractionEngineUnavailableError)
async def handle_extraction_engine_unavailable(request: Request, exc: ExtractionEngineUnavailableError):
    logger.error(f"Extraction engine unavailable: {exc}")
    return error_response(503, exc)


@app.exception_handler(FileParserError)
async def handle_file_parser_error(request: Request, exc: FileParserError):
    return error_response(
        422,
        exc,
        hint="Could not read the uploaded file. Paste the resume text instead.",
    )


@app.exception_handler(UnparseableAIResponseError)
async def handle_unparseable_ai_response(request: Request, exc: UnparseableAIResponseError):
    logger.warning(f"Unparseable AI response: {exc.reason}")
    return error_response(502, exc, raw=exc.raw_response)


@app.exception_handler(LLMError)
async def handle_llm_error(request: Request, exc: LLMError):
    logger.error(f"LLM failure: {exc}")
    return error_response(502, exc)


@app.exception_handler(LLMConfigError)
async def handle_llm_config_error(request: Request, exc: LLMConfigError):
    logger.error(f"LLM configuration error: {exc}")
    return error_response(500, exc)


@app.exception_handler(RenderError)
async def handle_render_error(request: Request, exc: RenderError):
    logger.error(f"Render failure: {exc}")
    return error_response(500, exc)


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unexpected server error")
    return JSONResponse(
        status_code=500,
        content={"error": "Server error.", "code": "internal_error", "details": str(exc)},
    )


# --------------------------------------------------------------
# ROUTES
# --------------------------------------------------------------
@app.get("/health", summary="Liveness check")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post(
    "/tailor",
    summary="Tailor a resume to a job description",
    description=(
        "Takes a job description and a resume (PDF/DOCX upload, or pasted text) and returns "
        "the normalized resume, ATS text, cover letter and base64-encoded PDF/DOCX documents."
    ),
)
def tailor(
    job_text: str = Form(""),
    resume_text: str = Form(""),
    resume_file: Optional[UploadFile] = File(None),
) -> Dict[str, Any]:
    """
    Upload a resume, tailor it against the job text and return the TailorResult payload.
    """
    file_bytes = b""
    file_name = None
    if resume_file is not None:
        file_bytes = resume_file.file.read()
        file_name = resume_file.filename

    result = tailor_framework.tailor(
        job_text=job_text,
        resume_file_bytes=file_bytes or None,
        resume_file_name=file_name,
        resume_text=resume_text,
    )
    return result.to_dict()


@app.post(
    "/render",
    summary="Regenerate documents from an edited resume",
    description="Re-renders ATS text and PDF/DOCX documents from an edited resume. No LLM call.",
)
def render(inputs: RenderInputs) -> Dict[str, Any]:
    result = tailor_framework.regenerate(resume=inputs.resume, cover_letter=inputs.cover_letter)
    payload = result.to_dict()
    payload.pop("original_resume", None)
    return payload


@app.post("/score", summary="Keyword-match a resume text against a job description")
def score(inputs: ScoreInputs) -> Dict[str, Any]:
    match = tailor_framework.score(job_text=inputs.job_text, resume_text=inputs.resume_text)
    return {
        "score": match.score,
        "keywords": match.keywords,
        "present": match.present,
        "missing": match.missing,
    }
