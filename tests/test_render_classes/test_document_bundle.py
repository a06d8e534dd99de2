"""test_document_bundle.py
Test rendering of the four downloadable documents.
"""
import pytest

from resume_tailor.exceptions import RenderError
from resume_tailor.models import DocumentBundle
from resume_tailor.render_classes import document_bundle
from resume_tailor.render_classes.document_bundle import render_document_bundle
from resume_tailor.test_helpers.llm_client_test_helpers import MOCK_COVER_LETTER


def assert_complete_bundle(bundle: DocumentBundle):
    assert bundle.resume_pdf.startswith(b"%PDF")
    assert bundle.cover_letter_pdf.startswith(b"%PDF")
    assert bundle.resume_docx.startswith(b"PK")
    assert bundle.cover_letter_docx.startswith(b"PK")
    assert not bundle.is_empty


@pytest.mark.parametrize("max_threads", [1, 2, 4, 16])
def test_bundle_rendered(normalized_mock_resume, max_threads):
    bundle = render_document_bundle(normalized_mock_resume, MOCK_COVER_LETTER, max_threads=max_threads)
    assert_complete_bundle(bundle)


def test_invalid_thread_count_warns_and_renders(normalized_mock_resume):
    with pytest.warns(UserWarning):
        bundle = render_document_bundle(normalized_mock_resume, MOCK_COVER_LETTER, max_threads=0)
    assert_complete_bundle(bundle)


@pytest.mark.parametrize("max_threads", [1, 2])
def test_failing_renderer_raises_render_error(monkeypatch, normalized_mock_resume, max_threads):
    def broken_renderer(text):
        raise ValueError("font missing")

    monkeypatch.setattr(document_bundle, "render_cover_letter_docx", broken_renderer)

    with pytest.raises(RenderError) as exc_info:
        render_document_bundle(normalized_mock_resume, MOCK_COVER_LETTER, max_threads=max_threads)

    err = exc_info.value
    assert err.document_name == "cover_letter_docx"
    assert isinstance(err.original_exception, ValueError)
    assert err.error_code == "render_failed"


def test_base64_payload_keys(normalized_mock_resume):
    payload = render_document_bundle(normalized_mock_resume, MOCK_COVER_LETTER, max_threads=1).to_base64_dict()
    assert set(payload) == {
        "resume_pdf_base64",
        "cover_letter_pdf_base64",
        "resume_docx_base64",
        "cover_letter_docx_base64",
    }
    assert all(isinstance(value, str) and value for value in payload.values())


def test_empty_bundle():
    assert DocumentBundle().is_empty
    assert DocumentBundle().to_base64_dict()["resume_pdf_base64"] == ""
