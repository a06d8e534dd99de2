"""conftest.py
Pytest setup: session logging, the --llm-mode option and shared fixtures.
"""
import os

import pytest
from resume_tailor.logging import LoggerFactory
from resume_tailor.conftest_helpers import apply_mock_llm_patch
from resume_tailor.parse_classes.resume_normalizer.resume_normalizer import normalize_resume
from resume_tailor.test_helpers.file_parsing import build_docx_bytes, build_pdf_bytes
from resume_tailor.test_helpers.llm_client_test_helpers import MOCK_TAILORED_RESUME
from resume_tailor.test_helpers.mock_resume_generator import MockResumeGenerator

LLM_TEST_MODES = ["mock_only", "basic_only", "full"]

# --------------------------------------------------------------
# TEST RUN LOGGING
# --------------------------------------------------------------
logger = LoggerFactory().get_logger(
    name="pytest_logger",
    logger_type="pytest",
    console=True
)
_last_test_file = None

@pytest.hookimpl(tryfirst=True)
def pytest_sessionstart(session):
    logger.info("==== PYTEST SESSION START ====")

@pytest.hookimpl(tryfirst=True)
def pytest_runtest_logstart(nodeid, location):
    """Print a header whenever the run moves on to another test file."""
    global _last_test_file
    test_file = location[0]
    if test_file != _last_test_file:
        _last_test_file = test_file
        logger.info(f"\n---- {test_file} ----")

@pytest.hookimpl(tryfirst=True)
def pytest_runtest_logreport(report):
    if report.when != "call":
        return

    if report.passed:
        logger.info(f"PASSED: {report.nodeid}")
    elif report.failed:
        logger.error(f"FAILED: {report.nodeid}\n{report.longreprtext}")
    elif report.skipped:
        logger.warning(f"SKIPPED: {report.nodeid}\n{report.longreprtext}")

@pytest.hookimpl(tryfirst=True)
def pytest_sessionfinish(session, exitstatus):
    logger.info(f"==== PYTEST SESSION END: exitstatus={exitstatus} ====")


# --------------------------------------------------------------
# --llm-mode OPTION
# --------------------------------------------------------------
def pytest_addoption(parser):
    """
    Choose how tests talk to the LLM.

        pytest                        # canned responses only (default)
        pytest --llm-mode=basic_only  # canned responses, live smoke tests enabled
        pytest --llm-mode=full        # every LLMClient makes live calls
    """
    parser.addoption(
        "--llm-mode",
        action="store",
        default="mock_only",
        choices=LLM_TEST_MODES,
        help="LLM test mode: mock_only (default), basic_only or full.",
    )

@pytest.fixture(scope="session")
def LLM_TEST_MODE(request):
    """The --llm-mode value: 'mock_only', 'basic_only' or 'full'."""
    return request.config.getoption("--llm-mode")


# --------------------------------------------------------------
# MOCK LLM FIXTURES
# --------------------------------------------------------------
@pytest.fixture(autouse=False)
def FORCE_MOCK_LLM_RESPONSES(monkeypatch):
    """
    Make every LLMClient created during the test answer with canned responses,
    whatever --llm-mode says. Use for tests that must never reach the API:

        @pytest.mark.usefixtures("FORCE_MOCK_LLM_RESPONSES")
        class TestTailor:
            ...
    """
    apply_mock_llm_patch(monkeypatch)
    yield


@pytest.fixture
def USE_MOCK_LLM_RESPONSE_SETTING(monkeypatch, LLM_TEST_MODE):
    """
    Canned responses unless --llm-mode=full, in which case LLMClient makes
    live calls (requires ANTHROPIC_API_KEY).
    """
    if LLM_TEST_MODE != "full":
        apply_mock_llm_patch(monkeypatch)
    yield


@pytest.fixture
def LIVE_LLM(LLM_TEST_MODE):
    """Skip unless live calls are enabled and an API key is configured."""
    if LLM_TEST_MODE == "mock_only":
        pytest.skip("Live LLM tests need --llm-mode=basic_only or --llm-mode=full")
    key = os.getenv("ANTHROPIC_API_KEY")
    if not key or key == "<REPLACE_ME>":
        pytest.skip("ANTHROPIC_API_KEY not defined in .env")


# --------------------------------------------------------------
# SHARED RESUME FIXTURES
# --------------------------------------------------------------
@pytest.fixture
def mock_resume_generator():
    return MockResumeGenerator()


@pytest.fixture
def mock_resume_pdf(mock_resume_generator):
    """The default mock resume drawn into a two-page PDF."""
    lines = mock_resume_generator.generate_lines()
    return build_pdf_bytes([lines[:6], lines[6:]])


@pytest.fixture
def mock_resume_docx(mock_resume_generator):
    return build_docx_bytes(mock_resume_generator.generate_lines())


@pytest.fixture
def normalized_mock_resume():
    """The canned tailored resume after normalization."""
    return normalize_resume(MOCK_TAILORED_RESUME)
