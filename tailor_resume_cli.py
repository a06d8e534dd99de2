"""tailor_resume_cli.py
Run ResumeTailorFramework from the command line.
Example: `python tailor_resume_cli.py path/to/resume.pdf path/to/job.txt out/`
"""
import os
import sys

from resume_tailor.history.history_store import HistoryStore
from resume_tailor.resume_tailor_framework import ResumeTailorFramework

HISTORY_PATH = os.getenv("TAILOR_HISTORY_PATH", "tailor_history.json")

OUTPUT_FILES = {
    "resume_pdf": "tailored_resume.pdf",
    "cover_letter_pdf": "cover_letter.pdf",
    "resume_docx": "tailored_resume.docx",
    "cover_letter_docx": "cover_letter.docx",
}


def main():
    if len(sys.argv) < 3:
        print("Usage: python tailor_resume_cli.py <resume_path> <job_text_path> [output_dir]")
        sys.exit(1)

    resume_path, job_text_path = sys.argv[1], sys.argv[2]
    output_dir = sys.argv[3] if len(sys.argv) > 3 else "tailored_output"

    with open(resume_path, "rb") as f:
        resume_bytes = f.read()
    with open(job_text_path, "r", encoding="utf-8") as f:
        job_text = f.read()

    framework = ResumeTailorFramework()
    result = framework.tailor(
        job_text=job_text,
        resume_file_bytes=resume_bytes,
        resume_file_name=os.path.basename(resume_path),
    )

    # Write documents + ATS text
    os.makedirs(output_dir, exist_ok=True)
    for attr, file_name in OUTPUT_FILES.items():
        with open(os.path.join(output_dir, file_name), "wb") as f:
            f.write(getattr(result.documents, attr))
    with open(os.path.join(output_dir, "tailored_resume.txt"), "w", encoding="utf-8") as f:
        f.write(result.tailored_resume)

    match = framework.score(job_text, result.tailored_resume)

    print("Resume Tailoring Result:")
    print(f"Name: {result.resume.header.name}")
    print(f"ATS keyword score: {match.score}%")
    print(f"Missing keywords: {', '.join(match.missing) if match.missing else 'None'}")
    print(f"Documents written to: {os.path.abspath(output_dir)}")

    outcome = HistoryStore(HISTORY_PATH).add(result, job_text)
    if outcome.notice:
        print(outcome.notice)


if __name__ == "__main__":
    main()
