from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pypdf import PdfReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedResume:
    text: str
    source: str  # "text" | "pdf" | "none"
    path: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.source != "none" and bool(self.text.strip())


def _read_pdf(path: Path) -> str:
    reader = PdfReader(str(path))
    pages = (page.extract_text() or "" for page in reader.pages)
    return "\n".join(t for t in pages if t.strip()).strip()


def load_resume_text(*, resume_text_path: Optional[str], resume_pdf_path: Optional[str]) -> LoadedResume:
    """
    Read a CV from disk for profile extraction.

    A plain-text file wins over a PDF when both are given. Unreadable or
    empty files come back as source="none" with empty text so the caller
    can report it; nothing here raises for a bad file.
    """
    if resume_text_path:
        p = Path(resume_text_path)
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read resume text %s: %s", p, exc)
            return LoadedResume(text="", source="none", path=str(p))
        return LoadedResume(text=text, source="text" if text.strip() else "none", path=str(p))

    if resume_pdf_path:
        p = Path(resume_pdf_path)
        try:
            text = _read_pdf(p)
        except Exception as exc:
            logger.warning("Could not extract text from resume PDF %s: %s", p, exc)
            return LoadedResume(text="", source="none", path=str(p))
        if not text:
            logger.info("Resume PDF %s has no extractable text (scanned image?)", p)
            return LoadedResume(text="", source="none", path=str(p))
        return LoadedResume(text=text, source="pdf", path=str(p))

    return LoadedResume(text="", source="none", path=None)
