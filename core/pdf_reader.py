import re
from typing import Dict, List, Tuple

import fitz  # PyMuPDF

from core.errors import PdfExtractionError

WHITESPACE_RE = re.compile(r"\s+")

# Decimal places of a word's top edge used as its row key
ROW_PRECISION = 1


def _page_lines(page) -> List[str]:
    """Group a page's positioned words into rows and read them top-down, left-right."""
    rows: Dict[float, List[Tuple[float, str]]] = {}
    for x0, y0, _x1, _y1, word, *_ in page.get_text("words"):
        if not word:
            continue
        rows.setdefault(round(y0, ROW_PRECISION), []).append((x0, word))

    lines = []
    for y in sorted(rows):
        fragments = sorted(rows[y], key=lambda fragment: fragment[0])
        lines.append(" ".join(text for _, text in fragments))
    return lines


def extract_text_from_pdf(data: bytes) -> str:
    """
    Extract line-ordered plain text from PDF bytes.
    Raises PdfExtractionError when the document cannot be parsed.
    """
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        raise PdfExtractionError(f"Could not open PDF: {e}") from e

    lines: List[str] = []
    with doc:
        for page in doc:
            lines.extend(_page_lines(page))
    return "\n".join(lines)


def normalize_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text or "").strip()
