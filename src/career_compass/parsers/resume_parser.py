import re
from pathlib import Path

# Shared emoji pattern for Google Docs / LLM output cleanup
EMOJI_PATTERN = (
    r"[\U0001f4e7\U0001f4de\U0001f4cd\U0001f4bc\U0001f4c5\U0001f393"
    r"\U0001f3e2\U0001f4dd\U0001f4c4\U0001f517\U0001f310\U0001f4f1"
    r"\u260e\u2709\u2706\u2702]\s*"
)

SUPPORTED_SUFFIXES = (".pdf", ".docx", ".txt", ".md")

# Heading line -> section name; a heading is a short line, optionally ending with ":"
SECTION_PATTERNS = {
    "contact": re.compile(r"^(contact|personal\s+information|contact\s+information)\s*:?$", re.I),
    "summary": re.compile(
        r"^(summary|profile|objective|professional\s+summary|career\s+objective|about(\s+me)?)\s*:?$", re.I
    ),
    "experience": re.compile(
        r"^(experience|work\s+experience|professional\s+experience|employment(\s+history)?|career\s+history)\s*:?$",
        re.I,
    ),
    "education": re.compile(
        r"^(education|academic\s+background|qualifications|academic\s+qualifications)\s*:?$", re.I
    ),
    "skills": re.compile(
        r"^(skills|technical\s+skills|core\s+competencies|expertise|proficiencies)\s*:?$", re.I
    ),
    "projects": re.compile(r"^(projects|personal\s+projects|key\s+projects|notable\s+projects)\s*:?$", re.I),
    "certifications": re.compile(r"^(certifications|certificates|licenses|credentials)\s*:?$", re.I),
}

_CONTACT_LINE = re.compile(
    r"[\w.+-]+@[\w-]+\.[\w.]+"  # email
    r"|\+?\d[\d\s().-]{7,}\d"  # phone
    r"|linkedin\.com/|github\.com/",
    re.I,
)


def parse_resume(file_path: str | Path) -> str:
    """Parse a resume file (PDF, DOCX, TXT, MD) and return clean plain text."""
    path = Path(file_path)
    if path.suffix.lower() == ".pdf":
        return clean_text(_parse_pdf(path))
    elif path.suffix.lower() == ".docx":
        return clean_text(_parse_docx(path))
    elif path.suffix.lower() in (".txt", ".md"):
        return clean_text(path.read_text(encoding="utf-8"))
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")


def clean_text(text: str) -> str:
    """Clean extraction artifacts.

    Handles: unicode artifacts, emoji icons, excessive whitespace,
    inconsistent bullet styles, and trailing whitespace.
    """
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(EMOJI_PATTERN, "", text)

    # ●, •, ◦, ◆, ■, ▪, ★, ○ -> -
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)
    text = re.sub(r"^(\s*)\*\s{2,}", r"\1- ", text, flags=re.MULTILINE)

    lines = [re.sub(r"[ \t]{2,}", " ", line.strip()) for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def _section_for(line: str) -> str | None:
    heading = line.strip().strip("#").strip()
    if not heading or len(heading.split()) > 4:
        return None
    for name, pattern in SECTION_PATTERNS.items():
        if pattern.match(heading):
            return name
    return None


def extract_sections(text: str) -> dict[str, str]:
    """Split resume text into named sections by heading lines.

    Text before the first heading goes to "other". When no contact heading
    exists, contact-looking lines among the first five become "contact".
    """
    sections: dict[str, list[str]] = {}
    current = "other"
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    for line in lines:
        name = _section_for(line)
        if name is not None:
            current = name
            sections.setdefault(current, [])
            continue
        sections.setdefault(current, []).append(line)

    result = {name: "\n".join(body) for name, body in sections.items() if body}
    if "contact" not in result:
        contact = [line for line in lines[:5] if _CONTACT_LINE.search(line)]
        if contact:
            result["contact"] = "\n".join(contact)
    return result


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    doc = fitz.open(str(path))
    text = []
    for page in doc:
        text.append(page.get_text())
    doc.close()
    return "\n".join(text)


def _parse_docx(path: Path) -> str:
    from docx import Document

    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
