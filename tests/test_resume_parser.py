"""Tests for resume parsing and section extraction."""

import pytest

from career_compass.parsers.resume_parser import clean_text, extract_sections, parse_resume


class TestCleanText:
    def test_normalizes_bullets_and_whitespace(self):
        text = "\ufeff\u2022 Built   APIs\n\n\n\n\u25cf Led team\n  trailing   "
        assert clean_text(text) == "- Built APIs\n\n- Led team\ntrailing"

    def test_removes_emoji_icons(self):
        assert clean_text("\U0001f4e7 jane@example.com") == "jane@example.com"
        assert clean_text("\u260e 555 123 4567") == "555 123 4567"

    def test_removes_invisible_characters(self):
        assert clean_text("Py\u200bthon\u00ad Go\u2060\ufeff") == "Python Go"


class TestExtractSections:
    def test_sections_by_heading(self, sample_resume_text):
        sections = extract_sections(sample_resume_text)
        assert set(sections) >= {"other", "summary", "experience", "education", "skills", "contact"}
        assert sections["other"].startswith("Jane Doe")
        assert "Kubernetes" in sections["experience"]
        assert sections["skills"].startswith("Python, Go")

    def test_contact_from_first_lines(self, sample_resume_text):
        sections = extract_sections(sample_resume_text)
        assert sections["contact"] == "jane.doe@example.com | +1 555 123 4567 | linkedin.com/in/janedoe"

    def test_markdown_and_colon_headings(self):
        sections = extract_sections("## Work Experience\nEngineer at Acme\nSkills:\nPython")
        assert sections == {"experience": "Engineer at Acme", "skills": "Python"}

    def test_long_lines_are_not_headings(self):
        sections = extract_sections("Summary of my many projects and experience so far\nMore text")
        assert "summary" not in sections
        assert sections["other"].startswith("Summary of")

    def test_empty_text(self):
        assert extract_sections("") == {}


class TestParseResume:
    def test_parse_txt(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe\n\n\n\n\u2022 Python", encoding="utf-8")
        assert parse_resume(path) == "Jane Doe\n\n- Python"

    def test_parse_docx(self, tmp_path):
        docx = pytest.importorskip("docx")
        document = docx.Document()
        document.add_paragraph("Experience")
        document.add_paragraph("")
        document.add_paragraph("Engineer at Acme")
        path = tmp_path / "resume.docx"
        document.save(str(path))
        assert parse_resume(path) == "Experience\nEngineer at Acme"

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "resume.rtf"
        path.write_text("x")
        with pytest.raises(ValueError, match="Unsupported"):
            parse_resume(path)
