"""Tests for markdown output formatting."""

import tempfile
from pathlib import Path

from jobspark.models.cv import CVSection, Education, Experience, ParsedCV, Skill, StructuredCV
from jobspark.output.markdown import build_cv_document, cv_to_markdown, save_markdown
from jobspark.parsing.cv_parser import parse_cv_markdown


class TestSaveMarkdown:
    """Tests for save_markdown function."""

    def test_saves_content_to_file(self) -> None:
        """Test that content is saved correctly."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "test.md"
            content = "# Test\n\nThis is a test."

            result = save_markdown(content, output_path)

            assert result == output_path
            assert output_path.read_text(encoding="utf-8") == content

    def test_creates_parent_directories(self) -> None:
        """Test that parent directories are created if needed."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "nested" / "path" / "test.md"

            result = save_markdown("# Test", output_path)

            assert result == output_path
            assert output_path.exists()

    def test_accepts_string_path(self) -> None:
        """Test that string paths are accepted."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = f"{tmpdir}/test.md"

            result = save_markdown("# Test", output_path)

            assert result == Path(output_path)


class TestCVToMarkdown:
    """Tests for whole-document re-serialization."""

    def test_reference_layout(self, jane_doe_markdown: str) -> None:
        parsed = parse_cv_markdown(jane_doe_markdown)

        assert cv_to_markdown(parsed) == (
            "# Jane Doe\n\n### jane@x.com\n\n## Experience\n\nSenior Engineer at Acme\n\n"
            "## Skills\n\n- Go\n- Rust\n"
        )

    def test_parses_back_to_the_same_cv(self, sample_cv_markdown: str) -> None:
        parsed = parse_cv_markdown(sample_cv_markdown)
        assert parse_cv_markdown(cv_to_markdown(parsed)) == parsed

    def test_skips_empty_name_and_contact(self) -> None:
        parsed = ParsedCV(sections=(CVSection(title="Skills", content="- Go\n"),))
        assert cv_to_markdown(parsed) == "## Skills\n\n- Go\n"

    def test_empty_section_keeps_its_heading(self) -> None:
        parsed = ParsedCV(name="Jane", sections=(CVSection(title="Awards"),))
        assert cv_to_markdown(parsed) == "# Jane\n\n## Awards\n"

    def test_multi_line_contact_becomes_a_paragraph(self) -> None:
        parsed = parse_cv_markdown("# Jane\n\njane@x.com\n555-0101\n\n## Skills\n\n- Go")

        markdown = cv_to_markdown(parsed)

        assert markdown == "# Jane\n\njane@x.com\n555-0101\n\n## Skills\n\n- Go\n"
        assert parse_cv_markdown(markdown) == parsed

    def test_multi_line_headings_use_setext_form(self) -> None:
        parsed = parse_cv_markdown("Jane\nDoe\n===\n\nWork\nHistory\n---\n\nAcme")

        markdown = cv_to_markdown(parsed)

        assert parsed.name == "Jane\nDoe"
        assert parse_cv_markdown(markdown) == parsed

    def test_empty_cv(self) -> None:
        assert cv_to_markdown(ParsedCV()) == ""


class TestBuildCVDocument:
    """Tests for composing a structured CV into sections."""

    def test_name_and_contact(self, sample_structured_cv: StructuredCV) -> None:
        document = build_cv_document(sample_structured_cv)

        assert document.name == "John Doe"
        assert document.contact == "john.doe@example.com | +27 82 555 0101 | Cape Town"

    def test_section_order(self, sample_structured_cv: StructuredCV) -> None:
        document = build_cv_document(sample_structured_cv)

        assert [s.title for s in document.sections] == [
            "Professional Summary",
            "Experience",
            "Education",
            "Skills",
        ]

    def test_experience_entries(self, sample_structured_cv: StructuredCV) -> None:
        experience = build_cv_document(sample_structured_cv).section("Experience")

        assert experience is not None
        lines = experience.content.splitlines()
        assert lines[0] == "**Senior Software Engineer at Tech Corp**"
        assert lines[1] == "Cape Town | 2021-01 - Present"
        assert "**Software Engineer at Startup Inc**" in lines
        assert "2017-01 - 2020-12" in lines

    def test_education_and_skills(self, sample_structured_cv: StructuredCV) -> None:
        document = build_cv_document(sample_structured_cv)

        education = document.section("Education")
        skills = document.section("Skills")
        assert education is not None
        assert education.content.startswith(
            "**MSc Computer Science**\nUniversity of Cape Town | 2015\n"
        )
        assert skills is not None
        assert skills.content.splitlines()[:2] == ["- Python (Expert)", "- React (Advanced)"]

    def test_empty_parts_are_left_out(self) -> None:
        cv = StructuredCV(
            experiences=[Experience(title="Intern", company="Acme", start_date="2024")],
            skills=[Skill(name="Excel", level="")],
        )

        document = build_cv_document(cv)

        assert document.name == ""
        assert document.contact == ""
        assert [s.title for s in document.sections] == ["Experience", "Skills"]
        assert document.sections[0].content == "**Intern at Acme**\n2024\n"
        assert document.sections[1].content == "- Excel\n"

    def test_description_lines_are_kept(self) -> None:
        cv = StructuredCV(
            education=[
                Education(
                    degree="BSc",
                    institution="Wits",
                    description="- Dean's list\n\nTutored first years",
                )
            ]
        )

        education = build_cv_document(cv).sections[0]

        assert education.content == "**BSc**\nWits\n- Dean's list\nTutored first years\n"
