"""PDF export for CVs.

Lays a CV out on A4 portrait pages:
- Header: centred name and contact line, followed by a thin divider
- Sections: upper-cased bold title, then the section content line by line
- Content lines: bullets (`- ` / `* `), bold-only lines (`**...**`) and
  word-wrapped plain text

Pagination is greedy: before each block is drawn its height is computed, and
if it does not fit above the bottom margin a new page is started. Only the
next block is considered, so a section title can end up alone at the bottom
of a page. A block taller than a page starts on a new page and its lines flow
onto the pages after it.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from fpdf import FPDF, ViewerPreferences  # type: ignore[import-untyped]

from jobspark.models.cv import ParsedCV, StructuredCV
from jobspark.output.markdown import build_cv_document

logger = logging.getLogger(__name__)

# Geometry (mm)
MARGIN = 20.0
LINE_HEIGHT = 5.0
LINE_GAP = 1.0
SECTION_GAP = 5.0
BULLET_INDENT = 5.0
LINE_HEIGHT_FACTOR = 1.15

# Typography (pt)
NAME_SIZE = 22
TITLE_SIZE = 14
BODY_SIZE = 10
FOOTER_SIZE = 8

BULLET = "•"
ELLIPSIS = "..."
DIVIDER_COLOR = (200, 200, 200)
MUTED_COLOR = (96, 96, 96)

GENERIC_FAILURE_MESSAGE = "An error occurred while generating the PDF."


class PDFRenderError(Exception):
    """Raised when a CV cannot be laid out as a PDF."""


@dataclass(frozen=True)
class LayoutEntry:
    """A block drawn on the page."""

    kind: str  # name, contact, divider, section_title, bullet, bold, text
    text: str
    page: int
    y: float


@dataclass(frozen=True)
class RenderedPDF:
    """Result of laying out a CV."""

    content: bytes
    page_count: int
    layout: tuple[LayoutEntry, ...] = ()


def sanitize_file_name(file_name: str) -> str:
    """Replace every non-alphanumeric character with `_` and lower-case the rest."""
    return re.sub(r"[^a-z0-9]", "_", file_name, flags=re.IGNORECASE).lower()


def classify_line(line: str) -> tuple[str, str]:
    """Classify a trimmed content line.

    Returns:
        Tuple of (kind, text) where kind is 'bullet', 'bold' or 'text' and
        text has the Markdown markers removed.
    """
    if line.startswith(("* ", "- ")):
        return "bullet", line[2:]
    if line.startswith("**") and line.endswith("**") and len(line) >= 4:
        return "bold", line[2:-2]
    return "text", line


def _sanitize_unsupported_chars(text: str) -> str:
    """Fold text into the Windows-1252 repertoire of the built-in PDF fonts."""
    replacements = {
        "‘": "'",
        "’": "'",
        "“": '"',
        "”": '"',
    }
    for char, replacement in replacements.items():
        text = text.replace(char, replacement)
    return text.encode("cp1252", errors="replace").decode("cp1252")


def _get_unicode_fonts(font_dir: Path | None) -> dict[str, Path] | None:
    """Get Poppins font files from a fonts directory.

    Returns dict with fpdf style keys ('', 'B', 'I') mapped to their file
    paths, or None if any of them is missing.
    """
    if font_dir is None or not font_dir.exists():
        return None

    fonts = {
        "": font_dir / "Poppins-Regular.ttf",
        "B": font_dir / "Poppins-Bold.ttf",
        "I": font_dir / "Poppins-Italic.ttf",
    }
    for path in fonts.values():
        if not path.exists():
            return None
    return fonts


class CVPDFGenerator(FPDF):
    """A4 CV layout with a manually tracked vertical cursor.

    Uses Poppins (Open Font License) when the font files are available,
    otherwise the built-in Helvetica.
    """

    def __init__(self, font_dir: Path | None = None) -> None:
        super().__init__(orientation="P", unit="mm", format="A4")
        self.set_auto_page_break(auto=False)
        self.set_margins(left=MARGIN, top=MARGIN, right=MARGIN)
        self.core_fonts_encoding = "windows-1252"

        self.cursor_y = MARGIN
        self.layout: list[LayoutEntry] = []
        self._unicode = self._setup_fonts(font_dir)

    @property
    def usable_width(self) -> float:
        return self.w - 2 * MARGIN

    def _setup_fonts(self, font_dir: Path | None) -> bool:
        fonts = _get_unicode_fonts(font_dir)
        if fonts:
            for style, path in fonts.items():
                self.add_font("Poppins", style, str(path))
            self.font_name = "Poppins"
            return True
        self.font_name = "Helvetica"
        return False

    def _clean(self, text: str) -> str:
        return text if self._unicode else _sanitize_unsupported_chars(text)

    def footer(self) -> None:
        """Add page number footer for multi-page CVs."""
        if self.page_no() > 1:
            self.set_y(-15)
            self.set_font(self.font_name, "I", FOOTER_SIZE)
            self.set_text_color(*MUTED_COLOR)
            self.cell(0, 10, f"Page {self.page_no()}", align="C")
            self.set_text_color(0, 0, 0)

    def ensure_space(self, needed_height: float) -> None:
        """Start a new page if a block of the given height would overflow.

        Blocks taller than a whole page only ask for a fresh page; their
        lines then flow onto the following pages.
        """
        needed_height = min(needed_height, self.h - 2 * MARGIN)
        if self.cursor_y + needed_height > self.h - MARGIN:
            self.add_page()
            self.cursor_y = MARGIN

    def _record(self, kind: str, text: str) -> None:
        self.layout.append(LayoutEntry(kind=kind, text=text, page=self.page_no(), y=self.cursor_y))

    def _line_height(self) -> float:
        # font_size is in user units (mm) once a font is set
        return self.font_size * LINE_HEIGHT_FACTOR

    def _wrap(self, text: str, width: float) -> list[str]:
        """Word-wrap text to a width in the current font without drawing it.

        Words wider than the width are broken across lines.
        """
        if not text.strip():
            return [""]
        lines = self.multi_cell(width, LINE_HEIGHT, text, dry_run=True, output="LINES")
        return lines or [""]

    def _truncate_to_width(self, text: str, max_width: float) -> str:
        if self.get_string_width(text) <= max_width:
            return text
        while text and self.get_string_width(text + ELLIPSIS) > max_width:
            text = text[:-1]
        return text.rstrip() + ELLIPSIS

    def _draw_lines(self, lines: list[str], x: float) -> None:
        """Draw wrapped lines from the cursor down, moving to a new page when one is full."""
        line_height = self._line_height()
        for line in lines:
            self.ensure_space(line_height)
            self.text(x, self.cursor_y, line)
            self.cursor_y += line_height

    def _draw_centered(self, kind: str, text: str) -> None:
        """Draw each line of text centred on the page, wrapping lines that are too wide."""
        line_height = self._line_height()
        lines = [
            wrapped
            for line in self._clean(text).split("\n")
            if line.strip()
            for wrapped in self._wrap(line.strip(), self.usable_width)
        ]
        for i, line in enumerate(lines):
            if i:
                self.cursor_y += line_height
                self.ensure_space(line_height)
            self._record(kind, line)
            self.text((self.w - self.get_string_width(line)) / 2, self.cursor_y, line)

    def add_header(self, name: str, contact: str) -> None:
        """Draw the centred name and contact lines with a divider below."""
        self.ensure_space(20)
        self.set_font(self.font_name, "B", NAME_SIZE)
        if name:
            self._draw_centered("name", name)
        self.cursor_y += 8

        self.ensure_space(5)
        self.set_font(self.font_name, "", BODY_SIZE)
        if contact:
            self._draw_centered("contact", contact)
        self.cursor_y += 8

        self.ensure_space(2)
        self.set_draw_color(*DIVIDER_COLOR)
        self._record("divider", "")
        self.line(MARGIN, self.cursor_y, self.w - MARGIN, self.cursor_y)
        self.cursor_y += 10

    def add_section(self, title: str, content: str) -> None:
        """Draw a section title followed by its non-blank content lines."""
        self.ensure_space(12)
        self.set_font(self.font_name, "B", TITLE_SIZE)
        display_title = self._truncate_to_width(
            self._clean(" ".join(title.upper().split())), self.usable_width
        )
        self._record("section_title", display_title)
        self.text(MARGIN, self.cursor_y, display_title)
        self.cursor_y += 8

        for line in content.split("\n"):
            if line.strip():
                self.add_content_line(line.strip())

        self.cursor_y += SECTION_GAP

    def add_content_line(self, line: str) -> None:
        """Draw one content line as a bullet, a bold line or wrapped text."""
        kind, text = classify_line(line)
        text = self._clean(text)
        self.set_font(self.font_name, "", BODY_SIZE)

        if kind == "bullet":
            lines = self._wrap(text, self.usable_width - BULLET_INDENT)
            self.ensure_space(max(LINE_HEIGHT, len(lines) * self._line_height()))
            self._record(kind, text)
            self.text(MARGIN, self.cursor_y, self._clean(BULLET))
            self._draw_lines(lines, MARGIN + BULLET_INDENT)
        elif kind == "bold":
            self.ensure_space(LINE_HEIGHT)
            self.set_font(self.font_name, "B", BODY_SIZE)
            self._record(kind, text)
            self.text(MARGIN, self.cursor_y, self._truncate_to_width(text, self.usable_width))
            self.cursor_y += LINE_HEIGHT
        else:
            lines = self._wrap(text, self.usable_width)
            self.ensure_space(max(LINE_HEIGHT, len(lines) * self._line_height()))
            self._record(kind, text)
            self._draw_lines(lines, MARGIN)

        self.cursor_y += LINE_GAP


def render_cv_pdf(cv: ParsedCV | StructuredCV, font_dir: Path | None = None) -> RenderedPDF:
    """Lay out a CV as a paginated PDF.

    Args:
        cv: A parsed CV, or a structured CV which is composed into one first.
        font_dir: Optional directory containing the Poppins TTF files.

    Returns:
        The PDF bytes, page count and the sequence of drawn blocks.

    Raises:
        PDFRenderError: If layout fails for any reason.
    """
    try:
        document = build_cv_document(cv) if isinstance(cv, StructuredCV) else cv
        pdf = CVPDFGenerator(font_dir=font_dir)

        pdf.set_title(f"{document.name} | CV" if document.name else "CV")
        pdf.set_author(document.name)
        pdf.set_subject("Curriculum Vitae")
        pdf.set_creator("JobSpark")
        pdf.viewer_preferences = ViewerPreferences(display_doc_title=True)

        pdf.add_page()
        pdf.add_header(document.name, document.contact)
        for section in document.sections:
            pdf.add_section(section.title, section.content)

        content = bytes(pdf.output())
    except Exception as e:
        raise PDFRenderError(f"PDF generation failed: {e}") from e

    return RenderedPDF(content=content, page_count=pdf.page_no(), layout=tuple(pdf.layout))


def export_cv_pdf(
    cv: ParsedCV | StructuredCV,
    file_name: str,
    output_dir: str | Path = ".",
    font_dir: Path | None = None,
) -> Path | None:
    """Render a CV and save it as `<sanitized file name>.pdf`.

    Failures are logged and reported by returning None. The file is only
    written once the whole document has been laid out.

    Args:
        cv: CV to export.
        file_name: Display title used for the file name.
        output_dir: Directory to save the file in.
        font_dir: Optional directory containing the Poppins TTF files.

    Returns:
        Path to the saved PDF, or None if export failed.
    """
    directory = Path(output_dir)
    path = directory / f"{sanitize_file_name(file_name) or 'cv'}.pdf"
    partial = path.with_name(path.name + ".part")
    try:
        rendered = render_cv_pdf(cv, font_dir=font_dir)
        directory.mkdir(parents=True, exist_ok=True)
        partial.write_bytes(rendered.content)
        partial.replace(path)
    except Exception:
        logger.exception("Error exporting CV to PDF")
        partial.unlink(missing_ok=True)
        return None

    logger.info("Saved %s (%d pages)", path, rendered.page_count)
    return path
