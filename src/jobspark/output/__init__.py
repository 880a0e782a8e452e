"""Markdown and PDF output."""

from jobspark.output.markdown import build_cv_document, cv_to_markdown, save_markdown
from jobspark.output.pdf import (
    PDFRenderError,
    RenderedPDF,
    export_cv_pdf,
    render_cv_pdf,
    sanitize_file_name,
)

__all__ = [
    "PDFRenderError",
    "RenderedPDF",
    "build_cv_document",
    "cv_to_markdown",
    "export_cv_pdf",
    "render_cv_pdf",
    "sanitize_file_name",
    "save_markdown",
]
