"""Markdown CV parsing."""

from jobspark.parsing.cv_parser import parse_cv_markdown, segment
from jobspark.parsing.markdown_ast import (
    MarkdownDocument,
    heading_depth,
    node_text,
    parse_markdown,
)

__all__ = [
    "MarkdownDocument",
    "heading_depth",
    "node_text",
    "parse_cv_markdown",
    "parse_markdown",
    "segment",
]
