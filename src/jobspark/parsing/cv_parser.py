"""Markdown CV segmentation.

Structure of a CV document:
- `# Name` - the first H1 is the candidate name
- `### Contact` or the first paragraph - contact line
- `## Section` - every H2 opens a new section; everything up to the next H2
  is that section's content

Nodes before the first H2 that are neither the name nor the contact node are
not attached to any section.
"""

import logging

from markdown_it.tree import SyntaxTreeNode

from jobspark.models.cv import CVSection, ParsedCV
from jobspark.parsing.markdown_ast import (
    MarkdownDocument,
    is_heading,
    is_paragraph,
    node_text,
    parse_markdown,
)

logger = logging.getLogger(__name__)

NAME_DEPTH = 1
SECTION_DEPTH = 2
CONTACT_DEPTH = 3


def _find_name_node(nodes: list[SyntaxTreeNode]) -> SyntaxTreeNode | None:
    return next((node for node in nodes if is_heading(node, NAME_DEPTH)), None)


def _find_contact_node(nodes: list[SyntaxTreeNode]) -> SyntaxTreeNode | None:
    """First H3, or the first paragraph if that comes earlier."""
    return next(
        (node for node in nodes if is_heading(node, CONTACT_DEPTH) or is_paragraph(node)),
        None,
    )


def segment(document: MarkdownDocument) -> ParsedCV:
    """Classify the top-level nodes of a document into name, contact and sections.

    Args:
        document: Parsed Markdown document.

    Returns:
        ParsedCV with one section per H2, in document order.
    """
    nodes = document.children
    if not nodes:
        return ParsedCV()

    name_node = _find_name_node(nodes)
    contact_node = _find_contact_node(nodes)
    claimed = [n for n in (name_node, contact_node) if n is not None]

    sections: list[CVSection] = []
    current_title: str | None = None
    current_nodes: list[SyntaxTreeNode] = []
    discarded = 0

    for node in nodes:
        if is_heading(node, SECTION_DEPTH):
            if current_title is not None:
                sections.append(
                    CVSection(title=current_title, content=document.serialize(current_nodes))
                )
            current_title = node_text(node)
            current_nodes = []
        elif any(node is c for c in claimed):
            continue
        elif current_title is not None:
            current_nodes.append(node)
        else:
            discarded += 1

    if current_title is not None:
        sections.append(CVSection(title=current_title, content=document.serialize(current_nodes)))

    if discarded:
        logger.debug("Dropped %d node(s) preceding the first section", discarded)

    return ParsedCV(
        name=node_text(name_node) if name_node is not None else "",
        contact=node_text(contact_node) if contact_node is not None else "",
        sections=tuple(sections),
    )


def parse_cv_markdown(markdown: str) -> ParsedCV:
    """Parse a Markdown CV into name, contact and titled sections.

    Never raises for string input; missing structure yields empty fields.

    Args:
        markdown: The CV in Markdown format.

    Returns:
        The segmented CV.
    """
    return segment(parse_markdown(markdown))
