"""Markdown syntax tree adapter.

Parsing is delegated to markdown-it-py (CommonMark preset) and rendering back
to Markdown to mdformat's renderer. A list of top-level block nodes is turned
back into Markdown by rendering their tokens as the children of a synthetic
document, so sibling relations (consecutive lists) and link reference
definitions are resolved the same way mdformat resolves them for a file.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdformat.renderer import MDRenderer

# Inline node types whose content is plain text
TEXT_TYPES = frozenset({"text", "text_special"})

# Inline node types rendered as a newline in flattened text
BREAK_TYPES = frozenset({"softbreak"})

# Node types whose children are not part of the visible text
OPAQUE_TYPES = frozenset({"image"})

# Keep ordered list numbering as written instead of "1." everywhere
RENDER_OPTIONS: Mapping[str, Any] = {
    "mdformat": {"number": True},
    "parser_extension": [],
    "codeformatters": {},
}

# store_labels keeps reference-style links as references when rendered
_parser = MarkdownIt("commonmark", {"store_labels": True})


def node_text(node: SyntaxTreeNode) -> str:
    """Concatenate the text leaves under a node, depth-first, left to right.

    Args:
        node: Any syntax tree node.

    Returns:
        The flattened text, with no separators added between leaves.
    """
    if node.type in TEXT_TYPES:
        return node.content
    if node.type in BREAK_TYPES:
        return "\n"
    if node.type in OPAQUE_TYPES:
        return ""
    return "".join(node_text(child) for child in node.children)


def heading_depth(node: SyntaxTreeNode) -> int | None:
    """Return the level of a heading node (1-6), or None for other nodes."""
    if node.type != "heading":
        return None
    return int(node.tag[1:])


def is_heading(node: SyntaxTreeNode, depth: int) -> bool:
    return heading_depth(node) == depth


def is_paragraph(node: SyntaxTreeNode) -> bool:
    return node.type == "paragraph"


@dataclass(frozen=True)
class MarkdownDocument:
    """A parsed Markdown document and its link reference definitions."""

    root: SyntaxTreeNode
    references: Mapping[str, dict[str, Any]] = field(default_factory=dict)

    @property
    def children(self) -> list[SyntaxTreeNode]:
        """Top-level block nodes in document order."""
        return self.root.children

    def serialize(self, nodes: Iterable[SyntaxTreeNode]) -> str:
        """Render a sequence of block nodes as canonical Markdown.

        The nodes become the children of a synthetic document which is
        rendered by mdformat. Reference definitions used by links among the
        nodes are written after them, wherever they appeared in the source.
        Rendering is deterministic and stable under re-parsing.

        Args:
            nodes: Block nodes belonging to this document.

        Returns:
            Markdown text ending in a newline, or an empty string.
        """
        tokens = [token for node in nodes for token in node.to_tokens()]
        if not tokens:
            return ""
        env = {"references": dict(self.references)}
        return MDRenderer().render(tokens, RENDER_OPTIONS, env)


def parse_markdown(text: str) -> MarkdownDocument:
    """Parse Markdown into a syntax tree.

    Args:
        text: Markdown source.

    Returns:
        The parsed document. Empty input yields a document with no children.
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    env: dict[str, Any] = {}
    tokens = _parser.parse(normalized, env)
    return MarkdownDocument(
        root=SyntaxTreeNode(tokens),
        references=env.get("references", {}),
    )
