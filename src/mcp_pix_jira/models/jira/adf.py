"""
Atlassian Document Format (ADF) utilities.

ADF is the rich text format JIRA Cloud returns for descriptions and comment
bodies: a tree of ``{"type": ..., "content": [...], "text": ...}`` nodes.
"""

from collections.abc import Iterator
from typing import Any

PARAGRAPH_SEPARATOR = "\n\n"

_EXHAUSTED = object()


def adf_to_text(node: Any) -> str:
    """
    Convert an ADF node to plain text.

    - ``text`` nodes contribute their text
    - ``paragraph`` nodes concatenate their children with no separator
    - ``hardBreak`` nodes contribute a newline
    - any other node with children joins the non-empty child texts with a
      blank line (so sibling paragraphs are separated by an empty line)
    - leaf nodes of unknown type contribute nothing

    Args:
        node: ADF node (usually the ``doc`` root)

    Returns:
        Plain text; empty string for anything that is not an ADF node
    """
    leaf = _leaf_text(node)
    if leaf is not None:
        return leaf

    # Post-order walk with an explicit stack; documents can nest deeply.
    stack: list[tuple[Any, Iterator[Any], list[str]]] = [
        (node.get("type"), iter(node["content"]), [])
    ]
    while True:
        node_type, children, collected = stack[-1]
        child = next(children, _EXHAUSTED)
        if child is not _EXHAUSTED:
            child_leaf = _leaf_text(child)
            if child_leaf is None:
                stack.append((child.get("type"), iter(child["content"]), []))
            else:
                collected.append(child_leaf)
            continue

        text = _join_children(node_type, collected)
        stack.pop()
        if not stack:
            return text
        stack[-1][2].append(text)


def _leaf_text(node: Any) -> str | None:
    """Text of a node without children, or None for a container node."""
    if not isinstance(node, dict):
        return ""

    node_type = node.get("type")

    if node_type == "text":
        text = node.get("text")
        return text if isinstance(text, str) else ""

    if node_type == "hardBreak":
        return "\n"

    if not isinstance(node.get("content"), list):
        return ""

    return None


def _join_children(node_type: Any, child_texts: list[str]) -> str:
    if node_type == "paragraph":
        return "".join(child_texts)
    return PARAGRAPH_SEPARATOR.join(text for text in child_texts if text)
