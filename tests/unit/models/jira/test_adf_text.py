"""Tests for the ADF to plain text conversion."""

import pytest

from mcp_pix_jira.models.jira import adf_to_text


def _doc(*paragraphs: list[str]) -> dict:
    return {
        "type": "doc",
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text} for text in texts],
            }
            for texts in paragraphs
        ],
    }


class TestAdfToText:
    def test_single_paragraph_concatenates_text_nodes(self):
        assert adf_to_text(_doc(["Hello ", "world"])) == "Hello world"

    def test_paragraphs_are_separated_by_blank_line(self):
        assert adf_to_text(_doc(["First"], ["Second"], ["Third"])) == (
            "First\n\nSecond\n\nThird"
        )

    def test_empty_paragraphs_are_dropped(self):
        assert adf_to_text(_doc(["First"], [], ["Second"])) == "First\n\nSecond"

    def test_hard_break(self):
        node = {
            "type": "paragraph",
            "content": [
                {"type": "text", "text": "line one"},
                {"type": "hardBreak"},
                {"type": "text", "text": "line two"},
            ],
        }
        assert adf_to_text(node) == "line one\nline two"

    def test_nested_containers(self):
        node = {
            "type": "doc",
            "content": [
                {
                    "type": "bulletList",
                    "content": [
                        {"type": "listItem", "content": _doc(["a"])["content"]},
                        {"type": "listItem", "content": _doc(["b"])["content"]},
                    ],
                }
            ],
        }
        assert adf_to_text(node) == "a\n\nb"

    def test_unknown_leaf_contributes_nothing(self):
        node = {
            "type": "doc",
            "content": [
                {"type": "mention", "attrs": {"id": "123"}},
                {"type": "paragraph", "content": [{"type": "text", "text": "kept"}]},
            ],
        }
        assert adf_to_text(node) == "kept"

    @pytest.mark.parametrize("value", [None, "text", 42, [], {"type": "doc"}])
    def test_non_document_input_yields_empty_string(self, value):
        assert adf_to_text(value) == ""

    def test_deeply_nested_document(self):
        node = {"type": "paragraph", "content": [{"type": "text", "text": "deep"}]}
        for _ in range(5000):
            node = {"type": "bulletList", "content": [node]}
        assert adf_to_text({"type": "doc", "content": [node]}) == "deep"

    def test_none_child_does_not_hide_later_siblings(self):
        node = {
            "type": "doc",
            "content": [
                None,
                {"type": "paragraph", "content": [{"type": "text", "text": "after"}]},
            ],
        }
        assert adf_to_text(node) == "after"
