"""Tests for depth-first dump assembly."""

import sys

import pytest

from html_tree_dump.dom.nodes import (
    Attribute,
    Comment,
    Doctype,
    Document,
    Element,
    QualName,
    Text,
)
from html_tree_dump.dump.walker import count_nodes, iter_lines, render
from html_tree_dump.shared.errors import TreeInvariantError


def html_element(local, *attributes):
    return Element(
        QualName.html(local),
        [Attribute(QualName.plain(name), value) for name, value in attributes],
    )


@pytest.fixture
def document():
    """Hand-built equivalent of ``<!DOCTYPE html><!--c--><p id="x">hi<br></p>``."""
    root = Document()
    root.append_child(Doctype("html"))
    root.append_child(Comment("c"))
    html = html_element("html")
    root.append_child(html)
    html.append_child(html_element("head"))
    body = html_element("body")
    html.append_child(body)
    p = html_element("p", ("id", "x"))
    body.append_child(p)
    p.append_child(Text("hi"))
    p.append_child(html_element("br"))
    return root


EXPECTED = (
    "#Document\n"
    '  <!DOCTYPE html "" "">\n'
    "  <!-- c -->\n"
    "  <html>\n"
    "    <head>\n"
    "    <body>\n"
    '      <p id="x">\n'
    "        #text:hi\n"
    "        <br>\n"
)


class TestRender:
    """Test rendering of whole subtrees."""

    def test_document(self, document):
        assert render(document) == EXPECTED

    def test_idempotent(self, document):
        assert render(document) == render(document)

    def test_one_line_per_node(self, document):
        text = render(document)
        assert text.count("\n") == count_nodes(document) == 9
        assert text.endswith("\n")

    def test_indent_matches_depth(self, document):
        depths = {document: 0}
        for node in document.iter_descendants():
            depths[node] = depths[node.parent] + 1
        expected_indents = [2 * depths[node] for node in [document, *document.iter_descendants()]]

        lines = render(document).splitlines()
        assert [len(line) - len(line.lstrip(" ")) for line in lines] == expected_indents

    def test_subtree_with_starting_depth(self, document):
        body = document.children[2].children[1]
        assert render(body, 1) == (
            "  <body>\n"
            '    <p id="x">\n'
            "      #text:hi\n"
            "      <br>\n"
        )

    def test_single_node(self):
        assert render(Text("x")) == "#text:x\n"

    def test_negative_depth(self, document):
        with pytest.raises(ValueError):
            render(document, -1)

    def test_deep_tree(self):
        """Test that nesting deeper than the recursion limit still renders."""
        depth = sys.getrecursionlimit() + 500
        root = Document()
        parent = root
        for _ in range(depth):
            child = html_element("div")
            parent.append_child(child)
            parent = child

        lines = render(root).splitlines()
        assert len(lines) == depth + 1
        assert lines[-1] == "  " * depth + "<div>"

    def test_invariant_violation_propagates(self, document):
        body = document.children[2].children[1]
        body.append_child(Element(QualName("http://www.w3.org/2000/svg", "svg")))
        with pytest.raises(TreeInvariantError):
            render(document)


class TestIterLines:
    """Test lazy line generation."""

    def test_lines_match_render(self, document):
        assert "".join(iter_lines(document)) == render(document)

    def test_lazy(self, document):
        lines = iter_lines(document)
        assert next(lines) == "#Document\n"
        assert next(lines) == '  <!DOCTYPE html "" "">\n'


class TestCountNodes:
    def test_leaf(self):
        assert count_nodes(Text("x")) == 1

    def test_document(self, document):
        assert count_nodes(document) == 9
