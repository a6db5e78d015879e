#!/usr/bin/env python3
"""
Quick Start Guide for HTML Tree Dump.

Walks through the three levels of the API: one-call dumping, the reusable
TreeDumper, and the building blocks for rendering trees yourself.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from html_tree_dump import (
    ParserConfig,
    TreeDumper,
    TreeInvariantError,
    dump_string,
    format_diagnostics,
    render,
)
from html_tree_dump.dom import Comment, Document, Element, QualName


def simple_dump_example():
    """Level 1: dump a string and show its diagnostics."""

    print("🚀 QUICK START - HTML Tree Dump")
    print("=" * 35)

    result = dump_string('<!-- note --><p class="intro">Hello<br>world')
    print(format_diagnostics(result.diagnostics), end="")
    print(result.text, end="")
    print(f"{result.line_count} lines, {len(result.diagnostics)} diagnostics")


def configured_dumper_example():
    """Level 2: a reusable dumper with a forced encoding."""

    print("\n\n🔧 CONFIGURED DUMPER")
    print("-" * 25)

    dumper = TreeDumper(ParserConfig(encoding="windows-1252", collect_diagnostics=False))
    for data in (b"caf\xe9", b"<title>na\xefve</title>"):
        result = dumper.dump(data)
        print(f"{data!r} decoded as {result.encoding}:")
        print(result.text, end="")

    stats = dumper.statistics
    print(f"{stats['total_dumps']} dumps, "
          f"{stats['average_processing_time_ms']:.2f} ms on average")


def building_blocks_example():
    """Level 3: render a hand-built tree."""

    print("\n\n🧱 BUILDING BLOCKS")
    print("-" * 20)

    document = Document()
    document.append_child(Comment("generated"))
    html = Element(QualName.html("html"))
    document.append_child(html)
    html.append_text("tab\there")
    print(render(document), end="")

    # Foreign content cannot be dumped
    html.append_child(Element(QualName("http://www.w3.org/2000/svg", "svg")))
    try:
        render(document)
    except TreeInvariantError as e:
        print(f"Rejected: {e}")


def main():
    """Main function."""
    try:
        simple_dump_example()
        configured_dumper_example()
        building_blocks_example()

        print("\n✅ All examples completed successfully!")
        return 0

    except Exception as e:
        print(f"\n❌ Example failed: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
