"""Tree-text parser behavior tests.

Covers depth inference from spaces and tree glyphs, kind classification,
and the malformed inputs that must surface as ``ParseError``.
"""

from __future__ import annotations

import unittest

from touchim.errors import ParseError
from touchim.tree_text import Entry, EntryKind, parse_tree_lines, parse_tree_text

D = EntryKind.DIRECTORY
F = EntryKind.FILE


def _shape(entries: list[Entry]) -> list[tuple[int, str, EntryKind]]:
    return [(entry.depth, entry.name, entry.kind) for entry in entries]


class ParseTreeTests(unittest.TestCase):
    def test_space_indented_sketch(self) -> None:
        text = "project/\n    src/\n        main.ext\n    docs/\n"

        entries = parse_tree_text(text)

        self.assertEqual(
            _shape(entries),
            [(0, "project", D), (1, "src", D), (2, "main.ext", F), (1, "docs", D)],
        )

    def test_unicode_tree_drawing(self) -> None:
        text = "\n".join(
            [
                "project/",
                "├── src/",
                "│   ├── main.py",
                "│   └── util/",
                "│       └── helpers.py",
                "└── README.md",
            ]
        )

        entries = parse_tree_text(text)

        self.assertEqual(
            _shape(entries),
            [
                (0, "project", D),
                (1, "src", D),
                (2, "main.py", F),
                (2, "util", D),
                (3, "helpers.py", F),
                (1, "README.md", F),
            ],
        )

    def test_blank_connector_and_comment_lines_are_skipped(self) -> None:
        lines = [
            "# scaffold for the demo",
            "",
            "app/",
            "│",
            "├── main.py  # entry point",
            "   ",
            "└── static/",
        ]

        entries = parse_tree_lines(lines)

        self.assertEqual(_shape(entries), [(0, "app", D), (1, "main.py", F), (1, "static", D)])
        self.assertEqual([entry.line_number for entry in entries], [3, 5, 7])

    def test_trailing_separator_marks_directory_and_is_stripped(self) -> None:
        entries = parse_tree_text("root/\n    lib//\n    lib.txt\n")

        self.assertEqual(_shape(entries), [(0, "root", D), (1, "lib", D), (1, "lib.txt", F)])
        self.assertTrue(entries[1].is_dir)
        self.assertFalse(entries[2].is_dir)

    def test_custom_indent_unit(self) -> None:
        entries = parse_tree_text("a/\n  b/\n    c.txt\n", indent_unit=2)

        self.assertEqual(_shape(entries), [(0, "a", D), (1, "b", D), (2, "c.txt", F)])

    def test_windows_line_endings(self) -> None:
        entries = parse_tree_lines(["a/\r\n", "    b.txt\r\n"])

        self.assertEqual(_shape(entries), [(0, "a", D), (1, "b.txt", F)])

    def test_irregular_indentation_is_rejected_by_default(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse_tree_text("project/\n  src/\n")

        self.assertEqual(ctx.exception.line_number, 2)
        self.assertEqual(ctx.exception.line, "  src/")
        self.assertIn("line 2", str(ctx.exception))

    def test_lenient_indentation_truncates(self) -> None:
        entries = parse_tree_text("project/\n      src/\n", strict_indent=False)

        self.assertEqual(_shape(entries), [(0, "project", D), (1, "src", D)])

    def test_depth_jump_without_parent_directory_is_rejected(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse_tree_text("project/\n    notes.txt\n        orphan.txt\n")

        self.assertEqual(ctx.exception.line_number, 3)

    def test_first_entry_cannot_be_indented(self) -> None:
        with self.assertRaises(ParseError):
            parse_tree_text("    project/\n")

    def test_input_without_directories_is_rejected(self) -> None:
        with self.assertRaises(ParseError):
            parse_tree_text("a.txt\nb.txt\n")
        with self.assertRaises(ParseError):
            parse_tree_text("")
        with self.assertRaises(ParseError):
            parse_tree_lines(["", "   ", "│"])

    def test_parent_segments_are_rejected(self) -> None:
        with self.assertRaises(ParseError):
            parse_tree_text("project/\n    ../escape.txt\n")

    def test_absolute_names_are_rejected(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse_tree_text("/tmp/escape/\n    x.txt\n")

        self.assertEqual(ctx.exception.line_number, 1)
        with self.assertRaises(ParseError):
            parse_tree_text("project/\n    /etc/passwd\n")

    def test_hash_inside_name_is_not_a_comment(self) -> None:
        entries = parse_tree_text("docs/\n    release #2 notes.md\n    todo.md #\n    main.py\t# entry\n")

        self.assertEqual(
            [entry.name for entry in entries],
            ["docs", "release #2 notes.md", "todo.md", "main.py"],
        )

    def test_separator_only_name_is_rejected(self) -> None:
        with self.assertRaises(ParseError):
            parse_tree_text("project/\n    /\n")

    def test_non_positive_indent_unit_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            parse_tree_text("a/\n", indent_unit=0)


if __name__ == "__main__":
    unittest.main()
