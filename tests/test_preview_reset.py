from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from touchim.errors import FilesystemError
from touchim.scaffold import plan_operations, render_preview, reset_output_dir
from touchim.tree_text import parse_tree_text


class PreviewTests(unittest.TestCase):
    def test_preview_lists_plan_paths_with_directory_markers(self) -> None:
        plan = plan_operations(parse_tree_text("project/\n    src/\n        main.ext\n"), "out")

        self.assertEqual(
            render_preview(plan),
            ["out/project/", "out/project/src/", "out/project/src/main.ext"],
        )


class ResetOutputDirTests(unittest.TestCase):
    def test_deletes_existing_output_tree(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "out"
            (out / "nested").mkdir(parents=True)
            (out / "nested" / "f.txt").write_text("x", encoding="utf-8")

            self.assertTrue(reset_output_dir(out))
            self.assertFalse(out.exists())

    def test_missing_directory_is_reported_not_raised(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertFalse(reset_output_dir(Path(tmp) / "absent"))

    def test_refuses_regular_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("", encoding="utf-8")

            with self.assertRaises(FilesystemError):
                reset_output_dir(target)
            self.assertTrue(target.exists())

    def test_refuses_current_directory_and_its_ancestors(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            work = root / "work"
            work.mkdir()
            previous_cwd = Path.cwd()
            try:
                os.chdir(work)
                with self.assertRaises(FilesystemError):
                    reset_output_dir(".")
                with self.assertRaises(FilesystemError):
                    reset_output_dir(root)
            finally:
                os.chdir(previous_cwd)

            self.assertTrue(work.is_dir())


if __name__ == "__main__":
    unittest.main()
