import tempfile
import unittest
from pathlib import Path

from insight_notes.errors import FileWriteError
from insight_notes.vault import VaultFile, join_path
from insight_notes.vault.local import LocalVault


class VaultFileTests(unittest.TestCase):
    def test_name_parts(self):
        file = VaultFile(path="Cards/Alpha.md")

        self.assertEqual(file.name, "Alpha.md")
        self.assertEqual(file.basename, "Alpha")
        self.assertEqual(file.extension, "md")

    def test_join_path(self):
        self.assertEqual(join_path("Embeddings/", "a.json"), "Embeddings/a.json")
        self.assertEqual(join_path("/Embeddings", "a.json"), "Embeddings/a.json")
        self.assertEqual(join_path("", "a.json"), "a.json")


class LocalVaultTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmpdir.name)
        self.vault = LocalVault(self.root)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_list_files_filters_by_prefix_in_sorted_order(self):
        (self.root / "Cards" / "sub").mkdir(parents=True)
        (self.root / "Cards" / "b.md").write_text("b", encoding="utf-8")
        (self.root / "Cards" / "a.md").write_text("a", encoding="utf-8")
        (self.root / "Cards" / "sub" / "c.md").write_text("c", encoding="utf-8")
        (self.root / "Other.md").write_text("o", encoding="utf-8")

        paths = [f.path for f in self.vault.list_files("Cards/")]

        self.assertEqual(paths, ["Cards/a.md", "Cards/b.md", "Cards/sub/c.md"])
        self.assertEqual(len(self.vault.list_files()), 4)

    def test_list_files_on_missing_root_is_empty(self):
        self.assertEqual(LocalVault(self.root / "missing").list_files(), [])

    def test_write_then_read(self):
        self.vault.write_text("Embeddings/a.json", "[1.0]")
        self.vault.write_text("Embeddings/a.json", "[2.0]")

        self.assertTrue(self.vault.exists("Embeddings/a.json"))
        self.assertEqual(self.vault.read_text("Embeddings/a.json"), "[2.0]")

    def test_create_file_refuses_to_overwrite(self):
        self.vault.create_file("Notes/A.md", "first")

        with self.assertRaises(FileWriteError) as ctx:
            self.vault.create_file("Notes/A.md", "second")

        self.assertEqual(ctx.exception.path, "Notes/A.md")
        self.assertEqual(self.vault.read_text("Notes/A.md"), "first")

    def test_paths_cannot_escape_the_vault(self):
        with self.assertRaisesRegex(ValueError, "escapes vault"):
            self.vault.read_text("../outside.md")


if __name__ == "__main__":
    unittest.main()
