# tests/test_local_storage.py

"""Tests for the file-backed LocalStorage key-value store."""

import json
import tempfile
import unittest
from pathlib import Path

from src.storage.local_storage import LocalStorage


class TestLocalStorage(unittest.TestCase):
    """LocalStorage get/set/remove behaviour."""

    def setUp(self) -> None:
        """Create a fresh storage file path per test."""
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "nested" / "storage.json"
        self.storage = LocalStorage(self.path)

    def tearDown(self) -> None:
        """Remove the temp directory."""
        self._tmp.cleanup()

    def test_missing_file_reads_none(self) -> None:
        """No file on disk means every key is unset."""
        self.assertIsNone(self.storage.get_item("cart"))
        self.assertEqual(self.storage.keys(), [])

    def test_set_then_get(self) -> None:
        """A stored value is read back verbatim."""
        self.storage.set_item("cart", "[1, 2]")
        self.assertEqual(self.storage.get_item("cart"), "[1, 2]")

    def test_set_creates_parent_dirs(self) -> None:
        """Writing creates the storage directory."""
        self.storage.set_item("k", "v")
        self.assertTrue(self.path.exists())

    def test_persists_across_instances(self) -> None:
        """A second instance on the same file sees earlier writes."""
        self.storage.set_item("cart", "[3]")
        self.assertEqual(LocalStorage(self.path).get_item("cart"), "[3]")

    def test_set_keeps_other_keys(self) -> None:
        """Writing one key leaves the others alone."""
        self.storage.set_item("a", "1")
        self.storage.set_item("b", "2")
        self.assertEqual(self.storage.get_item("a"), "1")
        self.assertEqual(sorted(self.storage.keys()), ["a", "b"])

    def test_remove_item(self) -> None:
        """Removed keys read as None."""
        self.storage.set_item("cart", "[]")
        self.storage.remove_item("cart")
        self.assertIsNone(self.storage.get_item("cart"))

    def test_remove_missing_is_noop(self) -> None:
        """Removing an absent key does not create the file."""
        self.storage.remove_item("nothing")
        self.assertFalse(self.path.exists())

    def test_corrupt_file_reads_empty(self) -> None:
        """A file that is not JSON reads as empty storage."""
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertLogs("storefront.storage", level="WARNING"):
            self.assertIsNone(self.storage.get_item("cart"))

    def test_corrupt_file_healed_by_write(self) -> None:
        """The next write replaces a corrupt file."""
        self.path.parent.mkdir(parents=True)
        self.path.write_text("garbage", encoding="utf-8")
        with self.assertLogs("storefront.storage", level="WARNING"):
            self.storage.set_item("cart", "[1]")
        data = json.loads(self.path.read_text(encoding="utf-8"))
        self.assertEqual(data, {"cart": "[1]"})

    def test_non_object_file_reads_empty(self) -> None:
        """A JSON list at top level is ignored."""
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[1, 2]", encoding="utf-8")
        with self.assertLogs("storefront.storage", level="WARNING"):
            self.assertEqual(self.storage.keys(), [])

    def test_non_string_values_skipped(self) -> None:
        """Values that are not strings are not exposed."""
        self.path.parent.mkdir(parents=True)
        self.path.write_text(
            json.dumps({"cart": [1, 2], "theme": "dark"}),
            encoding="utf-8",
        )
        self.assertIsNone(self.storage.get_item("cart"))
        self.assertEqual(self.storage.get_item("theme"), "dark")


if __name__ == "__main__":
    unittest.main()
