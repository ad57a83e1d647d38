"""Unit tests for ContentStore and section default loading."""

import json
import os
import tempfile
import unittest
from unittest.mock import MagicMock

from techvision.models import PageContent
from techvision.services.content_store import ContentStore
from techvision.services.default_content import BUILTIN_SECTIONS, load_section_defaults
from tests.support import make_session


class TestContentStore(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session()
        self.store = ContentStore(self.db, {"about": "<h2>About</h2>"})

    def tearDown(self) -> None:
        self.db.close()

    def test_first_read_seeds_and_persists_default(self) -> None:
        doc = self.store.get_section("about")
        self.assertEqual(doc.html, "<h2>About</h2>")
        self.assertEqual(doc.updated_by, "system")
        self.assertEqual(self.db.query(PageContent).count(), 1)

    def test_second_read_does_not_reseed(self) -> None:
        self.store.get_section("about")
        other = ContentStore(self.db, {"about": "<h2>Changed default</h2>"})
        self.assertEqual(other.get_section("about").html, "<h2>About</h2>")
        self.assertEqual(self.db.query(PageContent).count(), 1)

    def test_unknown_section_seeds_empty_string(self) -> None:
        doc = self.store.get_section("pricing")
        self.assertEqual(doc.html, "")
        self.assertEqual(self.store.get_section("pricing").html, "")

    def test_put_inserts_then_overwrites(self) -> None:
        doc = self.store.put_section("blog", "<p>v1</p>", updated_by="4")
        self.assertEqual((doc.html, doc.updated_by), ("<p>v1</p>", "4"))
        doc = self.store.put_section("blog", "<p>v2</p>", updated_by="9")
        self.assertEqual((doc.html, doc.updated_by), ("<p>v2</p>", "9"))
        self.assertEqual(self.store.get_section("blog").html, "<p>v2</p>")
        self.assertEqual(self.db.query(PageContent).count(), 1)

    def test_put_accepts_empty_string(self) -> None:
        self.store.get_section("about")
        doc = self.store.put_section("about", "", updated_by="1")
        self.assertEqual(doc.html, "")
        self.assertEqual(self.store.get_section("about").html, "")

    def test_put_stores_html_verbatim(self) -> None:
        html = "<script>alert('x')</script>\n  <p>&amp; spaces  </p>"
        self.assertEqual(self.store.put_section("about", html, updated_by="1").html, html)

    def test_list_is_ordered_by_section_id(self) -> None:
        for section_id in ("services", "about", "blog"):
            self.store.get_section(section_id)
        ids = [doc.section_id for doc in self.store.list_sections()]
        self.assertEqual(ids, ["about", "blog", "services"])

    def test_defaults_are_copied_at_construction(self) -> None:
        defaults = {"about": "original"}
        store = ContentStore(self.db, defaults)
        defaults["about"] = "mutated"
        self.assertEqual(store.get_section("about").html, "original")


class TestLoadSectionDefaults(unittest.TestCase):
    def _settings(self, path: str | None) -> MagicMock:
        settings = MagicMock()
        settings.CONTENT_DEFAULTS_FILE = path
        return settings

    def test_builtin_sections(self) -> None:
        defaults = load_section_defaults(self._settings(None))
        self.assertEqual(
            set(defaults),
            {"dashboard", "about", "services", "portfolio", "contact", "blog", "adminPanel"},
        )
        self.assertIn("TechVision Solutions", defaults["about"])

    def test_file_overrides_and_extends(self) -> None:
        with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False, encoding="utf-8") as f:
            json.dump({"about": "<p>Custom</p>", "pricing": "<p>Prices</p>"}, f)
        self.addCleanup(os.unlink, f.name)
        defaults = load_section_defaults(self._settings(f.name))
        self.assertEqual(defaults["about"], "<p>Custom</p>")
        self.assertEqual(defaults["pricing"], "<p>Prices</p>")
        self.assertEqual(defaults["blog"], BUILTIN_SECTIONS["blog"])

    def test_file_must_map_strings_to_strings(self) -> None:
        with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False, encoding="utf-8") as f:
            json.dump({"about": 5}, f)
        self.addCleanup(os.unlink, f.name)
        with self.assertRaises(ValueError):
            load_section_defaults(self._settings(f.name))


if __name__ == "__main__":
    unittest.main()
