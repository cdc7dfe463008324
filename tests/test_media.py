"""Tests for media markers."""

import unittest

from autoanki.sync import MediaRef, Note, media_markers
from autoanki.sync.domain import MediaKind
from autoanki.sync.media import media_type_kind


def make_note(**kwargs):
    return Note(uuid="note-1", model_name="Basic", **kwargs)


class MediaMarkersTest(unittest.TestCase):
    def test_no_media(self):
        self.assertEqual(media_markers(make_note()), "")

    def test_style_file_gets_marker_and_import(self):
        out = media_markers(make_note(style_files=(MediaRef("theme.css"),)))
        self.assertIn('data="theme.css"', out)
        self.assertIn('type="text/css"', out)
        self.assertIn('@import "theme.css";', out)
        self.assertLess(out.index("<object"), out.index("<style>"))

    def test_style_import_is_percent_encoded(self):
        out = media_markers(make_note(style_files=(MediaRef('my "style".css'),)))
        self.assertIn('@import "my%20%22style%22.css";', out)

    def test_script_and_generic_markers(self):
        out = media_markers(
            make_note(
                script_files=(MediaRef("app.js"),),
                media_files=(MediaRef("model.glb"),),
            )
        )
        self.assertIn('type="application/javascript"', out)
        self.assertNotIn("<style>", out)
        generic = [line for line in out.split("\n") if "model.glb" in line]
        self.assertEqual(len(generic), 1)
        self.assertNotIn("type=", generic[0])

    def test_order_styles_scripts_then_media(self):
        out = media_markers(
            make_note(
                style_files=(MediaRef("b.css"), MediaRef("a.css")),
                script_files=(MediaRef("z.js"),),
                media_files=(MediaRef("m.bin"),),
            )
        )
        positions = [
            out.index('data="b.css"'),
            out.index('data="a.css"'),
            out.index('data="z.js"'),
            out.index('data="m.bin"'),
        ]
        self.assertEqual(positions, sorted(positions))

    def test_media_type_kind(self):
        self.assertIs(media_type_kind("text/css"), MediaKind.STYLE)
        self.assertIs(media_type_kind("application/javascript"), MediaKind.SCRIPT)
        self.assertIs(media_type_kind(None), MediaKind.GENERIC)
        self.assertIs(media_type_kind("image/png"), MediaKind.GENERIC)


if __name__ == "__main__":
    unittest.main()
