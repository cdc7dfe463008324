"""Tests for the autoanki-field command line."""

import asyncio
import json
import os
import tempfile
import unittest

from typer.testing import CliRunner

from autoanki.cli.main import app
from autoanki.sync import MediaRef, Note, decode_note_field, encode_note_field

NOTE = Note(
    uuid="cli-note",
    model_name="Basic",
    tags="cli",
    style_files=(MediaRef("s.css"),),
)


class FieldCliTest(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name, text):
        path = os.path.join(self.tmp, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def _field(self):
        return asyncio.run(encode_note_field(NOTE, "<i>final</i>", "*source*"))

    def test_decode_json(self):
        path = self._write("field.html", self._field())
        result = self.runner.invoke(app, ["decode", path, "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.stdout)
        self.assertEqual(data["uuid"], "cli-note")
        self.assertEqual(data["source_content"]["content"], "*source*")
        self.assertFalse(data["final_content"]["field_changed"])
        self.assertEqual(data["style_media_files"], ["s.css"])

    def test_decode_table(self):
        path = self._write("field.html", self._field())
        result = self.runner.invoke(app, ["decode", path])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("cli-note", result.output)
        self.assertIn("unchanged", result.output)

    def test_decode_from_stdin(self):
        result = self.runner.invoke(app, ["decode", "-", "--json"], input=self._field())
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.stdout)["tags"], "cli")

    def test_decode_invalid_field(self):
        path = self._write("field.html", "<autoanki-metadata>")
        result = self.runner.invoke(app, ["decode", path])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error", result.output)

    def test_encode(self):
        note_path = self._write(
            "note.json",
            json.dumps(
                {
                    "uuid": "from-json",
                    "model_name": "Basic",
                    "tags": "a b",
                    "script_files": [{"stored_filename": "x.js"}],
                }
            ),
        )
        source = self._write("source.md", "**bold**")
        final = self._write("final.html", "<b>bold</b>")
        result = self.runner.invoke(
            app, ["encode", note_path, "--source", source, "--final", final]
        )
        self.assertEqual(result.exit_code, 0, result.output)

        decoded = asyncio.run(decode_note_field("Front", result.stdout))
        self.assertEqual(decoded.uuid, "from-json")
        self.assertEqual(decoded.tags, "a b")
        self.assertEqual(decoded.source_content.content, "**bold**")
        self.assertEqual(decoded.final_content.content, "<b>bold</b>")
        self.assertEqual(decoded.script_media_files, ["x.js"])
        self.assertFalse(decoded.changed)

    def test_encode_without_uuid(self):
        note_path = self._write("note.json", '{"uuid": null, "model_name": "Basic"}')
        source = self._write("source.md", "")
        final = self._write("final.html", "")
        result = self.runner.invoke(
            app, ["encode", note_path, "--source", source, "--final", final]
        )
        self.assertEqual(result.exit_code, 1)
        self.assertIn("no uuid", result.output)

    def test_tree(self):
        path = self._write("field.html", self._field())
        result = self.runner.invoke(app, ["tree", path])
        self.assertEqual(result.exit_code, 0, result.output)
        parsed = json.loads(result.stdout)
        self.assertIn("autoanki-source-content", parsed)
        self.assertEqual(
            parsed["autoanki-metadata"]["object"][0]["@_attributes"]["data"], "s.css"
        )


if __name__ == "__main__":
    unittest.main()
