"""Tests for mdcite.cli module."""

import orjson
import pytest
from click.testing import CliRunner

from mdcite.cli import main

SAMPLE = "Text @A. More [@B, @A] end."


@pytest.fixture
def paper(tmp_path):
    path = tmp_path / "paper.md"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


class TestMain:
    def test_term_plain(self, paper):
        result = CliRunner().invoke(main, [str(paper), "--nohtml", "--term"])
        assert result.exit_code == 0
        assert result.output == "Text [1]. More [2, 1] end.\n"
        # Input untouched when printing to terminal
        assert paper.read_text(encoding="utf-8") == SAMPLE

    def test_overwrites_in_place(self, paper):
        result = CliRunner().invoke(main, [str(paper), "--nohtml"])
        assert result.exit_code == 0
        assert paper.read_text(encoding="utf-8") == "Text [1]. More [2, 1] end."

    def test_html_by_default(self, paper, tmp_path):
        out = tmp_path / "out.md"
        result = CliRunner().invoke(main, [str(paper), "-o", str(out)])
        assert result.exit_code == 0
        assert 'href="#fn:2"' in out.read_text(encoding="utf-8")

    def test_output_directory(self, paper, tmp_path):
        out_dir = tmp_path / "build"
        result = CliRunner().invoke(main, [str(paper), "--nohtml", "-o", f"{out_dir}/"])
        assert result.exit_code == 0
        assert (out_dir / "paper.md").read_text(encoding="utf-8") == "Text [1]. More [2, 1] end."

    def test_footnotes_appended(self, paper, tmp_path):
        out = tmp_path / "out.md"
        result = CliRunner().invoke(main, [str(paper), "--nohtml", "--footnotes", "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == (
            "Text [1]. More [2, 1] end.\n[1] A\n[2] B\n"
        )

    def test_keys_json(self, paper, tmp_path):
        out = tmp_path / "out.md"
        keys = tmp_path / "keys.json"
        result = CliRunner().invoke(main, [str(paper), "-o", str(out), "--keys", str(keys)])
        assert result.exit_code == 0
        assert orjson.loads(keys.read_bytes()) == {
            "citations": [{"key": "A", "index": 1}, {"key": "B", "index": 2}]
        }

    def test_dryrun_writes_nothing(self, paper, tmp_path):
        keys = tmp_path / "keys.json"
        result = CliRunner().invoke(main, [str(paper), "--nohtml", "--dryrun", "--keys", str(keys)])
        assert result.exit_code == 0
        assert paper.read_text(encoding="utf-8") == SAMPLE
        assert not keys.exists()
        assert "Citation found : 5" in result.output
        assert "Text [1]. More [2, 1] end." in result.output

    def test_missing_file(self, tmp_path):
        result = CliRunner().invoke(main, [str(tmp_path / "missing.md")])
        assert result.exit_code == 2

    def test_undecodable_file(self, tmp_path):
        bad = tmp_path / "bad.md"
        bad.write_bytes(b"\xff\xfe\xfa @A")
        result = CliRunner().invoke(main, [str(bad), "--term"])
        assert result.exit_code == 1
        assert "Error reading" in result.output

    def test_footnotes_appended_html(self, paper, tmp_path):
        out = tmp_path / "out.md"
        result = CliRunner().invoke(main, [str(paper), "--footnotes", "-o", str(out)])
        assert result.exit_code == 0
        written = out.read_text(encoding="utf-8")
        assert 'href="#fn:1"' in written
        assert written.endswith(
            '\n<p>[<a id="fn:1">1</a>] A</p>\n<p>[<a id="fn:2">2</a>] B</p>\n'
        )

    def test_verbose_summary(self, paper):
        result = CliRunner().invoke(main, [str(paper), "--nohtml", "--term", "-v"])
        assert result.exit_code == 0
        assert "mdcite - Markdown citations" in result.output
        assert "Numbered 2 unique citation keys" in result.output
        assert "Text [1]. More [2, 1] end." in result.output


class TestDryrunPreview:
    def test_emoji_codes_shown_verbatim(self, tmp_path):
        path = tmp_path / "emoji.md"
        path.write_text("Ok :smile: @A", encoding="utf-8")
        result = CliRunner().invoke(main, [str(path), "--nohtml", "--dryrun"])
        assert result.exit_code == 0
        assert "Ok :smile: [1]" in result.output.splitlines()
        assert "\U0001f604" not in result.output

    def test_long_lines_not_wrapped(self, tmp_path):
        line = "word " * 60 + "@A end"
        path = tmp_path / "long.md"
        path.write_text(line, encoding="utf-8")
        result = CliRunner().invoke(main, [str(path), "--nohtml", "--dryrun"])
        assert result.exit_code == 0
        assert line.replace("@A", "[1]") in result.output.splitlines()

    def test_section_labels_have_no_trailing_space(self, paper):
        result = CliRunner().invoke(main, [str(paper), "--footnotes", "--dryrun"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "[Edited Markdown]" in lines
        assert "[Footnotes]" in lines
