"""
test_keep2doc.py
----------------
Unit tests for the conversion run in keepdoc.pipeline.keep2doc.

Pandoc is replaced by the ``fake_pandoc`` fixture, which writes a
placeholder PDF containing the rendered document.
"""
import pytest
from pathlib import Path
from unittest.mock import MagicMock

from keepdoc.builders.note_writers import NoteMdWriter, NotePdfWriter
from keepdoc.core.exceptions import LedgerError, PdfRenderError
from keepdoc.pipeline.keep2doc import convert_notes, pending_notes, process_note


KEEP = Path("keep")
GENERATED = Path("generated")
LEDGER = Path("processed.txt")


def run(**kwargs):
    return convert_notes(KEEP, GENERATED, LEDGER, **kwargs)


class TestProcessNote:
    """Tests for process_note."""

    def test_writes_pdf_and_markdown(self, workspace, write_note, sample_note, fake_pandoc):
        path = write_note(KEEP, "a.json", sample_note)

        note = process_note(path, NotePdfWriter(GENERATED), NoteMdWriter(GENERATED))

        assert note.filename == "Sourdough_starter"
        pdf = GENERATED / "Sourdough_starter.pdf"
        md = GENERATED / "Sourdough_starter.md"
        assert pdf.exists()
        assert md.read_text(encoding="utf-8") == note.content
        assert b"Labels: Cooking, Bread" in pdf.read_bytes()

    def test_markdown_sink_gets_body_not_document(self, workspace, write_note, fake_pandoc):
        path = write_note(KEEP, "a.json", {"title": "T", "textContent": "body\nSource: http://x"})

        process_note(path, NotePdfWriter(GENERATED), NoteMdWriter(GENERATED))

        assert (GENERATED / "T.md").read_text() == "body\n"

    def test_render_failure_skips_markdown(self, workspace, write_note, fake_pandoc):
        fake_pandoc.side_effect = RuntimeError("pandoc died")
        path = write_note(KEEP, "a.json", {"title": "T", "textContent": "x"})

        with pytest.raises(PdfRenderError):
            process_note(path, NotePdfWriter(GENERATED), NoteMdWriter(GENERATED))
        assert not (GENERATED / "T.md").exists()


class TestConvertNotes:
    """Tests for convert_notes."""

    def test_converts_new_notes(self, workspace, write_note, fake_pandoc):
        write_note(KEEP, "a.json", {"title": "Alpha", "textContent": "a"})
        write_note(KEEP, "b.json", {"title": "Beta", "textContent": "b"})

        stats = run()

        assert stats.notes_converted == 2
        assert stats.errors == 0
        assert sorted(p.name for p in GENERATED.iterdir()) == [
            "Alpha.md", "Alpha.pdf", "Beta.md", "Beta.pdf",
        ]
        assert LEDGER.read_text().splitlines() == [
            str(KEEP / "a.json"), str(KEEP / "b.json"),
        ]

    def test_skips_notes_in_ledger(self, workspace, write_note, fake_pandoc, capsys):
        write_note(KEEP, "old.json", {"title": "Old", "textContent": "o"})
        write_note(KEEP, "new.json", {"title": "New", "textContent": "n"})
        LEDGER.write_text(str(KEEP / "old.json"))

        stats = run()

        assert stats.notes_converted == 1
        assert stats.notes_skipped == 1
        assert sorted(p.name for p in GENERATED.iterdir()) == ["New.md", "New.pdf"]
        assert set(LEDGER.read_text().splitlines()) == {
            str(KEEP / "old.json"), str(KEEP / "new.json"),
        }
        out = capsys.readouterr().out
        assert f'>> Skipping "{KEEP / "old.json"}"...' in out
        assert f'>> Processing "{KEEP / "new.json"}"...' in out

    def test_failed_note_isolated_and_not_recorded(self, workspace, write_note, fake_pandoc, capsys):
        write_note(KEEP, "bad.json", raw="{ not json")
        write_note(KEEP, "good.json", {"title": "Good", "textContent": "g"})

        stats = run()

        assert stats.notes_converted == 1
        assert stats.errors == 1
        assert stats.failed == [str(KEEP / "bad.json")]
        assert (GENERATED / "Good.pdf").exists()
        assert LEDGER.read_text().splitlines() == [str(KEEP / "good.json")]
        out = capsys.readouterr().out
        assert f'>> Error "{KEEP / "bad.json"}"...' in out
        assert "Message:" in out

    def test_missing_text_content_isolated(self, workspace, write_note, fake_pandoc):
        write_note(KEEP, "empty.json", {"title": "Empty"})

        stats = run()

        assert stats.errors == 1
        assert LEDGER.read_text() == ""

    def test_render_failure_retried_next_run(self, workspace, write_note, fake_pandoc):
        write_note(KEEP, "a.json", {"title": "A", "textContent": "a"})
        side_effect = fake_pandoc.side_effect
        fake_pandoc.side_effect = RuntimeError("engine missing")

        first = run()
        assert first.notes_converted == 0
        assert LEDGER.read_text() == ""

        fake_pandoc.side_effect = side_effect
        second = run()
        assert second.notes_converted == 1
        assert LEDGER.read_text() == str(KEEP / "a.json")

    def test_second_run_converts_nothing(self, workspace, write_note, fake_pandoc):
        write_note(KEEP, "a.json", {"title": "A", "textContent": "a"})
        run()
        fake_pandoc.reset_mock()

        stats = run()

        assert stats.notes_converted == 0
        assert stats.notes_skipped == 1
        fake_pandoc.assert_not_called()
        assert LEDGER.read_text() == str(KEEP / "a.json")

    def test_ledger_saved_when_everything_fails(self, workspace, write_note, fake_pandoc):
        LEDGER.write_text(str(KEEP / "gone.json"))
        write_note(KEEP, "bad.json", raw="[")

        run()

        assert LEDGER.read_text() == str(KEEP / "gone.json")

    def test_force_reconverts_recorded_notes(self, workspace, write_note, fake_pandoc):
        write_note(KEEP, "a.json", {"title": "A", "textContent": "a"})
        LEDGER.write_text(str(KEEP / "a.json"))

        stats = run(force=True)

        assert stats.notes_converted == 1
        assert (GENERATED / "A.pdf").exists()
        assert LEDGER.read_text() == str(KEEP / "a.json")

    def test_dry_run_writes_nothing(self, workspace, write_note, fake_pandoc, capsys):
        write_note(KEEP, "a.json", {"title": "A", "textContent": "a"})

        stats = run(dry_run=True)

        assert stats.notes_converted == 0
        assert list(GENERATED.iterdir()) == []
        assert not LEDGER.exists()
        fake_pandoc.assert_not_called()
        assert "Would process" in capsys.readouterr().out

    def test_slug_collision_warned(self, workspace, write_note, fake_pandoc):
        logger = MagicMock()
        write_note(KEEP, "a.json", {"title": "Plan!", "textContent": "first"})
        write_note(KEEP, "b.json", {"title": "Plan?", "textContent": "second"})

        stats = run(logger=logger)

        assert stats.notes_converted == 2
        assert (GENERATED / "Plan.md").read_text() == "second"
        warning = logger.log_warning.call_args[0][0]
        assert "Slug collision" in warning

    def test_pdf_engine_forwarded(self, workspace, write_note, fake_pandoc):
        write_note(KEEP, "a.json", {"title": "A", "textContent": "a"})

        run(pdf_engine="xelatex")

        _, kwargs = fake_pandoc.call_args
        assert kwargs["extra_args"][:2] == ["--pdf-engine", "xelatex"]

    def test_missing_input_dir_is_fatal(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(FileNotFoundError):
            run()

    def test_unwritable_ledger_is_fatal(self, workspace, write_note, fake_pandoc):
        write_note(KEEP, "a.json", {"title": "A", "textContent": "a"})
        with pytest.raises(LedgerError):
            convert_notes(KEEP, GENERATED, Path("nodir") / "processed.txt")


class TestPendingNotes:
    """Tests for pending_notes."""

    def test_lists_unrecorded_notes(self, workspace, write_note):
        write_note(KEEP, "a.json", {})
        write_note(KEEP, "b.json", {})

        pending = pending_notes(KEEP, {str(KEEP / "a.json")})

        assert pending == [KEEP / "b.json"]
