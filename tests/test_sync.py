"""
Tests for the sync use case — the full match, prune, rename flow.
"""

from pathlib import Path

from docsync.adapters.mock import ScriptedConsole
from docsync.core.models.config import SyncConfig
from docsync.core.use_cases import sync as sync_module
from docsync.core.use_cases.sync import SyncResult, nav_entries, run_sync


class TestRunSync:
    def test_nothing_to_do(self, config: SyncConfig, scratch: Path, target: Path, write_page):
        write_page(target / "widgets" / "list-widgets.mdx", "get /api/widgets")
        write_page(scratch / "x.mdx", "get /api/widgets")
        console = ScriptedConsole()

        result = run_sync(config, console)

        assert result.ok
        assert result.matched == ["reference/api/widgets/list-widgets.mdx"]
        assert console.transcript == ["Done."]
        assert not scratch.exists()

    def test_protected_page_kept(self, config: SyncConfig, target: Path, write_page):
        intro = write_page(target / "introduction.mdx", "get /api/intro")
        console = ScriptedConsole()

        result = run_sync(config, console)

        assert result.ok
        assert intro.exists()
        assert console.prompts == []

    def test_confirmed_prune(self, config: SyncConfig, target: Path, write_page):
        stale = write_page(target / "gadgets" / "list-gadgets.mdx", "get /api/gadgets")
        console = ScriptedConsole(["y"])

        result = run_sync(config, console)

        assert result.ok
        assert result.removed == ["reference/api/gadgets/list-gadgets.mdx"]
        assert not stale.exists()
        assert "reference/api/gadgets/list-gadgets.mdx" in console.transcript
        assert console.transcript[-1] == "Done."

    def test_confirmation_trims_whitespace(self, config: SyncConfig, target: Path, write_page):
        stale = write_page(target / "old.mdx", "get /api/old")
        run_sync(config, ScriptedConsole(["  y \n"]))
        assert not stale.exists()

    def test_declined_prune_keeps_everything(
        self, config: SyncConfig, scratch: Path, target: Path, write_page
    ):
        stale = write_page(target / "old.mdx", "get /api/old")
        new = write_page(scratch / "new.mdx", "get /api/new")

        for answer in ("n", "Y", "yes", ""):
            config.scratch_path.mkdir(parents=True, exist_ok=True)
            console = ScriptedConsole([answer])

            result = run_sync(config, console)

            assert result.ok
            assert result.declined
            assert result.removed == []
            assert stale.exists()
            assert console.transcript[-1] == "Aborted."

        # Declining ends the run before renaming; scratch is still cleaned
        assert not new.exists()
        assert not scratch.exists()

    def test_new_pages_renamed_and_reported(
        self, config: SyncConfig, scratch: Path, target: Path, write_page
    ):
        write_page(scratch / "b.mdx", "post /api/widgets")
        write_page(scratch / "a.mdx", "get /api/widgets")
        console = ScriptedConsole(["", "Make Widget"])

        result = run_sync(config, console)

        assert result.ok
        assert result.renamed == [
            "reference/api/widgets/list-widgets.mdx",
            "reference/api/widgets/make-widget.mdx",
        ]
        assert console.transcript[-3:] == [
            "Now add the newly generated files to mint.json (create your own groups!):",
            '"reference/api/widgets/list-widgets",',
            '"reference/api/widgets/make-widget",',
        ]
        assert (target / "widgets" / "make-widget.mdx").is_file()
        assert not scratch.exists()

    def test_full_flow(self, config: SyncConfig, scratch: Path, target: Path, write_page):
        kept = write_page(target / "widgets" / "list-widgets.mdx", "get /api/widgets")
        stale = write_page(target / "gadgets" / "list-gadgets.mdx", "get /api/gadgets")
        write_page(scratch / "1.mdx", "get /api/widgets")
        write_page(scratch / "2.mdx", "delete /api/widgets/{widget_id}")
        console = ScriptedConsole(["y", ""])

        result = run_sync(config, console)

        assert result.ok
        assert kept.exists()
        assert not stale.exists()
        assert (target / "widgets" / "{widget-id}" / "delete-widget.mdx").is_file()
        assert console.prompts[0] == "Do you want to proceed? (y/n)\n"
        assert console.prompts[1].startswith('Route: "delete /api/widgets/{widget_id}"')
        assert console.remaining == 0

    def test_format_error_aborts_and_cleans(
        self, config: SyncConfig, scratch: Path, write_page
    ):
        (scratch / "broken.mdx").write_text("---\nopenapi: oops\n")

        result = run_sync(config, ScriptedConsole([""]))

        assert not result.ok
        assert "unexpected route name format" in result.error
        assert not scratch.exists()

    def test_missing_target_aborts_and_cleans(self, tmp_path: Path, write_page):
        config = SyncConfig(root=tmp_path)
        write_page(config.scratch_path / "a.mdx", "get /api/widgets")

        result = run_sync(config, ScriptedConsole())

        assert not result.ok
        assert "Not a directory" in result.error
        assert not config.scratch_path.exists()

    def test_input_closed_aborts(self, config: SyncConfig, target: Path, write_page):
        stale = write_page(target / "old.mdx", "get /api/old")

        result = run_sync(config, ScriptedConsole())

        assert not result.ok
        assert stale.exists()

    def test_prune_failure_reports_partial_removal(
        self, config: SyncConfig, target: Path, write_page, monkeypatch
    ):
        first = write_page(target / "a.mdx", "get /api/a")
        failing = write_page(target / "b.mdx", "get /api/b")
        untouched = write_page(target / "c.mdx", "get /api/c")
        real_prune = sync_module.prune

        def prune_or_fail(paths):
            paths = list(paths)
            if failing in paths:
                raise PermissionError(f"cannot remove {failing}")
            return real_prune(paths)

        monkeypatch.setattr(sync_module, "prune", prune_or_fail)

        result = run_sync(config, ScriptedConsole(["y"]))

        assert not result.ok
        assert "cannot remove" in result.error
        assert result.removed == ["reference/api/a.mdx"]
        assert not first.exists()
        assert failing.exists()
        assert untouched.exists()


class TestSyncResult:
    def test_to_dict_without_error(self):
        data = SyncResult(removed=["a"]).to_dict()
        assert data["removed"] == ["a"]
        assert "error" not in data

    def test_to_dict_with_error(self):
        result = SyncResult(error="boom")
        assert not result.ok
        assert result.to_dict()["error"] == "boom"


class TestNavEntries:
    def test_sorted_and_stripped(self):
        lines = nav_entries(["reference/api/b/x.mdx", "reference/api/a/y.mdx"], ".mdx")
        assert lines == ['"reference/api/a/y",', '"reference/api/b/x",']
