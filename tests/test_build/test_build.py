"""Tests for crawling, build orchestration and watch-mode rebuilds."""

import os
import re

import pytest

from atomic_css.build import (
    BuildContext,
    BuildOptions,
    BuildSession,
    PollingWatcher,
    default_base_layer,
    iter_paths,
    ls,
    stringify_css,
    watch,
    write_css,
)
from atomic_css.parser import StructuralParseError, ValidationError

BASE = "*{margin: 0;}"


@pytest.fixture
def project(tmp_path):
    """A root stylesheet with one import and a small source tree."""
    (tmp_path / "styles").mkdir()
    (tmp_path / "styles" / "index.css").write_text(
        '@layer base;\n@import "./extra.css";\n.card {\n  @apply p-4;\n}\n'
    )
    (tmp_path / "styles" / "extra.css").write_text(
        "@layer utilities {\n  .neon { color: pink; }\n}\n"
    )
    src = tmp_path / "src"
    (src / "components").mkdir(parents=True)
    (src / "index.html").write_text('<div class="bg-red-500 md:p-4">')
    (src / "components" / "button.tsx").write_text('<button className="neon" />')
    (src / "notes.md").write_text("text-white")
    return tmp_path


def _options(root, **kwargs) -> BuildOptions:
    return BuildOptions(
        css_file=str(root / "styles" / "index.css"),
        source_directories=(str(root / "src"),),
        base_layer=BASE,
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Crawler
# ---------------------------------------------------------------------------


class TestCrawler:
    def test_iter_paths_matches_extensions(self, project):
        src = str(project / "src")
        assert list(iter_paths([src])) == [
            os.path.join(src, "components", "button.tsx"),
            os.path.join(src, "index.html"),
        ]

    def test_ignore_skips_directories(self, project):
        paths = list(iter_paths([str(project / "src")], ignore=re.compile("components")))
        assert paths == [os.path.join(str(project / "src"), "index.html")]

    def test_custom_match(self, project):
        paths = list(iter_paths([str(project / "src")], match=re.compile(r"\.md$")))
        assert [os.path.basename(p) for p in paths] == ["notes.md"]

    def test_ls_yields_contents(self, project):
        assert list(ls([str(project / "src")])) == [
            '<button className="neon" />',
            '<div class="bg-red-500 md:p-4">',
        ]

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(iter_paths([str(tmp_path / "nope")]))


# ---------------------------------------------------------------------------
# One-shot builds
# ---------------------------------------------------------------------------


class TestStringifyCss:
    def test_output(self, project):
        css = stringify_css(_options(project))
        assert css.startswith(f"@layer base {{{BASE}}}@layer {{}}.card{{padding: 1rem;}}@layer utilities{{")
        assert ".bg-red-500{" in css
        assert "@media (min-width: 768px) {" + r".md\:p-4{padding: 1rem;}" in css
        assert ".neon{color: pink;}" in css
        # Files outside the match pattern are not scanned.
        assert ".text-white" not in css

    def test_ignore(self, project):
        css = stringify_css(_options(project, ignore=re.compile("components")))
        assert ".neon{" not in css

    def test_config_overrides(self, project):
        (project / "src" / "index.html").write_text('<p class="text-brand">')
        css = stringify_css(_options(project, config={"color": {"brand": "#ff0000"}}))
        assert ".text-brand{--tw-text-opacity: 1; color: rgb(255 0 0 / var(--tw-text-opacity));}" in css

    def test_default_base_layer(self, project):
        options = BuildOptions(
            css_file=str(project / "styles" / "index.css"),
            source_directories=(str(project / "src"),),
        )
        assert stringify_css(options).startswith("@layer base {" + default_base_layer() + "}")

    def test_preflight_is_compacted(self):
        base = default_base_layer()
        assert base
        assert "/*" not in base
        assert "\n" not in base


class TestWriteCss:
    def test_writes_nested_outfile(self, project):
        outfile = project / "dist" / "css" / "app.css"
        context = write_css(_options(project, outfile=str(outfile)))
        assert outfile.read_text() == context.to_string()

    def test_requires_outfile(self, project):
        with pytest.raises(ValueError):
            write_css(_options(project))


# ---------------------------------------------------------------------------
# BuildContext
# ---------------------------------------------------------------------------


class TestBuildContext:
    def test_dependencies(self, project):
        context = BuildContext(_options(project))
        assert context.is_css_dependency(str(project / "styles" / "extra.css"))
        assert not context.is_css_dependency(str(project / "src" / "index.html"))

    def test_is_source(self, project):
        context = BuildContext(_options(project, ignore=re.compile("vendor")))
        assert context.is_source("src/app.tsx")
        assert not context.is_source("src/notes.md")
        assert not context.is_source("vendor/lib.js")

    def test_update_sources(self, project):
        context = BuildContext(_options(project))
        new_file = project / "src" / "new.html"
        new_file.write_text('<p class="text-white underline">')
        assert context.update_sources([str(new_file), str(project / "src" / "gone.html")]) == 2
        assert ".text-white{" in str(context)

    def test_rebuild_returns_new_context(self, project):
        context = BuildContext(_options(project))
        rebuilt = context.rebuild()
        assert rebuilt is not context
        assert rebuilt.to_string() == context.to_string()

    def test_failed_rebuild_raises(self, project):
        context = BuildContext(_options(project))
        (project / "styles" / "extra.css").write_text("@layer utilities { neon { } }")
        with pytest.raises(ValidationError):
            context.rebuild()


# ---------------------------------------------------------------------------
# Watch mode
# ---------------------------------------------------------------------------


class TestBuildSession:
    def test_initial_write(self, project):
        outfile = project / "out.css"
        session = BuildSession(_options(project, outfile=str(outfile)))
        assert outfile.read_text() == session.context.to_string()

    def test_source_change(self, project):
        outfile = project / "out.css"
        session = BuildSession(_options(project, outfile=str(outfile)))
        page = project / "src" / "index.html"
        page.write_text('<div class="text-white">')
        assert session.handle_change(str(page)) is True
        assert ".text-white{" in outfile.read_text()
        # Incremental updates never drop classes.
        assert ".bg-red-500{" in outfile.read_text()

    def test_css_change_rebuilds(self, project):
        outfile = project / "out.css"
        session = BuildSession(_options(project, outfile=str(outfile)))
        extra = project / "styles" / "extra.css"
        extra.write_text("@layer utilities { .neon { color: lime; } }")
        assert session.handle_change(str(extra)) is True
        assert ".neon{color: lime;}" in outfile.read_text()

    def test_broken_css_keeps_previous_output(self, project):
        outfile = project / "out.css"
        session = BuildSession(_options(project, outfile=str(outfile)))
        before = outfile.read_text()
        extra = project / "styles" / "extra.css"
        extra.write_text("@layer utilities { neon { color: lime; } }")
        assert session.handle_change(str(extra)) is False
        assert isinstance(session.last_error, ValidationError)
        assert outfile.read_text() == before

        extra.write_text("@layer utilities { .neon { color: lime; } }")
        assert session.handle_change(str(extra)) is True
        assert session.last_error is None

    @pytest.mark.parametrize(
        "content",
        [
            '@import "./index.css";',
            "@layer utilities { .neon { color: '\xff'; } }".encode("latin-1"),
        ],
    )
    def test_unloadable_css_keeps_previous_output(self, project, content):
        outfile = project / "out.css"
        session = BuildSession(_options(project, outfile=str(outfile)))
        before = outfile.read_text()
        extra = project / "styles" / "extra.css"
        if isinstance(content, bytes):
            extra.write_bytes(content)
        else:
            extra.write_text(content)
        assert session.handle_change(str(extra)) is False
        assert isinstance(session.last_error, StructuralParseError)
        assert outfile.read_text() == before

    def test_ignores_outfile_and_unrelated_files(self, project):
        outfile = project / "src" / "out.css"
        session = BuildSession(_options(project, outfile=str(outfile)))
        assert session.handle_change(str(outfile)) is False
        assert session.handle_change(str(project / "src" / "notes.md")) is False

    def test_requires_outfile(self, project):
        with pytest.raises(ValueError):
            BuildSession(_options(project))

    def test_watch_with_no_changes(self, project):
        outfile = project / "out.css"
        session = watch(_options(project, outfile=str(outfile), poll_interval=0), max_polls=1)
        assert outfile.read_text() == session.context.to_string()


class TestPollingWatcher:
    def test_reports_modified_file(self, tmp_path):
        target = tmp_path / "a.css"
        target.write_text("a")
        watcher = PollingWatcher(files=[target])
        assert watcher.poll() == []
        stat = os.stat(target)
        os.utime(target, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))
        assert watcher.poll() == [str(target)]
        assert watcher.poll() == []

    def test_reports_new_and_removed_files(self, tmp_path):
        watcher = PollingWatcher(directories=[tmp_path])
        new_file = tmp_path / "new.html"
        new_file.write_text("x")
        assert watcher.poll() == [str(new_file)]
        new_file.unlink()
        assert watcher.poll() == [str(new_file)]

    def test_skips_backup_files(self, tmp_path):
        watcher = PollingWatcher(directories=[tmp_path])
        (tmp_path / "index.html~").write_text("x")
        assert watcher.poll() == []

    def test_add_files_deduplicates(self, tmp_path):
        watcher = PollingWatcher(files=["a.css"])
        watcher.add_files(["a.css", "b.css"])
        assert watcher.files == ["a.css", "b.css"]

    def test_run_invokes_callback(self, tmp_path):
        target = tmp_path / "a.css"
        target.write_text("a")
        watcher = PollingWatcher(files=[str(target)])
        seen = []

        def touch(_interval):
            stat = os.stat(target)
            os.utime(target, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))

        watcher.run(seen.append, max_polls=2, sleep=touch)
        assert seen == [str(target), str(target)]
