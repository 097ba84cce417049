"""File walking and ignore rule tests."""

import os
import pytest

from codebase_index.utils import FileFilter, FileWalker


@pytest.mark.unit
class TestFileFilter:

    @pytest.mark.parametrize("path", [
        "node_modules/react/index.js",
        "packages/web/node_modules/x/index.js",
        "build/out.js",
        "src/__pycache__/mod.py",
        "dist/app.js",
        ".next/server.js",
        "public/app.min.js",
        "public/site.min.css",
        "app.js.map",
        "yarn.lock",
        "package-lock.json",
        ".env",
        ".env.local",
        "assets/logo.svg",
        "assets/font.woff2",
    ])
    def test_builtin_exclusions(self, path):
        assert FileFilter().should_exclude(path)

    @pytest.mark.parametrize("path", ["src/app.ts", "README.md", "config/settings.json", "src/builder.py"])
    def test_regular_sources_pass(self, path):
        assert not FileFilter().should_exclude(path)

    def test_gitignore_patterns(self, tmp_path):
        (tmp_path / ".gitignore").write_text("# generated\nsecret/\n*.sql\n\n/coverage\n")
        file_filter = FileFilter.from_project(tmp_path)
        assert file_filter.should_exclude("secret/keys.json")
        assert file_filter.should_exclude("db/seed.sql")
        assert file_filter.should_exclude("coverage/report.json")
        assert not file_filter.should_exclude("src/coverage/report.json")
        assert not file_filter.should_exclude("src/app.ts")
        assert file_filter.get_exclude_summary()["project_patterns"] == 3

    def test_negation_cannot_reinclude_builtin(self, tmp_path):
        (tmp_path / ".gitignore").write_text("!build/keep.py\n")
        assert FileFilter.from_project(tmp_path).should_exclude("build/keep.py")

    @pytest.mark.parametrize("path", ["build/keep.py", "src/__pycache__/keep.py", "node_modules/x/index.js"])
    def test_negation_of_file_under_builtin_directory(self, path):
        assert FileFilter(["*.py", f"!{path}"]).should_exclude(path)

    def test_negation_within_project_rules(self):
        file_filter = FileFilter(["*.log", "!keep.log"])
        assert file_filter.should_exclude("debug.log")
        assert not file_filter.should_exclude("keep.log")

    def test_missing_gitignore(self, tmp_path):
        file_filter = FileFilter.from_project(tmp_path)
        assert file_filter.patterns == []
        assert not file_filter.should_exclude("src/app.ts")

    def test_filter_paths_preserves_order(self):
        paths = ["b.ts", "dist/a.js", "a.ts", "x.lock"]
        assert list(FileFilter().filter_paths(paths)) == ["b.ts", "a.ts"]


@pytest.mark.unit
class TestFileWalker:

    def test_walk_order_and_extension_allow_list(self, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "b.ts").write_text("")
        (tmp_path / "src" / "a.py").write_text("")
        (tmp_path / "z.md").write_text("")
        (tmp_path / "notes.txt").write_text("")
        (tmp_path / "Makefile").write_text("")
        (tmp_path / "photo.PNG").write_text("")

        assert list(FileWalker().walk_files(str(tmp_path))) == ["z.md", "src/a.py", "src/b.ts"]

    def test_uppercase_extension_is_a_candidate(self, tmp_path):
        (tmp_path / "SETUP.PY").write_text("")
        assert list(FileWalker().walk_files(str(tmp_path))) == ["SETUP.PY"]

    def test_hidden_entries_and_pruned_directories(self, tmp_path):
        (tmp_path / ".github" / "workflows").mkdir(parents=True)
        (tmp_path / ".github" / "workflows" / "ci.yml").write_text("")
        (tmp_path / ".eslintrc.json").write_text("")
        for skipped in ("node_modules", ".next", "dist", ".git"):
            (tmp_path / skipped).mkdir()
            (tmp_path / skipped / "file.js").write_text("")
        (tmp_path / "app.js").write_text("")

        assert list(FileWalker().walk_files(str(tmp_path))) == ["app.js"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_are_not_followed(self, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "secret.ts").write_text("")
        project = tmp_path / "project"
        project.mkdir()
        (project / "real.ts").write_text("")
        try:
            os.symlink(outside, project / "linked_dir")
            os.symlink(outside / "secret.ts", project / "linked.ts")
        except OSError:
            pytest.skip("cannot create symlinks")

        assert list(FileWalker().walk_files(str(project))) == ["real.ts"]
