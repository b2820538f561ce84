"""Tests for the asynchronous filesystem helpers."""

import asyncio
import os

import pytest

from htmlchunker.fs import exists, mkdirs, rm, source_is_newer_than


class TestMkdirs:
    """Tests for mkdirs."""

    def test_creates_nested_directories(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"

        result = asyncio.run(mkdirs(target))

        assert result == target
        assert target.is_dir()

    def test_existing_directory_is_fine(self, tmp_path):
        assert asyncio.run(mkdirs(str(tmp_path))) == tmp_path


class TestSourceIsNewerThan:
    """Tests for source_is_newer_than."""

    def test_missing_target_counts_as_stale(self, tmp_path):
        source = tmp_path / "book.html"
        source.write_text("x")

        assert asyncio.run(source_is_newer_than(source, tmp_path / "missing.html")) is True

    def test_newer_source(self, tmp_path):
        source = tmp_path / "book.html"
        target = tmp_path / "index.html"
        source.write_text("x")
        target.write_text("y")
        os.utime(target, (1_000, 1_000))
        os.utime(source, (2_000, 2_000))

        assert asyncio.run(source_is_newer_than(source, target)) is True

    def test_older_source(self, tmp_path):
        source = tmp_path / "book.html"
        target = tmp_path / "index.html"
        source.write_text("x")
        target.write_text("y")
        os.utime(source, (1_000, 1_000))
        os.utime(target, (2_000, 2_000))

        assert asyncio.run(source_is_newer_than(source, target)) is False

    def test_missing_source_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            asyncio.run(source_is_newer_than(tmp_path / "nope.html", tmp_path / "index.html"))


class TestExistsAndRm:
    """Tests for exists and rm."""

    def test_exists(self, tmp_path):
        file_path = tmp_path / "f.txt"
        file_path.write_text("x")

        assert asyncio.run(exists(file_path)) is True
        assert asyncio.run(exists(tmp_path)) is True
        assert asyncio.run(exists(tmp_path / "missing")) is False

    def test_rm_directory_tree(self, tmp_path):
        tree = tmp_path / "out"
        (tree / "sub").mkdir(parents=True)
        (tree / "sub" / "page.html").write_text("x")

        assert asyncio.run(rm(tree)) == tree
        assert not tree.exists()

    def test_rm_file(self, tmp_path):
        file_path = tmp_path / "f.txt"
        file_path.write_text("x")

        asyncio.run(rm(file_path))

        assert not file_path.exists()

    def test_rm_missing_path_is_not_an_error(self, tmp_path):
        missing = tmp_path / "missing"

        assert asyncio.run(rm(missing)) == missing

    def test_helpers_run_concurrently(self, tmp_path):
        async def run():
            return await asyncio.gather(
                mkdirs(tmp_path / "x"),
                mkdirs(tmp_path / "y"),
                exists(tmp_path),
            )

        x, y, found = asyncio.run(run())

        assert x.is_dir() and y.is_dir()
        assert found is True
