"""Tests for the upward directory walk."""

from pathlib import Path, PurePosixPath, PureWindowsPath

import pytest

from nodist_shim.errors import SpecResolutionError
from nodist_shim.resolution.walker import DirectoryWalk, find_upward


class TestDirectoryWalk:
    """Ancestor enumeration."""

    def test_posix_nearest_first_to_root(self):
        walk = DirectoryWalk(PurePosixPath("/home/user/project"))
        assert [str(p) for p in walk] == ["/home/user/project", "/home/user", "/home", "/"]

    def test_windows_convention(self):
        walk = DirectoryWalk(PureWindowsPath(r"D:\Programme\nodist"))
        assert [str(p) for p in walk] == [r"D:\Programme\nodist", r"D:\Programme", "D:\\"]

    def test_restartable(self):
        walk = DirectoryWalk(PurePosixPath("/a/b"))
        assert list(walk) == list(walk)

    def test_each_step_drops_one_segment(self):
        steps = list(DirectoryWalk(PurePosixPath("/a/b/c/d")))
        for nearer, farther in zip(steps, steps[1:]):
            assert nearer.parent == farther

    @pytest.mark.parametrize("start", ["/", "/a", "/a/b/c/d/e/f/g"])
    def test_at_most_one_probe_per_segment(self, start):
        path = PurePosixPath(start)
        probes = []

        def reader(candidate):
            probes.append(candidate)
            raise FileNotFoundError(candidate)

        assert find_upward(path, "marker", reader) is None
        assert len(probes) <= len(path.parts)


class TestFindUpward:
    """Probing for a file on the way up."""

    def test_stops_at_first_hit(self):
        seen = []

        def reader(candidate):
            seen.append(str(candidate))
            if candidate == PurePosixPath("/a/b/.node-version"):
                return "8.0.0"
            raise FileNotFoundError(candidate)

        result = find_upward(PurePosixPath("/a/b/c"), ".node-version", reader)
        assert result == (PurePosixPath("/a/b/.node-version"), "8.0.0")
        assert seen == ["/a/b/c/.node-version", "/a/b/.node-version"]

    def test_other_io_error_aborts(self):
        seen = []

        def reader(candidate):
            seen.append(candidate)
            raise PermissionError(13, "Permission denied")

        with pytest.raises(SpecResolutionError):
            find_upward(PurePosixPath("/a/b/c"), "package.json", reader)
        assert len(seen) == 1

    def test_real_filesystem(self, tmp_path):
        deep = tmp_path / "x" / "y"
        deep.mkdir(parents=True)
        (tmp_path / "x" / "found.txt").write_text("hello")

        path, value = find_upward(deep, "found.txt", lambda p: Path(p).read_text())
        assert path == tmp_path / "x" / "found.txt"
        assert value == "hello"

    def test_directory_in_the_way_is_fatal(self, tmp_path):
        (tmp_path / "package.json").mkdir()

        def reader(candidate):
            with open(candidate, "rb") as f:
                return f.read()

        with pytest.raises(SpecResolutionError):
            find_upward(tmp_path, "package.json", reader)
