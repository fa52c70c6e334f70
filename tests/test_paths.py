import pytest

from monotext.paths import working_directory


def test_directory_keeps_trailing_slash():
    assert working_directory("/usr/bin/editor") == "/usr/bin/"


@pytest.mark.parametrize("path", ["editor", ""])
def test_no_slash_gives_empty(path):
    assert working_directory(path) == ""


def test_relative_path():
    assert working_directory("build/bin/editor") == "build/bin/"


def test_path_ending_in_slash_is_unchanged():
    assert working_directory("some/dir/") == "some/dir/"


@pytest.mark.parametrize("path", ["/a/b/c", "x/y", "/root", "plain"])
def test_directory_plus_name_rebuilds_path(path):
    directory = working_directory(path)
    name = path.rsplit("/", 1)[-1]
    assert directory + name == path
    assert "/" not in path[len(directory):]