import pytest

from refdoc.paths import PathStyle, convert_to_slash, make_dirsy

WINDOWS_STYLES = [PathStyle.WINDOWS_SLASH, PathStyle.WINDOWS_BACKSLASH]


def test_posix_keeps_backslashes():
    path = "a\\b\\c"
    assert convert_to_slash(path, PathStyle.POSIX) == path


@pytest.mark.parametrize("style", WINDOWS_STYLES)
def test_windows_converts_backslashes(style):
    result = convert_to_slash("a\\b\\c", style)
    assert "\\" not in result
    assert result.split("/") == ["a", "b", "c"]


@pytest.mark.parametrize("style", list(PathStyle))
def test_convert_keeps_forward_slashes(style):
    assert convert_to_slash("x/y/z", style) == "x/y/z"


def test_make_dirsy_posix_appends_slash():
    result = make_dirsy("dir", PathStyle.POSIX)
    assert result.startswith("dir")
    assert result.endswith("/")
    assert len(result) == len("dir") + 1


def test_make_dirsy_backslash_style():
    result = make_dirsy("dir", PathStyle.WINDOWS_BACKSLASH)
    assert result.endswith("\\")
    assert len(result) == len("dir") + 1


def test_make_dirsy_windows_accepts_either_separator():
    assert make_dirsy("dir/", PathStyle.WINDOWS_BACKSLASH) == "dir/"
    assert make_dirsy("dir\\", PathStyle.WINDOWS_SLASH) == "dir\\"


def test_make_dirsy_posix_treats_backslash_as_char():
    result = make_dirsy("dir\\", PathStyle.POSIX)
    assert result.endswith("\\/")


@pytest.mark.parametrize("style", list(PathStyle))
@pytest.mark.parametrize("path", ["a", "a/b", "a/b/", "c\\d"])
def test_make_dirsy_idempotent(style, path):
    once = make_dirsy(path, style)
    assert make_dirsy(once, style) == once