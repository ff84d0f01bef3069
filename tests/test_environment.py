import os
import stat

from pipex.environment import find_executable, lookup_env


def _make_program(directory, name, executable=True):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    mode = stat.S_IRUSR | stat.S_IWUSR
    if executable:
        mode |= stat.S_IXUSR
    os.chmod(path, mode)
    return path


def test_lookup_env_mapping():
    assert lookup_env("HOME", {"HOME": "/home/user"}) == "/home/user"
    assert lookup_env("MISSING", {"HOME": "/home/user"}) is None


def test_lookup_env_entries_first_match_wins():
    entries = ["PATHX=/nope", "PATH=/first", "PATH=/second"]
    assert lookup_env("PATH", entries) == "/first"


def test_lookup_env_entries_exact_name_only():
    entries = ["PATHX=/nope", "XPATH=/nope"]
    assert lookup_env("PATH", entries) is None


def test_lookup_env_value_may_contain_equals():
    assert lookup_env("OPT", ["OPT=a=b"]) == "a=b"


def test_find_executable_resolves_first_word(tmp_path):
    _make_program(tmp_path, "tool")
    env = {"PATH": f"/nonexistent:{tmp_path}"}
    assert find_executable("tool -x --y", env) == f"{tmp_path}/tool"


def test_find_executable_first_directory_wins(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_program(first, "tool")
    _make_program(second, "tool")
    env = [f"PATH={first}:{second}"]
    assert find_executable("tool", env) == f"{first}/tool"


def test_find_executable_skips_non_executable(tmp_path):
    _make_program(tmp_path, "plain", executable=False)
    env = {"PATH": str(tmp_path)}
    assert find_executable("plain arg", env) == "plain arg"


def test_find_executable_without_path_returns_command():
    assert find_executable("ls -l", {}) == "ls -l"


def test_find_executable_empty_command():
    assert find_executable("   ", {"PATH": "/bin"}) == "   "