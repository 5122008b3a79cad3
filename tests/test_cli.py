import io
import sys

import pytest

from devil import __version__
from devil.cli import (
    HelpRequest,
    ProjectRequest,
    StatusRequest,
    VersionRequest,
    main,
    parse_args,
)
from devil.errors import InvalidArgument


def test_parse_status_with_ignore_names():
    request = parse_args(["status", ".", "--ignore", "node_modules", ".git"])
    assert isinstance(request, StatusRequest)
    assert request.path == "."
    assert request.ignore == ["node_modules", ".git"]


def test_parse_status_repeated_ignore_flags():
    request = parse_args(["status", "src", "--ignore", "a", "--ignore", "b", "c"])
    assert request.ignore == ["a", "b", "c"]


def test_parse_status_without_ignore():
    assert parse_args(["status", "."]).ignore == []
    assert parse_args(["status", ".", "--ignore"]).ignore == []


def test_parse_project():
    request = parse_args(["-v", "project", "foo", "c++"])
    assert isinstance(request, ProjectRequest)
    assert (request.name, request.language, request.verbose) == ("foo", "c++", True)


@pytest.mark.parametrize("argv, expected", [
    ([], HelpRequest),
    (["help"], HelpRequest),
    (["version"], VersionRequest),
])
def test_parse_simple_commands(argv, expected):
    assert isinstance(parse_args(argv), expected)


@pytest.mark.parametrize("argv", [
    ["status"],
    ["status", ".", "extra"],
    ["status", ".", "--bogus"],
    ["project", "foo"],
    ["project", "foo", "c", "extra"],
    ["frobnicate"],
])
def test_parse_invalid_arguments(argv):
    with pytest.raises(InvalidArgument):
        parse_args(argv)


def test_main_status(sample_tree, capsys):
    assert main(["status", str(sample_tree), "--ignore", "node_modules"]) == 0
    assert capsys.readouterr().out == "├── a.txt\n└── b.txt\n"


def test_main_status_current_directory(sample_tree, capsys, monkeypatch):
    monkeypatch.chdir(sample_tree)
    assert main(["status", "."]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "├── a.txt",
        "├── b.txt",
        "└── node_modules",
        "    └── x.txt",
    ]


def test_main_status_missing_path_prints_nothing(tmp_path, capsys):
    assert main(["status", str(tmp_path / "nope")]) == 0
    assert capsys.readouterr().out == ""


def test_main_status_uses_configured_ignores(sample_tree, isolated_env, capsys):
    (isolated_env / "devil.ini").write_text("[Status]\nignore = node_modules\n")
    assert main(["status", str(sample_tree)]) == 0
    assert "node_modules" not in capsys.readouterr().out


def test_main_project(isolated_env, capsys):
    assert main(["project", "foo", "c"]) == 0
    project = isolated_env / "Dev" / "foo"
    assert (project / "src" / "main.c").is_file()
    assert (project / "CMakeLists.txt").is_file()
    assert capsys.readouterr().out.startswith("Created project at: ")

    assert main(["project", "foo", "c"]) == 1
    assert "already exists" in capsys.readouterr().err


def test_main_project_unsupported_language(isolated_env, capsys):
    assert main(["project", "foo", "haskell"]) == 1
    assert "Language not supported: haskell" in capsys.readouterr().err
    assert not (isolated_env / "Dev").exists()


def test_main_usage_error_prints_hint(capsys):
    assert main(["project", "foo"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert "devil project <project_name> <project_language>" in err


def test_main_unknown_command(capsys):
    assert main(["frobnicate"]) == 1
    assert "frobnicate" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["help"]])
def test_main_help(argv, capsys):
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: devil <command> [options]")
    assert "status <path> [--ignore <folder1> <folder2> ...]" in out


def test_main_version(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out == f"devil v{__version__}\n"


def test_main_missing_config_file(capsys):
    assert main(["--config", "missing.ini", "version"]) == 1
    assert "missing.ini" in capsys.readouterr().err


def test_parse_status_ignore_names_with_single_dash():
    request = parse_args(["status", ".", "--ignore", "-tmp", "node_modules", "-"])
    assert request.ignore == ["-tmp", "node_modules", "-"]


def test_parse_status_ignore_stops_at_double_dash_flag():
    with pytest.raises(InvalidArgument):
        parse_args(["status", ".", "--ignore", "a", "--bogus"])


def test_main_status_ignores_dash_prefixed_name(tree_factory, capsys):
    root = tree_factory({"-tmp": {"x": ""}, "keep.txt": ""})
    assert main(["status", str(root), "--ignore", "-tmp"]) == 0
    assert capsys.readouterr().out == "└── keep.txt\n"


def test_main_project_empty_name(isolated_env, capsys):
    assert main(["project", "", "c"]) == 1
    assert "Project name must not be empty" in capsys.readouterr().err
    assert not (isolated_env / "Dev").exists()


def test_main_config_with_percent_sign(sample_tree, isolated_env, capsys):
    (isolated_env / "devil.ini").write_text("[Status]\nignore = 100%done, node_modules\n")
    assert main(["status", str(sample_tree)]) == 0
    assert capsys.readouterr().out == "├── a.txt\n└── b.txt\n"


def test_main_config_with_empty_base_dir(isolated_env, capsys):
    (isolated_env / "devil.ini").write_text("[Projects]\nbase_dir =\n")
    assert main(["project", "foo", "c"]) == 1
    assert "base_dir" in capsys.readouterr().err


def test_main_unwritable_log_file(isolated_env, capsys):
    (isolated_env / "blocker").write_text("not a directory")
    (isolated_env / "devil.ini").write_text(
        "[Logging]\nlog_to_file = true\nlog_file = blocker/devil.log\n"
    )
    assert main(["version"]) == 1
    assert "Cannot open log file" in capsys.readouterr().err


class _ClosedPipe(io.StringIO):
    def write(self, s):
        raise BrokenPipeError(32, "Broken pipe")


def test_main_status_into_closed_pipe(sample_tree, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdout", _ClosedPipe())
    assert main(["status", str(sample_tree)]) == 1
    assert capsys.readouterr().err == ""


def test_main_status_on_non_utf8_stdout(sample_tree, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(io.BytesIO(), encoding="ascii"))
    assert main(["status", str(sample_tree)]) == 1
    assert "PYTHONIOENCODING=utf-8" in capsys.readouterr().err
