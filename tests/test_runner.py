import os

import pytest

from pipex.errors import CommandNotFound, PipexError
from pipex.runner import main, parse_command, run_pipeline


@pytest.fixture
def env():
    return dict(os.environ)


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("alpha\nbeta\ngamma\n")
    return path


def test_parse_command_splits_on_spaces():
    assert parse_command("grep  -v   beta") == ["grep", "-v", "beta"]


def test_parse_command_leading_space_not_found():
    with pytest.raises(CommandNotFound) as info:
        parse_command(" ls")
    assert str(info.value) == " ls : Command not found"


def test_parse_command_empty_fails():
    with pytest.raises(PipexError):
        parse_command("")


def test_pipeline_transforms_input(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "cat", "tr a-z A-Z", str(outfile), env)
    assert status == 0
    assert outfile.read_text() == infile.read_text().upper()


def test_pipeline_filters_lines(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "grep -v beta", "cat", str(outfile), env)
    assert status == 0
    assert outfile.read_text().splitlines() == [
        line for line in infile.read_text().splitlines() if "beta" not in line
    ]


def test_pipeline_truncates_existing_output(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    outfile.write_text("old contents that are much longer than the new ones " * 10)
    run_pipeline(str(infile), "cat", "cat", str(outfile), env)
    assert outfile.read_text() == infile.read_text()


def test_missing_infile_still_runs_second(tmp_path, env, capsys):
    missing = tmp_path / "missing.txt"
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(missing), "cat", "cat", str(outfile), env)
    assert status == 0
    assert outfile.exists()
    assert outfile.read_text() == ""
    assert str(missing) in capsys.readouterr().err


def test_unknown_second_command(tmp_path, infile, env, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "cat", "no-such-cmd-xyz -a", str(outfile), env)
    assert status == 1
    assert "no-such-cmd-xyz -a : Command not found" in capsys.readouterr().err


def test_unknown_first_command_second_sees_empty_input(tmp_path, infile, env, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "no-such-cmd-xyz", "cat", str(outfile), env)
    assert status == 0
    assert outfile.read_text() == ""
    assert "no-such-cmd-xyz : Command not found" in capsys.readouterr().err


def test_unwritable_outfile(tmp_path, infile, env, capsys):
    outfile = tmp_path / "no-dir" / "out.txt"
    status = run_pipeline(str(infile), "cat", "cat", str(outfile), env)
    assert status == 1
    assert str(outfile) in capsys.readouterr().err


def test_absolute_missing_command_reports_system_error(tmp_path, infile, env, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "cat", "/nonexistent/tool", str(outfile), env)
    assert status == 1
    assert f"/nonexistent/tool: {os.strerror(2)}" in capsys.readouterr().err


def test_main_wrong_argument_count(capsys):
    assert main(["only", "three", "args"]) == 1
    assert "ERROR : wrong arg number" in capsys.readouterr().err


def test_main_runs_pipeline(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    status = main([str(infile), "cat", "tr a-z A-Z", str(outfile)])
    assert status == 0
    assert outfile.read_text() == infile.read_text().upper()