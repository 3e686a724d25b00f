import pytest

from cloudcli import options
from cloudcli.commands import Cmd, CommandError


def test_cmd():
    cmd = Cmd("echo", False)
    cmd.append_args("hello world")
    assert str(cmd) == "echo hello world"

    stdout, stderr = cmd.run(1)
    assert stdout == "hello world\n"
    assert stderr == ""


def test_cmd_run_timeout():
    cmd = Cmd("sleep", False)
    cmd.append_args("5")

    with pytest.raises(CommandError) as info:
        cmd.run(1)
    assert str(info.value) == "sleep: signal: killed"
    assert info.value.stdout == ""
    assert info.value.stderr == ""


def test_cmd_dry_run():
    cmd = Cmd("sleep", True)
    cmd.append_args("5")
    assert cmd.run(1) == ("", "")


def test_args_cleared_after_run():
    cmd = Cmd("echo", False)
    cmd.append_args("a", "b")
    cmd.run(5)
    assert cmd.args == []
    assert str(cmd) == "echo "


def test_missing_executable():
    cmd = Cmd("definitely-not-a-real-command-xyz", False)
    with pytest.raises(CommandError) as info:
        cmd.run(5)
    assert "executable file not found" in str(info.value)


def test_nonzero_exit():
    cmd = Cmd("false", False)
    with pytest.raises(CommandError) as info:
        cmd.run(5)
    assert str(info.value) == "false: exit status 1"


def test_execute_dry_run_prints_command(capsys):
    cmd = Cmd("echo", True)
    cmd.append_args("hello")
    cmd.execute(1)
    assert capsys.readouterr().out == "echo hello\n"


def test_execute_verbose_echoes_stdout(capsys, monkeypatch):
    monkeypatch.setattr(options.GLOBAL, "verbose", True)
    cmd = Cmd("echo", False)
    cmd.append_args("hi")
    cmd.execute(5)
    assert capsys.readouterr().out == "hi\n"


def test_execute_failure_exits(capsys):
    cmd = Cmd("false", False)
    with pytest.raises(SystemExit):
        cmd.execute(5)
    assert "ERROR: false: exit status 1" in capsys.readouterr().out