import sys

import pytest

from pioctl.runner import CommandOutput, run


def test_dry_run_prints_and_succeeds(capsys):
    output = run("hyprctl", ["monitors", "all", "-j"], True)
    assert capsys.readouterr().out == "[DRY RUN] hyprctl monitors all -j\n"
    assert output.success()
    assert output.stdout == b""
    assert output.stderr == b""


def test_dry_run_does_not_start_missing_command(capsys):
    output = run("definitely-not-a-real-command-xyz", ["a"], True)
    assert output.success()
    assert "definitely-not-a-real-command-xyz a" in capsys.readouterr().out


def test_real_run_captures_stdout():
    output = run(sys.executable, ["-c", "print('hello')"], False)
    assert output.success()
    assert output.stdout.strip() == b"hello"


def test_real_run_captures_failure_and_stderr():
    code = "import sys; sys.stderr.write('bad'); sys.exit(3)"
    output = run(sys.executable, ["-c", code], False)
    assert not output.success()
    assert output.returncode == 3
    assert output.stderr == b"bad"


def test_missing_command_raises_os_error():
    with pytest.raises(OSError):
        run("definitely-not-a-real-command-xyz", [], False)


def test_command_output_success_depends_on_code():
    assert CommandOutput(0).success() is True
    assert CommandOutput(1).success() is False
    assert CommandOutput(-9).success() is False