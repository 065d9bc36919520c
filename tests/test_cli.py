"""Tests for the typer CLI (android_tools.cli)."""

from __future__ import annotations

import json

import pytest
from rich.console import Console as RichConsole
from typer.testing import CliRunner

from android_tools import __version__
from android_tools.cli.main import app
from android_tools.utils.output import console
from conftest import make_executable, recorded_args

runner = CliRunner()


@pytest.fixture
def sdk_environ(monkeypatch, fake_sdk, fake_jdk, home_dir):
    """Point the process environment at the fake SDK and JDK."""
    monkeypatch.setenv("ANDROID_SDK_ROOT", str(fake_sdk))
    monkeypatch.setenv("JAVA_HOME", str(fake_jdk))
    monkeypatch.setenv("PATH", "")
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("BUNDLETOOL_PATH", raising=False)
    monkeypatch.delenv("BUNDLETOOL_VERSION", raising=False)
    yield
    console.set_json_mode(False)
    console.set_verbose(False)


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


class TestSdkCommands:
    def test_locate(self, sdk_environ, fake_sdk):
        result = runner.invoke(app, ["sdk", "locate", "aapt2"])
        assert result.exit_code == 0
        assert str(fake_sdk / "build-tools" / "9.0.0" / "aapt2") in result.stdout

    def test_locate_missing_tool_fails(self, sdk_environ):
        result = runner.invoke(app, ["sdk", "locate", "bundletool"])
        assert result.exit_code == 1

    def test_locate_unknown_tool(self, sdk_environ):
        result = runner.invoke(app, ["sdk", "locate", "gradle"])
        assert result.exit_code == 2

    def test_doctor_json(self, sdk_environ):
        result = runner.invoke(app, ["sdk", "doctor", "--json"])
        # bundletool is missing, so doctor reports failure
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        by_tool = {entry["tool"]: entry for entry in data}
        assert by_tool["adb"]["command"]
        assert by_tool["bundletool"]["command"] is None
        assert by_tool["bundletool"]["error"]

    def test_doctor_table_shows_resolution_error(
        self, sdk_environ, fake_sdk, monkeypatch
    ):
        monkeypatch.setattr(console, "_console", RichConsole(width=400))
        (fake_sdk / "platform-tools" / "adb").unlink()
        result = runner.invoke(app, ["sdk", "doctor"])
        assert isinstance(result.exception, SystemExit)
        assert result.exit_code == 1
        adb_row = next(line for line in result.output.splitlines() if " adb " in line)
        assert "missing" in adb_row
        assert str(fake_sdk / "platform-tools" / "adb") in result.output
        assert str(fake_sdk / "build-tools" / "9.0.0" / "aapt2") in result.output


class TestKeystoreCommand:
    def test_generate(self, sdk_environ, fake_jdk, recording_tool, tmp_path):
        keytool = recording_tool(fake_jdk / "bin" / "keytool")
        target = tmp_path / "keys"
        target.mkdir()
        result = runner.invoke(
            app, ["keystore", "generate", "--path", str(target), "--alias", "dev"]
        )
        assert result.exit_code == 0
        args = recorded_args(keytool)
        assert args[args.index("-keystore") + 1] == str(target / "aab.keystore")
        assert args[args.index("-alias") + 1] == "dev"

    def test_generate_failure(self, sdk_environ, fake_jdk, tmp_path):
        keytool = fake_jdk / "bin" / "keytool"
        make_executable(keytool, "#!/bin/sh\necho nope >&2\nexit 1\n")
        result = runner.invoke(app, ["keystore", "generate", "--path", str(tmp_path)])
        assert isinstance(result.exception, SystemExit)
        assert result.exit_code == 1
        assert "nope" in result.output


class TestAapt2Command:
    def test_dump(self, sdk_environ, fake_sdk, recording_tool, tmp_path):
        aapt2 = recording_tool(fake_sdk / "build-tools" / "9.0.0" / "aapt2")
        apk = tmp_path / "app.apk"
        apk.write_bytes(b"PK")
        result = runner.invoke(app, ["aapt2", "dump", "badging", str(apk)])
        assert result.exit_code == 0
        assert recorded_args(aapt2) == ["dump", "badging", str(apk)]
        assert "ok dump badging" in result.stdout

    def test_dump_failure(self, sdk_environ, fake_sdk, tmp_path):
        make_executable(
            fake_sdk / "build-tools" / "9.0.0" / "aapt2",
            "#!/bin/sh\necho 'W/ziparchive: bad' >&2\nexit 1\n",
        )
        apk = tmp_path / "app.apk"
        apk.write_bytes(b"PK")
        result = runner.invoke(app, ["aapt2", "dump", "badging", str(apk)])
        assert isinstance(result.exception, SystemExit)
        assert result.exit_code == 1
        assert "aapt2 failed (exit 1)" in result.output
        assert "W/ziparchive: bad" in result.output
