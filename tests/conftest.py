"""Shared pytest fixtures for the android-tools test suite.

Provides reusable fixtures for:
- Isolated user configuration
- Fake Android SDK and JDK trees under tmp_path
- Environment snapshots pointing at those trees
- Fake tool executables that record their arguments
"""

from __future__ import annotations

import json
import stat
import sys
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from android_tools.models.environment import ToolEnvironment
from android_tools.utils import config

BUILD_TOOLS_VERSIONS = ("28.0.3", "29.0.2", "9.0.0")

# Fake tool: records argv as JSON next to itself, then creates any `-o` target.
RECORDING_TOOL = textwrap.dedent(
    """\
    #!{python}
    import json, pathlib, sys
    here = pathlib.Path(__file__)
    here.with_suffix(".args.json").write_text(json.dumps(sys.argv[1:]))
    args = sys.argv[1:]
    if "-o" in args:
        target = pathlib.Path(args[args.index("-o") + 1])
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("out")
    print("ok " + " ".join(args))
    """
)


def make_executable(path: Path, content: str = "#!/bin/sh\nexit 0\n") -> Path:
    """Write an executable file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


# ---------------------------------------------------------------------------
# Configuration isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config loader at an empty per-test file."""
    config_file = tmp_path / "config" / "config.json"
    monkeypatch.setattr(config, "CONFIG_FILE", config_file)
    config.reload_config()
    yield config_file
    config.reload_config()


@pytest.fixture
def write_config(isolated_config: Path) -> Callable[[dict], Path]:
    """Write a config.json and invalidate the cache."""

    def _write(data: dict) -> Path:
        isolated_config.parent.mkdir(parents=True, exist_ok=True)
        isolated_config.write_text(json.dumps(data))
        config.reload_config()
        return isolated_config

    return _write


# ---------------------------------------------------------------------------
# Fake SDK / JDK trees
# ---------------------------------------------------------------------------


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def fake_sdk(tmp_path: Path) -> Path:
    """Android SDK with three build-tools versions, platform-tools and emulator."""
    sdk = tmp_path / "sdk"
    for version in BUILD_TOOLS_VERSIONS:
        for tool in ("aapt2", "zipalign", "apksigner"):
            make_executable(sdk / "build-tools" / version / tool)
    make_executable(sdk / "platform-tools" / "adb")
    make_executable(sdk / "emulator" / "emulator")
    return sdk


@pytest.fixture
def fake_jdk(tmp_path: Path) -> Path:
    jdk = tmp_path / "jdk"
    for tool in ("java", "keytool", "jarsigner"):
        make_executable(jdk / "bin" / tool)
    return jdk


@pytest.fixture
def sdk_env(fake_sdk: Path, fake_jdk: Path, home_dir: Path) -> ToolEnvironment:
    """Snapshot with no PATH, pointing at the fake SDK and JDK."""
    return ToolEnvironment.from_mapping(
        {"ANDROID_SDK_ROOT": str(fake_sdk), "JAVA_HOME": str(fake_jdk)},
        system="Linux",
        home=home_dir,
    )


# ---------------------------------------------------------------------------
# Recording tools
# ---------------------------------------------------------------------------


@pytest.fixture
def recording_tool() -> Callable[[Path], Path]:
    """Install a Python script at `path` that records the argv it receives."""
    if sys.platform == "win32":
        pytest.skip("shebang scripts are POSIX-only")

    def _install(path: Path) -> Path:
        return make_executable(path, RECORDING_TOOL.format(python=sys.executable))

    return _install


def recorded_args(tool: Path) -> list[str]:
    """Arguments the recording tool at `tool` was last invoked with."""
    return json.loads(tool.with_suffix(".args.json").read_text())
