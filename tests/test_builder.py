"""Unit tests for the declarative builder core (android_tools.core.builder).

Tests cover:
- Flag kinds and how each renders
- Rendering order: leading, subcommand, options, trailing
- Determinism regardless of setter call order
- Flag table inheritance
- command() / execute() / run() against a recording executable
"""

from __future__ import annotations

from pathlib import Path

import pytest

from android_tools.core.builder import (
    CommandBuilder,
    Flag,
    ListOption,
    Option,
    Pairs,
    Positional,
    Repeated,
    Switch,
    Template,
)
from android_tools.models.environment import ToolEnvironment
from android_tools.models.options import DebugTag
from android_tools.utils.process import CommandSpec, ProcessResult
from conftest import recorded_args


class Sample(CommandBuilder):
    tool = "sample"
    subcommand = ("do", "thing")

    global_flag = Switch("-g", position="leading")
    quiet = Switch("-q")
    output = Option("-o")
    bundle = Option("--bundle", equals=True)
    modules = ListOption("--modules", equals=True)
    include = Repeated("-I")
    extras = Pairs("-e")
    debug_no = Template("-debug-no-{}")
    files = Positional()

    def __init__(self, executable: Path | None = None):
        super().__init__()
        self._executable = executable

    def executable(self, env: ToolEnvironment) -> list[str]:
        return [str(self._executable or "sample")]


class ChildSample(Sample):
    subcommand = ("child",)

    extra = Switch("--extra")


# ---------------------------------------------------------------------------
# Flag kinds
# ---------------------------------------------------------------------------


class TestFlagKinds:
    def test_nothing_set_renders_subcommand_only(self):
        assert Sample().args() == ["do", "thing"]

    def test_switch(self):
        assert Sample().quiet().args() == ["do", "thing", "-q"]

    def test_switch_can_be_turned_off(self):
        assert Sample().quiet().quiet(False).args() == ["do", "thing"]

    def test_option(self):
        assert Sample().output("out.apk").args() == ["do", "thing", "-o", "out.apk"]

    def test_option_accepts_paths_and_numbers(self):
        builder = Sample().output(Path("a") / "b.apk")
        assert builder.args()[-1] == str(Path("a") / "b.apk")
        assert Sample().output(3).args()[-1] == "3"

    def test_option_with_equals(self):
        assert Sample().bundle("app.aab").args()[-1] == "--bundle=app.aab"

    def test_list_option_joins_values(self):
        args = Sample().modules(["base.zip", "feature.zip"]).args()
        assert args[-1] == "--modules=base.zip,feature.zip"

    def test_empty_list_option_renders_nothing(self):
        assert Sample().modules([]).args() == ["do", "thing"]

    def test_repeated(self):
        args = Sample().include(["a.jar", "b.jar"]).args()
        assert args == ["do", "thing", "-I", "a.jar", "-I", "b.jar"]

    def test_repeated_single_value(self):
        assert Sample().include("a.jar").args() == ["do", "thing", "-I", "a.jar"]

    def test_pairs_from_mapping(self):
        args = Sample().extras({"class": "com.example.Test", "debug": "true"}).args()
        assert args[2:] == ["-e", "class", "com.example.Test", "-e", "debug", "true"]

    def test_pairs_from_tuples(self):
        args = Sample().extras([("size", "small")]).args()
        assert args[2:] == ["-e", "size", "small"]

    def test_template(self):
        assert Sample().debug_no(DebugTag.GPS).args()[-1] == "-debug-no-gps"

    def test_positional_string_is_one_value(self):
        assert Sample().files("app.apk").args() == ["do", "thing", "app.apk"]

    def test_setting_none_clears(self):
        assert Sample().output("x").output(None).args() == ["do", "thing"]

    def test_get_returns_configured_value(self):
        builder = Sample().output("x")
        assert builder.get("output") == "x"
        assert builder.get("bundle") is None
        assert builder.get("bundle", "dflt") == "dflt"


# ---------------------------------------------------------------------------
# Ordering and determinism
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_positions(self):
        args = Sample().files(["a", "b"]).output("o").global_flag().args()
        assert args == ["-g", "do", "thing", "-o", "o", "a", "b"]

    def test_order_follows_table_not_calls(self):
        first = Sample().quiet().output("o").include("x").files("f")
        second = Sample().files("f").include("x").output("o").quiet()
        assert first.args() == second.args()
        assert first.args() == ["do", "thing", "-q", "-o", "o", "-I", "x", "f"]

    def test_rendering_is_repeatable(self):
        builder = Sample().quiet().modules(["a", "b"]).files("f")
        assert builder.args() == builder.args()

    def test_setters_chain_on_same_instance(self):
        builder = Sample()
        assert builder.quiet() is builder
        assert builder.output("o") is builder


# ---------------------------------------------------------------------------
# Flag table
# ---------------------------------------------------------------------------


class TestFlagTable:
    def test_flags_collected_in_declaration_order(self):
        names = [flag.name for flag in Sample.flags]
        assert names == [
            "global_flag",
            "quiet",
            "output",
            "bundle",
            "modules",
            "include",
            "extras",
            "debug_no",
            "files",
        ]

    def test_subclass_appends_its_flags(self):
        names = [flag.name for flag in ChildSample.flags]
        assert names[: len(Sample.flags)] == [flag.name for flag in Sample.flags]
        assert names[-1] == "extra"

    def test_subclass_options_render_after_base_options(self):
        args = ChildSample().extra().quiet().files("f").args()
        assert args == ["child", "-q", "--extra", "f"]

    def test_class_access_returns_descriptor(self):
        assert isinstance(Sample.output, Flag)
        assert Sample.output.tokens == ("-o",)

    def test_setter_metadata(self):
        setter = Sample().output
        assert setter.__name__ == "output"

    def test_instances_do_not_share_values(self):
        a = Sample().quiet()
        b = Sample()
        assert a.args() != b.args()


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


class TestExecution:
    def test_command_spec(self, sdk_env):
        spec = Sample(Path("/opt/sample")).quiet().command(sdk_env)
        assert isinstance(spec, CommandSpec)
        assert spec.executable == str(Path("/opt/sample"))
        assert spec.args == ("do", "thing", "-q")

    def test_base_builder_has_no_executable(self, sdk_env):
        with pytest.raises(NotImplementedError):
            CommandBuilder().command(sdk_env)

    def test_run_passes_rendered_args(self, tmp_path, sdk_env, recording_tool):
        tool = recording_tool(tmp_path / "bin" / "sample")
        result = Sample(tool).quiet().files(["a b", "c"]).run(sdk_env)
        assert isinstance(result, ProcessResult)
        assert result.success
        assert recorded_args(tool) == ["do", "thing", "-q", "a b", "c"]

    def test_repr_shows_arguments(self):
        assert "do thing -q" in repr(Sample().quiet())
