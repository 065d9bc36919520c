"""`aapt2 link`: merge compiled resources into an APK."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from android_tools.aapt2.base import Aapt2Command
from android_tools.core.builder import ListOption, Option, Positional, Repeated, Switch
from android_tools.exceptions import CompiledResourcesNotFoundError
from android_tools.models.environment import ToolEnvironment


def flat_files(compiled_res: Path) -> list[Path]:
    """All compiled (*.flat) resources in a directory, sorted."""
    if not compiled_res.is_dir():
        return []
    return sorted(compiled_res.glob("*.flat"))


class CompiledInputs(Positional):
    """Link inputs. Directories expand to the .flat files they contain."""

    def render(self, value: tuple[Any, ...]) -> list[str]:
        args: list[str] = []
        for item in value:
            path = Path(item)
            if path.is_dir():
                args.extend(str(p) for p in flat_files(path))
            else:
                args.append(str(path))
        return args


class Aapt2Link(Aapt2Command):
    """Links resource tables, binary XML and processed PNGs into a single APK."""

    subcommand = ("link",)

    output = Option("-o", doc="Output path for the linked resource APK")
    manifest = Option("--manifest", doc="Path to the AndroidManifest.xml to build")
    android_jar = Repeated(
        "-I", doc="Platform android.jar or other APKs to link against"
    )
    assets = Repeated("-A", doc="Assets directory to include in the APK")
    overlays = Repeated("-R", doc="Compiled resources overlaying earlier ones")
    package_id = Option("--package-id")
    allow_reserved_package_id = Switch("--allow-reserved-package-id")
    java = Option("--java", doc="Directory in which to generate R.java")
    proguard = Option("--proguard")
    proguard_conditional_keep_rules = Switch("--proguard-conditional-keep-rules")
    proguard_main_dex = Option("--proguard-main-dex")
    no_auto_version = Switch("--no-auto-version")
    no_version_vectors = Switch("--no-version-vectors")
    no_version_transitions = Switch("--no-version-transitions")
    no_resource_deduping = Switch("--no-resource-deduping")
    no_resource_removal = Switch("--no-resource-removal")
    enable_sparse_encoding = Switch("--enable-sparse-encoding")
    require_suggested_localization = Switch(
        "-z", doc="Require localization of strings marked 'suggested'"
    )
    config = ListOption("-c", doc="Configurations to keep, e.g. en,fr,hdpi")
    preferred_density = Option("--preferred-density")
    product = Option("--product")
    output_to_dir = Switch("--output-to-dir")
    min_sdk_version = Option("--min-sdk-version")
    target_sdk_version = Option("--target-sdk-version")
    version_code = Option("--version-code")
    version_code_major = Option("--version-code-major")
    version_name = Option("--version-name")
    revision_code = Option("--revision-code")
    replace_version = Switch("--replace-version")
    compile_sdk_version_code = Option("--compile-sdk-version-code")
    compile_sdk_version_name = Option("--compile-sdk-version-name")
    shared_lib = Switch("--shared-lib")
    static_lib = Switch("--static-lib")
    proto_format = Switch("--proto-format", doc="Generate resources in Protobuf format")
    no_static_lib_packages = Switch("--no-static-lib-packages")
    non_final_ids = Switch("--non-final-ids")
    no_proguard_location_reference = Switch("--no-proguard-location-reference")
    emit_ids = Option("--emit-ids")
    stable_ids = Option("--stable-ids")
    private_symbols = Option("--private-symbols")
    custom_package = Option("--custom-package")
    extra_packages = Repeated("--extra-packages")
    add_javadoc_annotation = Repeated("--add-javadoc-annotation")
    output_text_symbols = Option("--output-text-symbols")
    auto_add_overlay = Switch(
        "--auto-add-overlay",
        doc="Allow new resources in overlays without <add-resource>",
    )
    override_styles_instead_of_overlaying = Switch(
        "--override-styles-instead-of-overlaying"
    )
    rename_manifest_package = Option("--rename-manifest-package")
    rename_resources_package = Option("--rename-resources-package")
    rename_instrumentation_target_package = Option(
        "--rename-instrumentation-target-package"
    )
    no_compress_extensions = Repeated("-0", doc="File extensions to store uncompressed")
    no_compress = Switch("--no-compress")
    keep_raw_values = Switch("--keep-raw-values")
    no_compress_regex = Option("--no-compress-regex")
    warn_manifest_validation = Switch("--warn-manifest-validation")
    split = Repeated(
        "--split", doc="Split path and configurations, as path:config[,config]"
    )
    strip_debug_symbols = Switch("--strip-debug-symbols")
    exclude_configs = ListOption("--exclude-configs")
    debug_mode = Switch("--debug-mode")
    strict_visibility = Switch("--strict-visibility")
    exclude_sources = Switch("--exclude-sources")
    trace_folder = Option("--trace-folder")
    merge_only = Switch("--merge-only")
    inputs = CompiledInputs()

    def __init__(
        self, output_apk: Path, manifest: Path, inputs: list[Path] | None = None
    ):
        super().__init__()
        self.output_apk = output_apk
        self.output(output_apk)
        self.manifest(manifest)
        if inputs:
            self.inputs(inputs)

    @classmethod
    def from_compiled_res(
        cls, compiled_res: Path | None, output_apk: Path, manifest: Path
    ) -> Aapt2Link:
        """Link every .flat file found in a compiled resources directory."""
        link = cls(output_apk, manifest)
        if compiled_res is not None:
            link.inputs([compiled_res])
        return link

    def _missing_compiled_res(self) -> Path | None:
        for item in self.get("inputs", ()):
            path = Path(item)
            if path.is_dir() and not flat_files(path):
                return path
            if not path.is_dir() and not path.exists():
                return path
        return None

    def run(self, env: ToolEnvironment | None = None, *, stream: bool = False) -> Path:
        """Link and return the output APK path.

        Raises:
            CompiledResourcesNotFoundError: If an input directory holds no .flat
                files or an input file does not exist.
        """
        if (missing := self._missing_compiled_res()) is not None:
            raise CompiledResourcesNotFoundError(missing)
        self.execute(env, stream=stream)
        return self.output_apk
