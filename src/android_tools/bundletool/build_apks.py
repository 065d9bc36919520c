"""`bundletool build-apks`: generate an APK set from an app bundle."""

from __future__ import annotations

from pathlib import Path

from android_tools.bundletool.base import BundletoolCommand
from android_tools.core.builder import Option, Switch
from android_tools.models.environment import ToolEnvironment
from android_tools.models.keystore import Key


class BuildApks(BundletoolCommand):
    """Generate an APK set for every device configuration the app supports.

    The output is a `.apks` archive. Without a keystore, bundletool signs the
    APKs with the debug key.
    """

    subcommand = ("build-apks",)

    bundle = Option("--bundle", equals=True, doc="Path to the app bundle (.aab)")
    output = Option("--output", equals=True, doc="Path of the output .apks file")
    overwrite = Switch("--overwrite", doc="Overwrite the output file if it exists")
    aapt2 = Option("--aapt2", equals=True, doc="Custom aapt2 binary to use")
    ks = Option("--ks", equals=True, doc="Keystore used to sign the APKs")
    ks_pass = Option(
        "--ks-pass",
        equals=True,
        doc="Keystore password, as pass:<password> or file:<path>",
    )
    ks_key_alias = Option("--ks-key-alias", equals=True, doc="Alias of the signing key")
    key_pass = Option(
        "--key-pass", equals=True, doc="Key password, as pass:<password> or file:<path>"
    )
    connected_device = Switch(
        "--connected-device", doc="Build APKs only for the connected device"
    )
    device_id = Option("--device-id", equals=True, doc="Serial of the target device")
    device_spec = Option("--device-spec", equals=True, doc="Device spec JSON file")
    mode = Option("--mode", equals=True, doc="BuildApksMode, e.g. universal")
    local_testing = Switch(
        "--local-testing", doc="Enable local testing of dynamic delivery"
    )

    def __init__(self, bundle: Path, output: Path):
        super().__init__()
        self.output_path = output
        self.bundle(bundle)
        self.output(output)

    def signing_key(self, key: Key) -> BuildApks:
        """Sign with the given key (store and key share one password)."""
        return (
            self.ks(key.keystore)
            .ks_pass(f"pass:{key.key_pass}")
            .ks_key_alias(key.key_alias)
            .key_pass(f"pass:{key.key_pass}")
        )

    def run(self, env: ToolEnvironment | None = None, *, stream: bool = False) -> Path:
        """Build the APK set and return its path."""
        self.execute(env, stream=stream)
        return self.output_path
