"""`apksigner`: sign APKs and check their signatures.

https://developer.android.com/studio/command-line/apksigner
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from android_tools.core.builder import CommandBuilder, Option, Positional, Switch
from android_tools.models.environment import ToolEnvironment
from android_tools.models.keystore import Key
from android_tools.utils.android_sdk import get_apksigner


class Toggle(Option):
    """Option whose value is rendered as `true` / `false`."""

    def render(self, value: Any) -> list[str]:
        return self._format("true" if value else "false")


class ApkSignerCommand(CommandBuilder):
    """Options shared by `apksigner sign` and `apksigner verify`."""

    tool: ClassVar[str] = "apksigner"

    min_sdk_version = Option(
        "--min-sdk-version", doc="Lowest API level that the APK supports"
    )
    max_sdk_version = Option(
        "--max-sdk-version", doc="Highest API level that the APK supports"
    )
    v4_signing_enabled = Option(
        "--v4-signing-enabled", doc="V4SigningEnabled: true, false or only"
    )
    verbose = Switch("-v", doc="Use verbose output mode")
    werr = Switch("-Werr", doc="Treat warnings as errors")
    apk = Positional()

    def __init__(self, apk: Path):
        super().__init__()
        self.apk_path = apk
        self.apk(apk)

    def executable(self, env: ToolEnvironment) -> list[str]:
        return [str(get_apksigner(env))]


class ApkSignerSign(ApkSignerCommand):
    """`apksigner sign [options] APK`.

    Without `--out`, the APK is signed in place.
    """

    subcommand = ("sign",)

    out = Option("--out", doc="Where to save the signed APK")
    v1_signing_enabled = Toggle("--v1-signing-enabled")
    v2_signing_enabled = Toggle("--v2-signing-enabled")
    v3_signing_enabled = Toggle("--v3-signing-enabled")
    next_signer = Switch("--next-signer", doc="Start options for the next signer")
    v1_signer_name = Option(
        "--v1-signer-name", doc="Base name of the v1 signature files"
    )
    ks = Option("--ks", doc="Keystore containing the private key and certificate")
    ks_key_alias = Option(
        "--ks-key-alias", doc="Alias of the signing key in the keystore"
    )
    ks_pass = Option(
        "--ks-pass", doc="Keystore password: pass:<p>, env:<v>, file:<f> or stdin"
    )
    pass_encoding = Option("--pass-encoding", doc="Character encoding of the passwords")
    key_pass = Option("--key-pass", doc="Private key password, same forms as --ks-pass")
    ks_type = Option("--ks-type", doc="Type or algorithm of the keystore")
    ks_provider_name = Option("--ks-provider-name")
    ks_provider_class = Option("--ks-provider-class")
    ks_provider_arg = Option("--ks-provider-arg")
    key = Option("--key", doc="Private key file (PKCS #8, DER)")
    cert = Option("--cert", doc="Certificate chain file (X.509)")

    def signing_key(self, key: Key) -> ApkSignerSign:
        """Sign with the given key (store and key share one password)."""
        return (
            self.ks(key.keystore)
            .ks_key_alias(key.key_alias)
            .ks_pass(f"pass:{key.key_pass}")
            .key_pass(f"pass:{key.key_pass}")
        )

    def run(self, env: ToolEnvironment | None = None, *, stream: bool = False) -> Path:
        """Sign and return the signed APK (`--out`, else the input)."""
        self.execute(env, stream=stream)
        out = self.get("out")
        return Path(out) if out is not None else self.apk_path


class ApkSignerVerify(ApkSignerCommand):
    """`apksigner verify [options] APK`."""

    subcommand = ("verify",)

    print_certs = Switch("--print-certs", doc="Show the APK's signing certificates")
