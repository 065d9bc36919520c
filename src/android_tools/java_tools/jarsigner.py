"""`jarsigner`: sign and verify JAR, APK and AAB files."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from android_tools.core.builder import (
    CommandBuilder,
    ListOption,
    Option,
    Positional,
    Switch,
)
from android_tools.models.environment import ToolEnvironment
from android_tools.models.keystore import Key
from android_tools.utils.android_sdk import get_jarsigner


class JarSigner(CommandBuilder):
    """Sign (or with `-verify`, check) a JAR with the key stored under `alias`.

    App bundles must be signed with jarsigner; apksigner only handles APKs.
    """

    tool: ClassVar[str] = "jarsigner"

    verify = Switch("-verify", position="leading", doc="Verify a signed JAR file")
    jar_file = Positional(position="leading")
    alias = Positional(position="leading")

    keystore = Option("-keystore", doc="Keystore location")
    storepass = Option("-storepass", doc="Password for keystore integrity")
    storetype = Option("-storetype", doc="StoreType of the keystore")
    keypass = Option("-keypass", doc="Password for private key (if different)")
    certchain = Option("-certchain", doc="Name of alternative certchain file")
    sigfile = Option("-sigfile", doc="Name of .SF/.DSA file")
    signedjar = Option("-signedjar", doc="Name of signed JAR file")
    digestalg = Option("-digestalg", doc="Name of digest algorithm")
    sigalg = Option("-sigalg", doc="Name of signature algorithm")
    verbose = Switch("-verbose", doc="Verbose output when signing/verifying")
    certs = Switch("-certs", doc="Display certificates when verbose and verifying")
    rev_check = Switch("-revCheck", doc="Enable certificate revocation check")
    tsa = Option("-tsa", doc="Location of the Timestamping Authority")
    tsacert = Option(
        "-tsacert", doc="Public key certificate for the Timestamping Authority"
    )
    tsapolicyid = Option("-tsapolicyid", doc="TSAPolicyID for Timestamping Authority")
    tsadigestalg = Option(
        "-tsadigestalg", doc="Algorithm of digest data in timestamping request"
    )
    altsigner = Option(
        "-altsigner", doc="Class name of an alternative signing mechanism"
    )
    altsignerpath = ListOption(
        "-altsignerpath", doc="Location of the alternative signer"
    )
    internalsf = Switch(
        "-internalsf", doc="Include the .SF file inside the signature block"
    )
    sectionsonly = Switch("-sectionsonly", doc="Don't compute hash of entire manifest")
    protected = Switch("-protected", doc="Keystore has protected authentication path")
    provider_name = Option("-providerName", doc="Provider name")
    addprovider = Option(
        "-addprovider", doc="Add security provider by name (e.g. SunPKCS11)"
    )
    provider_class = Option(
        "-providerClass", doc="Add security provider by fully-qualified class name"
    )
    provider_arg = Option(
        "-providerArg", doc="Configure argument for -addprovider/-providerClass"
    )
    strict = Switch("-strict", doc="Treat warnings as errors")
    conf = Option("-conf", doc="Specify a pre-configured options file")
    help = Switch("-help", doc="Print this help message")

    def __init__(self, jar_file: Path, alias: str):
        super().__init__()
        self.jar_path = jar_file
        self.jar_file(jar_file)
        self.alias(alias)

    def executable(self, env: ToolEnvironment) -> list[str]:
        return [str(get_jarsigner(env))]

    @classmethod
    def with_key(cls, jar_file: Path, key: Key) -> JarSigner:
        """Sign `jar_file` with a keystore Key (store and key share one password)."""
        return (
            cls(jar_file, key.key_alias)
            .keystore(key.keystore)
            .storepass(key.key_pass)
            .keypass(key.key_pass)
        )

    def run(self, env: ToolEnvironment | None = None, *, stream: bool = False) -> Path:
        """Sign and return the JAR: `-signedjar` if set, else the input."""
        self.execute(env, stream=stream)
        signed = self.get("signedjar")
        return Path(signed) if signed is not None else self.jar_path
