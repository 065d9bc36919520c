"""`keytool`: key and certificate management."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from android_tools.core.builder import CommandBuilder, ListOption, Option, Switch
from android_tools.models.environment import ToolEnvironment
from android_tools.models.keystore import AabKey, Key
from android_tools.models.options import KeyAlgorithm
from android_tools.utils.android_sdk import get_keytool

DEBUG_DNAME = ["CN=Android Debug", "O=Android", "C=US"]
DEBUG_KEY_SIZE = 2048
DEBUG_VALIDITY_DAYS = 10000


class Keytool(CommandBuilder):
    """Manage keystores: generate key pairs, import and export certificates.

    Pick one command switch (`genkeypair`, `list`, ...); commands render first,
    then options in table order.
    """

    tool: ClassVar[str] = "keytool"

    gencert = Switch(
        "-gencert", position="leading", doc="Generate certificate from a request"
    )
    genkey = Switch("-genkey", position="leading", doc="Old name of -genkeypair")
    genkeypair = Switch("-genkeypair", position="leading", doc="Generate a key pair")
    genseckey = Switch("-genseckey", position="leading", doc="Generate a secret key")
    importcert = Switch("-importcert", position="leading", doc="Import certificate(s)")
    importpass = Switch("-importpass", position="leading", doc="Import a password")
    importkeystore = Switch(
        "-importkeystore",
        position="leading",
        doc="Import entries from another keystore",
    )
    printcertreq = Switch(
        "-printcertreq",
        position="leading",
        doc="Print the content of a certificate request",
    )
    certreq = Switch(
        "-certreq", position="leading", doc="Generate a certificate request"
    )
    exportcert = Switch("-exportcert", position="leading", doc="Export a certificate")
    list = Switch("-list", position="leading", doc="List entries in a keystore")
    printcert = Switch(
        "-printcert", position="leading", doc="Print the content of a certificate"
    )
    printcrl = Switch(
        "-printcrl", position="leading", doc="Print the content of a CRL file"
    )
    storepasswd = Switch(
        "-storepasswd",
        position="leading",
        doc="Change the store password of a keystore",
    )
    keypasswd = Switch(
        "-keypasswd", position="leading", doc="Change the password of an entry"
    )
    delete = Switch(
        "-delete", position="leading", doc="Delete an entry from a keystore"
    )
    changealias = Switch(
        "-changealias", position="leading", doc="Change an entry's alias"
    )
    help = Switch("-help", position="leading")

    verbose = Switch("-v", doc="Verbose output")
    keystore = Option("-keystore", doc="Keystore name")
    alias = Option("-alias", doc="Alias name of the entry to process")
    keypass = Option("-keypass", doc="Key password")
    storepass = Option("-storepass", doc="Keystore password")
    dname = ListOption("-dname", doc="Distinguished name components, comma-joined")
    storetype = Option("-storetype", doc="StoreType of the keystore")
    keyalg = Option("-keyalg", doc="KeyAlgorithm of the key")
    providername = Option("-providername", doc="Provider name")
    providerclass = Option("-providerclass", doc="Add security provider by class name")
    providerarg = Option("-providerarg", doc="Configure argument for -providerclass")
    protected = Switch("-protected", doc="Password through protected mechanism")
    ext = Option("-ext", doc="X.509 extension")
    keysize = Option("-keysize", doc="Key bit size")
    validity = Option("-validity", doc="Validity number of days")
    file = Option("-file", doc="Input or output file name")
    jarfile = Option("-jarfile", doc="Signed jar file")
    new = Option("-new", doc="New password")
    sslserver = Option("-sslserver", doc="SSL server host and port")
    destalias = Option("-destalias", doc="Destination alias")
    rfc = Switch("-rfc", doc="Output in RFC style")
    providerpath = ListOption("-providerpath", doc="Provider classpath, comma-joined")

    def executable(self, env: ToolEnvironment) -> list[str]:
        return [str(get_keytool(env))]

    def run(
        self, env: ToolEnvironment | None = None, *, stream: bool = False
    ) -> Key | None:
        """Run keytool and return the key it operated on.

        Starts from the debug key and applies the configured keystore, alias
        and key password. `-help` operates on no key and returns None.
        """
        if self.get("help"):
            self.execute(env, stream=stream)
            return None

        keystore = self.get("keystore")
        key = Key(key_path=Path(keystore)) if keystore else Key.default(env)
        if alias := self.get("alias"):
            key = key.model_copy(update={"key_alias": alias})
        if keypass := self.get("keypass"):
            key = key.model_copy(update={"key_pass": keypass})

        self.execute(env, stream=stream)
        return key


def gen_key(key: Key | None = None, env: ToolEnvironment | None = None) -> Key:
    """Generate a debug signing key for app bundles.

    Creates an RSA 2048 key valid for 10000 days. When `key.key_path` is a
    directory the keystore is written to `<dir>/aab.keystore`. Store and key
    share the key's password.
    """
    key = key if key is not None else Key.default(env)
    keytool = (
        Keytool()
        .genkey()
        .verbose()
        .keystore(key.keystore)
        .alias(key.key_alias)
        .keypass(key.key_pass)
        .storepass(key.key_pass)
        .dname(DEBUG_DNAME)
        .keyalg(KeyAlgorithm.RSA)
        .keysize(DEBUG_KEY_SIZE)
        .validity(DEBUG_VALIDITY_DAYS)
    )
    keytool.execute(env)
    return key


__all__ = ["AabKey", "Key", "Keytool", "gen_key"]
