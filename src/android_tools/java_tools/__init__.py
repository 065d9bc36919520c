"""JDK and build-tools utilities for keystores and signing."""

from pathlib import Path

from android_tools.java_tools.apksigner import (
    ApkSignerCommand,
    ApkSignerSign,
    ApkSignerVerify,
)
from android_tools.java_tools.jarsigner import JarSigner
from android_tools.java_tools.keytool import Keytool, gen_key
from android_tools.models.keystore import AabKey, Key


class JavaTools:
    """Entry point for keystore and signing builders."""

    def jarsigner(self, jar_file: Path, alias: str) -> JarSigner:
        """Sign a JAR file. Works for APK and AAB files too."""
        return JarSigner(jar_file, alias)

    def keytool(self) -> Keytool:
        return Keytool()

    def apksigner_sign(self, apk: Path) -> ApkSignerSign:
        return ApkSignerSign(apk)

    def apksigner_verify(self, apk: Path) -> ApkSignerVerify:
        return ApkSignerVerify(apk)


__all__ = [
    "AabKey",
    "ApkSignerCommand",
    "ApkSignerSign",
    "ApkSignerVerify",
    "JarSigner",
    "JavaTools",
    "Key",
    "Keytool",
    "gen_key",
]
