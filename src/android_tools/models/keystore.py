"""Pydantic model for signing keys."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pydantic import BaseModel

from android_tools.models.environment import ToolEnvironment
from android_tools.utils.android_sdk import android_dir

DEFAULT_KEYSTORE_NAME: Final[str] = "aab.keystore"
DEFAULT_KEY_PASS: Final[str] = "android"
DEFAULT_KEY_ALIAS: Final[str] = "androidaabkey"


class Key(BaseModel):
    """A keystore plus the credentials needed to sign with it."""

    key_path: Path
    """Keystore file, or a directory to hold aab.keystore."""

    key_pass: str = DEFAULT_KEY_PASS
    """Password used for both the store and the key."""

    key_alias: str = DEFAULT_KEY_ALIAS

    @classmethod
    def default(cls, env: ToolEnvironment | None = None) -> Key:
        """The debug key: ~/.android/aab.keystore, password "android".

        Creates ~/.android if it does not exist yet.
        """
        return cls(key_path=android_dir(env) / DEFAULT_KEYSTORE_NAME)

    @property
    def keystore(self) -> Path:
        """The keystore file, resolving a directory to <dir>/aab.keystore."""
        if self.key_path.is_dir():
            return self.key_path / DEFAULT_KEYSTORE_NAME
        return self.key_path


AabKey = Key
