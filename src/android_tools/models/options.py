"""Enumerated option values accepted by the wrapped Android tools."""

from enum import StrEnum


class InstallLocation(StrEnum):
    """Package manager install location (`pm install --install-location`)."""

    AUTO = "0"
    """Let the system decide the best location."""

    INTERNAL = "1"
    """Install on internal device storage."""

    EXTERNAL = "2"
    """Install on external media."""


class ScreenCompatibilityMode(StrEnum):
    """`am screen-compat` mode."""

    ON = "on"
    OFF = "off"


class Aapt2DumpSubcommand(StrEnum):
    """Subcommands of `aapt2 dump`."""

    APC = "apc"
    BADGING = "badging"
    CONFIGURATIONS = "configurations"
    OVERLAYABLE = "overlayable"
    PACKAGENAME = "packagename"
    PERMISSIONS = "permissions"
    STRINGS = "strings"
    STYLEPARENTS = "styleparents"
    RESOURCES = "resources"
    XMLSTRINGS = "xmlstrings"
    XMLTREE = "xmltree"


class Aapt2OutputFormat(StrEnum):
    """Container format produced by `aapt2 convert`."""

    PROTO = "proto"
    BINARY = "binary"


class BuildApksMode(StrEnum):
    """`bundletool build-apks --mode` values."""

    DEFAULT = "default"
    UNIVERSAL = "universal"
    SYSTEM = "system"
    SYSTEM_COMPRESSED = "system_compressed"
    PERSISTENT = "persistent"
    INSTANT = "instant"
    ARCHIVE = "archive"


class V4SigningEnabled(StrEnum):
    """apksigner APK Signature Scheme v4 setting."""

    FALSE = "false"
    TRUE = "true"
    ONLY = "only"


class StoreType(StrEnum):
    """keytool keystore types."""

    JKS = "JKS"
    JCEKS = "JCEKS"
    PKCS12 = "PKCS12"
    PKCS12S2 = "PKCS12S2"
    JCERACFKS = "JCERACFKS"


class KeyAlgorithm(StrEnum):
    """keytool `-keyalg` values."""

    RSA = "RSA"
    DSA = "DSA"
    EC = "EC"
    DES = "DES"
    DESEDE = "DESede"


class SELinux(StrEnum):
    """Emulator SELinux mode."""

    DISABLED = "disabled"
    PERMISSIVE = "permissive"


class Engine(StrEnum):
    """Emulator engine."""

    AUTO = "auto"
    CLASSIC = "classic"
    QEMU2 = "qemu2"


class Netspeed(StrEnum):
    """Named emulator network speeds. Numeric speeds are passed as plain strings."""

    GSM = "gsm"
    HSCSD = "hscsd"
    GPRS = "gprs"
    EDGE = "edge"
    UMTS = "umts"
    HSDPA = "hsdpa"
    LTE = "lte"
    EVDO = "evdo"
    FULL = "full"


class Netdelay(StrEnum):
    """Named emulator network latencies. Numeric delays are passed as plain strings."""

    GSM = "gsm"
    HSCSD = "hscsd"
    GPRS = "gprs"
    EDGE = "edge"
    UMTS = "umts"
    HSDPA = "hsdpa"
    LTE = "lte"
    EVDO = "evdo"
    NONE = "none"


class CameraMode(StrEnum):
    EMULATED = "emulated"
    NONE = "none"
    WEBCAM = "webcam0"


class ScreenMode(StrEnum):
    TOUCH = "touch"
    MULTI_TOUCH = "multi-touch"
    NO_TOUCH = "no-touch"


class AccelMode(StrEnum):
    AUTO = "auto"
    OFF = "off"
    ON = "on"


class DebugTag(StrEnum):
    """Emulator `-debug` / `-debug-no-<tag>` tags."""

    INIT = "init"
    CONSOLE = "console"
    MODEM = "modem"
    RADIO = "radio"
    KEYS = "keys"
    EVENTS = "events"
    SLIRP = "slirp"
    TIMEZONE = "timezone"
    SOCKET = "socket"
    PROXY = "proxy"
    AUDIO = "audio"
    AUDIOIN = "audioin"
    AUDIOOUT = "audioout"
    SURFACE = "surface"
    QEMUD = "qemud"
    GPS = "gps"
    NAND_LIMITS = "nand_limits"
    HW_CONTROL = "hw_control"
    AVD_CONFIG = "avd_config"
    SENSORS = "sensors"
    MEMCHECK = "memcheck"
    CAMERA = "camera"
    ADEVICE = "adevice"
    SENSORS_PORT = "sensors_port"
    MTPORT = "mtport"
    MTSCREEN = "mtscreen"
    GLES = "gles"
    GLES1EMU = "gles1emu"
    ADBSERVER = "adbserver"
    ADBCLIENT = "adbclient"
    ADB = "adb"
    ASCONNECTOR = "asconnector"
    ASYNCSOCKET = "asyncsocket"
    SDKCTLSOCKET = "sdkctlsocket"
    UPDATER = "updater"
    METRICS = "metrics"
    ROTATION = "rotation"
    GOLDFISHSYNC = "goldfishsync"
    SYNCTHREADS = "syncthreads"
    MEMORY = "memory"
    CAR = "car"
    RECORD = "record"
    SNAPSHOT = "snapshot"
    VIRTUALSCENE = "virtualscene"
    AUTOMATION = "automation"
    OFFWORLD = "offworld"
    VIDEOINJECTION = "videoinjection"
    FOLDABLE = "foldable"
    CURL = "curl"
    CAR_ROTARY = "car_rotary"
    WIFI = "wifi"
    TVREMOTE = "tvremote"
    TIME = "time"
    INI = "ini"
    ALL = "all"
