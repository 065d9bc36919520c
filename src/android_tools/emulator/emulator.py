"""The Android Emulator command line.

https://developer.android.com/studio/run/emulator-commandline
"""

from typing import ClassVar

from android_tools.core.builder import (
    CommandBuilder,
    ListOption,
    Option,
    Switch,
    Template,
)
from android_tools.models.environment import ToolEnvironment
from android_tools.utils.android_sdk import get_emulator


class Emulator(CommandBuilder):
    """Start and control an Android Virtual Device (AVD).

    Usage:
        Emulator().avd("Pixel_6_API_33").no_snapshot_load().netspeed(Netspeed.LTE).run()

    Passing `-qemu` forwards every following argument to QEMU, so it always
    renders last.
    """

    tool: ClassVar[str] = "emulator"

    # AVD and system images
    list_avds = Switch("-list-avds", doc="List available AVDs")
    avd = Option("-avd", doc="Use a specific android virtual device")
    avd_arch = Option("-avd-arch", doc="Use a specific target architecture")
    sysdir = Option("-sysdir", doc="Search for system disk images in <dir>")
    system = Option("-system", doc="Read initial system image from <file>")
    vendor = Option("-vendor", doc="Read initial vendor image from <file>")
    writable_system = Switch(
        "-writable-system", doc="Make system & vendor image writable"
    )
    kernel = Option("-kernel", doc="Use specific emulated kernel")
    ramdisk = Option("-ramdisk", doc="Ramdisk image (default <system>/ramdisk.img)")
    image = Option("-image", doc="Obsolete, use -system <file> instead")
    read_only = Switch(
        "-read-only", doc="Allow running multiple instances of the same AVD"
    )
    force_32bit = Switch("-force-32bit", doc="Always use 32-bit emulator")

    # Data, cache and sdcard partitions
    datadir = Option("-datadir", doc="Write user data into <dir>")
    initdata = Option("-initdata", doc="Same as '-init-data <file>'")
    data = Option("-data", doc="Data image (default <datadir>/userdata-qemu.img)")
    encryption_key = Option("-encryption-key", doc="Read initial encryption key image")
    partition_size = Option("-partition-size", doc="System/data partition size in MBs")
    cache = Option("-cache", doc="Cache partition image (default is temporary file)")
    cache_size = Option("-cache-size", doc="Cache partition size in MBs")
    no_cache = Switch("-no-cache", doc="Disable the cache partition")
    nocache = Switch("-nocache", doc="Same as -no-cache")
    sdcard = Option("-sdcard", doc="SD card image (default <datadir>/sdcard.img)")
    wipe_data = Switch(
        "-wipe-data", doc="Reset the user data image (copy it from initdata)"
    )

    # Snapshots
    snapstorage = Option("-snapstorage", doc="File that contains all state snapshots")
    no_snapstorage = Switch(
        "-no-snapstorage", doc="Do not mount a snapshot storage file"
    )
    snapshot = Option("-snapshot", doc="Name of snapshot within storage file")
    no_snapshot = Switch("-no-snapshot", doc="Perform a full boot and do not auto-save")
    no_snapshot_save = Switch(
        "-no-snapshot-save", doc="Do not auto-save to snapshot on exit"
    )
    no_snapshot_load = Switch(
        "-no-snapshot-load", doc="Do not auto-start from snapshot"
    )
    snapshot_list = Switch("-snapshot-list", doc="Show a list of available snapshots")
    no_snapshot_update_time = Switch("-no-snapshot-update-time")
    check_snapshot_loadable = Option(
        "-check-snapshot-loadable", doc="Check if a snapshot is loadable"
    )
    quit_after_boot = Option("-quit-after-boot", doc="Quit emulator after guest boots")

    # Skin and display
    skindir = Option("-skindir", doc="Search skins in <dir> (default <system>/skins)")
    skin = Option("-skin", doc="Select a given skin")
    no_skin = Switch("-no-skin", doc="Deprecated: create an AVD with no skin instead")
    noskin = Switch("-noskin", doc="Same as -no-skin")
    dpi_device = Option("-dpi-device", doc="Specify device's resolution in dpi")
    scale = Option("-scale", doc="Scale emulator window (deprecated)")
    fixed_scale = Switch(
        "-fixed-scale", doc="Use fixed 1:1 scale for the initial window"
    )
    window_size = Option("-window-size", doc="Set window size for when bootup finishes")
    no_hidpi_scaling = Switch("-no-hidpi-scaling")
    no_mouse_reposition = Switch("-no-mouse-reposition")
    onion = Option("-onion", doc="Use overlay image over screen")
    onion_alpha = Option("-onion-alpha", doc="Specify onion-skin translucency")
    onion_rotation = Option("-onion-rotation", doc="Specify onion-skin rotation (0-3)")
    multidisplay = Option(
        "-multidisplay", doc="index,x,y,w,h,dpi,flags of a secondary display"
    )
    no_window = Switch("-no-window", doc="Disable graphical window display")
    qt_hide_window = Switch(
        "-qt-hide-window", doc="Start QT window but hide window display"
    )
    no_boot_anim = Switch("-no-boot-anim", doc="Disable animation for faster boot")
    screen = Option("-screen", doc="ScreenMode: touch, multi-touch or no-touch")

    # Hardware
    memory = Option("-memory", doc="Physical RAM size in MBs")
    ui_only = Option("-ui-only", doc="Run only the UI feature requested")
    id = Option(
        "-id", doc="Assign an id to this virtual device (separate from the AVD name)"
    )
    cores = Option("-cores", doc="Set number of CPU cores to emulator")
    accel = Option("-accel", doc="AccelMode: auto, off or on")
    no_accel = Switch("-no-accel", doc="Same as '-accel off'")
    ranchu = Switch(
        "-ranchu", doc="Use new emulator backend instead of the classic one"
    )
    engine = Option("-engine", doc="Engine: auto, classic or qemu2")
    gpu = Option("-gpu", doc="Set hardware OpenGLES emulation mode")
    use_host_vulkan = Switch("-use-host-vulkan", doc="Use host for vulkan emulation")
    guest_angle = Switch("-guest-angle", doc="Enable guest ANGLE as the system driver")
    camera_back = Option("-camera-back", doc="CameraMode of the back camera")
    camera_front = Option("-camera-front", doc="CameraMode of the front camera")
    webcam_list = Switch("-webcam-list", doc="List web cameras available for emulation")
    virtualscene_poster = Option(
        "-virtualscene-poster", doc="Load a png or jpeg image as a poster: name=path"
    )
    legacy_fake_camera = Switch("-legacy-fake-camera")
    no_camera_hq_edge = Switch("-no-camera-hq-edge")
    lowram = Switch("-lowram", doc="Device is a low ram device")
    no_sim = Switch("-no-sim", doc="Device has no SIM card")
    sim_access_rules_file = Option("-sim-access-rules-file")
    phone_number = Option("-phone-number", doc="Sets the phone number of the device")
    acpi_config = Option(
        "-acpi-config", doc="Specify acpi device properties (hierarchical)"
    )
    feature = Option("-feature", doc="Force feature flags on or off")
    icc_profile = Option("-icc-profile", doc="Use ICC profile for screen colors")
    fuchsia = Switch("-fuchsia", doc="Run Fuchsia image")
    selinux = Option("-selinux", doc="SELinux: disabled or permissive")
    prop = Option("-prop", doc="Set system property on boot: name=value")
    charmap = Option("-charmap", doc="Use specific key character map")

    # Audio, GPS and sensors
    no_audio = Switch("-no-audio", doc="Disable audio support")
    noaudio = Switch("-noaudio", doc="Same as -no-audio")
    audio = Option("-audio", doc="Use specific audio backend")
    allow_host_audio = Switch(
        "-allow-host-audio", doc="Allow sending of audio from host"
    )
    no_passive_gps = Switch("-no-passive-gps", doc="Disable passive gps updates")
    gnss_file_path = Option(
        "-gnss-file-path", doc="Use specified filepath to read gnss data"
    )
    gnss_grpc_port = Option(
        "-gnss-grpc-port", doc="Use measurements from gRPC endpoint"
    )
    gps = Option("-gps", doc="Redirect NMEA GPS to character device")
    no_location_ui = Switch(
        "-no-location-ui", doc="Disable the location UI in the extended window"
    )
    google_maps_key = Option(
        "-google-maps-key", doc="API key to use with the Google Maps GUI"
    )

    # Network and ports
    netspeed = Option(
        "-netspeed", doc="Netspeed: maximum network download/upload speeds"
    )
    netdelay = Option("-netdelay", doc="Netdelay: network latency emulation")
    netfast = Switch("-netfast", doc="Disable network shaping")
    port = Option("-port", doc="TCP port that will be used for the console")
    ports = ListOption("-ports", doc="Console port and adb port, comma-joined")
    http_proxy = Option(
        "-http-proxy", doc="Make TCP connections through a HTTP/HTTPS proxy"
    )
    dns_server = Option(
        "-dns-server", doc="Use this DNS server(s) in the emulated system"
    )
    net_tap = Option("-net-tap", doc="Use this TAP interface for networking")
    net_tap_script_up = Option(
        "-net-tap-script-up", doc="Script to run when the TAP is up"
    )
    net_tap_script_down = Option(
        "-net-tap-script-down", doc="Script to run when the TAP is down"
    )
    wifi_client_port = Option(
        "-wifi-client-port", doc="Connect to other emulator for WiFi"
    )
    wifi_server_port = Option(
        "-wifi-server-port", doc="Listen to other emulator for WiFi"
    )
    shared_net_id = Option(
        "-shared-net-id", doc="Join the shared network with this number"
    )
    tcpdump = Option("-tcpdump", doc="Capture network packets to file")
    radio = Option("-radio", doc="Redirect radio modem interface to character device")
    unix_pipe = Option("-unix-pipe", doc="Add <path> to the list of allowed Unix pipes")

    # Locale
    timezone = Option(
        "-timezone", doc="Use this timezone instead of the host's default"
    )
    change_language = Option("-change-language", doc="Change language of the device")
    change_country = Option("-change-country", doc="Change country of the device")
    change_locale = Option("-change-locale", doc="Change locale of the device")

    # Boot, adb and debugging
    delay_adb = Switch("-delay-adb", doc="Delay adb communication till boot completes")
    monitor_adb = Switch(
        "-monitor-adb", doc="Monitor the adb messages between emulator and guest"
    )
    no_direct_adb = Switch(
        "-no-direct-adb", doc="Use external adb executable for adb actions"
    )
    skip_adb_auth = Switch("-skip-adb-auth", doc="Skip adb authentication dialogue")
    logcat = Option("-logcat", doc="Enable logcat output with given tags")
    logcat_output = Option(
        "-logcat-output", doc="Output file of logcat (default stdout)"
    )
    show_kernel = Switch("-show-kernel", doc="Display kernel messages")
    shell = Switch("-shell", doc="Enable root shell on current terminal")
    shell_serial = Option(
        "-shell-serial", doc="Specific character device for root shell"
    )
    no_jni = Switch("-no-jni", doc="Disable JNI checks in the Dalvik runtime")
    nojni = Switch("-nojni", doc="Same as -no-jni")
    dalvik_vm_checkjni = Switch("-dalvik-vm-checkjni", doc="Enable dalvik.vm.checkjni")
    code_profile = Option("-code-profile", doc="Enable code profiling")
    cpu_delay = Option("-cpu-delay", doc="Throttle CPU emulation")
    bootchart = Option("-bootchart", doc="Enable bootcharting")
    qemu_top_dir = Option("-qemu-top-dir", doc="Use the emulator in the specified dir")
    virtio_console = Switch("-virtio-console", doc="Using virtio console as console")
    is_restart = Option("-is-restart", doc="Specifies that this emulator was a restart")
    report_console = Option(
        "-report-console", doc="Report console port to remote socket"
    )
    studio_params = Option(
        "-studio-params", doc="Used by Android Studio to provide parameters"
    )
    wait_for_debugger = Switch(
        "-wait-for-debugger", doc="Pause on launch and wait for a debugger"
    )
    detect_image_hang = Switch(
        "-detect-image-hang", doc="Enable detection of guest hangs"
    )
    restart_when_stalled = Switch(
        "-restart-when-stalled", doc="Restart the guest when stalled"
    )
    perf_stat = Option(
        "-perf-stat", doc="Run periodic perf stat reporter in the background"
    )
    share_vid = Switch(
        "-share-vid", doc="Share current video state in shared memory region"
    )
    use_keycode_forwarding = Switch("-use-keycode-forwarding")
    record_session = Option(
        "-record-session", doc="Screen record the session: file,delay"
    )
    verbose = Switch("-verbose", doc="Same as '-debug-init'")
    debug = ListOption("-debug", doc="Enable/disable debug messages for DebugTags")
    debug_no = Template("-debug-no-{}", doc="Disable debug messages for one DebugTag")

    # Metrics and gRPC
    metrics_to_console = Switch(
        "-metrics-to-console", doc="Enable usage metrics, print to console"
    )
    metrics_collection = Switch(
        "-metrics-collection", doc="Enable usage metrics and send them"
    )
    metrics_to_file = Option(
        "-metrics-to-file", doc="Enable usage metrics, write to <file>"
    )
    grpc = Option("-grpc", doc="TCP ports used for the gRPC bridge")
    grpc_tls_key = Option("-grpc-tls-key", doc="File with the private key used for TLS")
    grpc_tls_cer = Option("-grpc-tls-cer", doc="File with the public X509 certificate")
    grpc_tls_ca = Option("-grpc-tls-ca", doc="File with the Certificate Authorities")
    grpc_use_token = Switch("-grpc-use-token", doc="Require a token for gRPC calls")
    idle_grpc_timeout = Option(
        "-idle-grpc-timeout",
        doc="Terminate after this many seconds without gRPC activity",
    )
    waterfall = Option("-waterfall", doc="Mode in which to run waterfall")

    # Help topics
    version = Switch("-version", doc="Display emulator version number")
    help = Switch("-help", doc="Print this help")
    help_disk_images = Switch("-help-disk-images", doc="About disk images")
    help_debug_tags = Switch("-help-debug-tags", doc="About '-debug <tags>'")
    help_char_devices = Switch(
        "-help-char-devices", doc="About character device specifications"
    )
    help_environment = Switch("-help-environment", doc="About environment variables")
    help_virtual_device = Switch(
        "-help-virtual-device", doc="About virtual device management"
    )
    help_sdk_images = Switch(
        "-help-sdk-images", doc="About disk images when using the SDK"
    )
    help_build_images = Switch(
        "-help-build-images", doc="About disk images when building Android"
    )
    help_all = Switch("-help-all", doc="Prints all help content")

    qemu = Switch(
        "-qemu", position="trailing", doc="Pass the remaining arguments to QEMU"
    )

    def executable(self, env: ToolEnvironment) -> list[str]:
        return [str(get_emulator(env))]
