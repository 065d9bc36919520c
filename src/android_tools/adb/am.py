"""`adb shell am`: activity manager commands."""

from android_tools.adb.base import AdbCommand
from android_tools.core.builder import Option, Pairs, Positional, Switch


class AdbShellAm(AdbCommand):
    """Call the activity manager (am) on the device.

    Renders as `adb shell am <command> [options] [arguments]`: pick one command
    switch, any options, then the command's arguments (package, intent, file).
    """

    subcommand = ("shell", "am")

    start = Switch("start", doc="Start an Activity specified by intent")
    startservice = Switch("startservice", doc="Start the Service specified by intent")
    force_stop = Switch(
        "force-stop", doc="Force stop everything associated with a package"
    )
    kill = Switch("kill", doc="Kill all processes of a package that are safe to kill")
    kill_all = Switch("kill-all", doc="Kill all background processes")
    broadcast = Switch("broadcast", doc="Issue a broadcast intent")
    instrument = Switch(
        "instrument", doc="Start monitoring with an Instrumentation instance"
    )
    profile_start = Switch("profile", "start", doc="Start profiler on a process")
    profile_stop = Switch("profile", "stop", doc="Stop profiler on a process")
    dumpheap = Switch("dumpheap", doc="Dump the heap of a process to a file")
    set_debug_app = Switch("set-debug-app", doc="Set an app package to debug")
    clear_debug_app = Switch("clear-debug-app", doc="Clear the debug package")
    monitor = Switch("monitor", doc="Start monitoring for crashes or ANRs")
    screen_compat = Option(
        "screen-compat", doc="Control screen compatibility mode (on/off)"
    )
    display_size = Option(
        "display-size", doc="Override device display size (WxH or reset)"
    )
    display_density = Option("display-density", doc="Override device display density")
    to_uri = Switch("to-uri", doc="Print the intent specification as a URI")
    to_intent_uri = Switch("to-intent-uri", doc="Print the intent as an intent: URI")

    debugging = Switch("-D", doc="Enable debugging")
    wait = Switch("-W", doc="Wait for launch to complete")
    start_profiler = Option(
        "--start-profiler", doc="Start profiler and send results to file"
    )
    profiler = Option(
        "-P", doc="Like --start-profiler, but stops when the app goes idle"
    )
    repeat = Option("-R", doc="Repeat the activity launch count times")
    force_stop_first = Switch("-S", doc="Force stop the target app before starting")
    opengl_trace = Switch("--opengl-trace", doc="Enable tracing of OpenGL functions")
    persistent = Switch("--persistent", doc="Retain the debug app setting")
    gdb = Switch("--gdb", doc="Start gdbserv on the given port at crash/ANR")
    no_window_animation = Switch("--no-window-animation")
    user = Option("--user", doc="User to run as; defaults to the current user")
    arguments = Positional(doc="Command arguments: package, intent, process or file")


class AdbShellAmStart(AdbCommand):
    """`adb shell am start [options] INTENT`."""

    subcommand = ("shell", "am", "start")

    debugging = Switch("-D", doc="Enable debugging")
    wait = Switch("-W", doc="Wait for launch to complete")
    start_profiler = Option(
        "--start-profiler", doc="Start profiler and send results to file"
    )
    profiler = Option(
        "-P", doc="Like --start-profiler, but stops when the app goes idle"
    )
    repeat = Option("-R", doc="Repeat the activity launch count times")
    force_stop = Switch(
        "-S", doc="Force stop the target app before starting the activity"
    )
    opengl_trace = Switch("--opengl-trace", doc="Enable tracing of OpenGL functions")
    user = Option("--user", doc="User to run as; defaults to the current user")
    action = Option("-a", doc="Intent action")
    data_uri = Option("-d", doc="Intent data URI")
    mime_type = Option("-t", doc="Intent MIME type")
    category = Option("-c", doc="Intent category")
    component = Option("-n", doc="Component name with package prefix (pkg/.Activity)")
    extras = Pairs("--es", doc="String extras as key/value pairs")
    intent = Positional(doc="Raw intent arguments or URI")

    def __init__(self, component: str | None = None):
        super().__init__()
        if component is not None:
            self.component(component)


class AdbShellAmInstrument(AdbCommand):
    """`adb shell am instrument [options] COMPONENT`."""

    subcommand = ("shell", "am", "instrument")

    raw = Switch("-r", doc="Print raw results")
    extras = Pairs("-e", doc="Instrumentation arguments as name/value pairs")
    profile = Option("-p", doc="Write profiling data to file")
    wait = Switch("-w", doc="Wait for instrumentation to finish before returning")
    no_window_animation = Switch("--no-window-animation")
    user = Option("--user", doc="User to run instrumentation in")
    component = Positional(doc="Test package/runner class")

    def __init__(self, component: str | None = None):
        super().__init__()
        if component is not None:
            self.component(component)


class AdbShellAmSetDebugApp(AdbCommand):
    """`adb shell am set-debug-app [-w] [--persistent] PACKAGE`."""

    subcommand = ("shell", "am", "set-debug-app")

    wait = Switch("-w", doc="Wait for debugger when the app starts")
    persistent = Switch("--persistent", doc="Retain this value")
    package = Positional()

    def __init__(self, package: str | None = None):
        super().__init__()
        if package is not None:
            self.package(package)
