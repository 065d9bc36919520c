"""Declarative command-line builders.

A builder class lists its tool's flags as class attributes. Each attribute is
a Flag descriptor naming the flag token(s), the kind of value it takes and
where in the argument vector it is emitted:

    class AdbPull(AdbCommand):
        subcommand = ("pull",)

        preserve = Switch("-a")
        compression = Option("-z")
        paths = Positional()

Accessing a flag on an instance returns a chainable setter, so builders read
fluently: ``AdbPull().preserve().paths(["/sdcard/a.txt", "out/"]).run()``.

Rendering order is fixed by the table, never by the order setters were
called: leading flags, then the subcommand words, then options in
declaration order (base classes first), then trailing positionals.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, ClassVar, Literal

from android_tools.models.environment import ToolEnvironment
from android_tools.utils.process import CommandSpec, ProcessResult, run_tool

Position = Literal["leading", "option", "trailing"]


class Flag:
    """Base descriptor: one entry of a builder's flag table."""

    position: Position = "option"

    def __init__(self, *tokens: str, position: Position | None = None, doc: str = ""):
        self.tokens = tokens
        if position is not None:
            self.position = position
        self.doc = doc
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(
        self, instance: CommandBuilder | None, owner: type
    ) -> Flag | Callable[..., Any]:
        if instance is None:
            return self
        return self.bind(instance)

    def bind(self, instance: CommandBuilder) -> Callable[..., Any]:
        def setter(value: Any) -> Any:
            instance._set(self.name, None if value is None else self.coerce(value))
            return instance

        setter.__name__ = self.name
        setter.__doc__ = self.doc or None
        return setter

    def coerce(self, value: Any) -> Any:
        return value

    def render(self, value: Any) -> list[str]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self.tokens)!r}, name={self.name!r})"


class Switch(Flag):
    """Boolean flag. Calling the setter without arguments turns it on."""

    def bind(self, instance: CommandBuilder) -> Callable[..., Any]:
        def setter(value: bool = True) -> Any:
            instance._set(self.name, bool(value))
            return instance

        setter.__name__ = self.name
        setter.__doc__ = self.doc or None
        return setter

    def render(self, value: bool) -> list[str]:
        return list(self.tokens) if value else []


class Option(Flag):
    """Flag followed by a single value.

    With ``equals=True`` the value is attached to the last token
    (``--output=out.apks``) instead of being a separate argument.
    """

    def __init__(
        self,
        *tokens: str,
        equals: bool = False,
        position: Position | None = None,
        doc: str = "",
    ):
        super().__init__(*tokens, position=position, doc=doc)
        self.equals = equals

    def _format(self, value: str) -> list[str]:
        if self.equals:
            return [*self.tokens[:-1], f"{self.tokens[-1]}={value}"]
        return [*self.tokens, value]

    def render(self, value: Any) -> list[str]:
        return self._format(str(value))


class ListOption(Option):
    """Flag followed by a sequence joined into one value (``--modules=a.zip,b.zip``)."""

    def __init__(
        self,
        *tokens: str,
        separator: str = ",",
        equals: bool = False,
        position: Position | None = None,
        doc: str = "",
    ):
        super().__init__(*tokens, equals=equals, position=position, doc=doc)
        self.separator = separator

    def coerce(self, value: Any) -> tuple[Any, ...]:
        return _as_tuple(value)

    def render(self, value: tuple[Any, ...]) -> list[str]:
        if not value:
            return []
        return self._format(self.separator.join(str(v) for v in value))


class Repeated(Flag):
    """Flag emitted once per item (``-I a.jar -I b.jar``)."""

    def coerce(self, value: Any) -> tuple[Any, ...]:
        return _as_tuple(value)

    def render(self, value: tuple[Any, ...]) -> list[str]:
        args: list[str] = []
        for item in value:
            args.extend([*self.tokens, str(item)])
        return args


class Pairs(Flag):
    """Flag followed by a key and a value, once per entry (``-e name value``)."""

    def coerce(self, value: Any) -> tuple[tuple[str, Any], ...]:
        items = value.items() if isinstance(value, Mapping) else value
        return tuple((str(k), v) for k, v in items)

    def render(self, value: tuple[tuple[str, Any], ...]) -> list[str]:
        args: list[str] = []
        for key, item in value:
            args.extend([*self.tokens, key, str(item)])
        return args


class Positional(Flag):
    """Bare value(s) with no flag token. Trailing by default."""

    position: Position = "trailing"

    def coerce(self, value: Any) -> tuple[Any, ...]:
        return _as_tuple(value)

    def render(self, value: tuple[Any, ...]) -> list[str]:
        return [*self.tokens, *(str(v) for v in value)] if value else []


class Template(Flag):
    """Value spliced into the flag itself (``-debug-no-{}``)."""

    def __init__(
        self, pattern: str, *, position: Position | None = None, doc: str = ""
    ):
        super().__init__(pattern, position=position, doc=doc)
        self.pattern = pattern

    def render(self, value: Any) -> list[str]:
        return [self.pattern.format(value)]


def _as_tuple(value: Any) -> tuple[Any, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return (value,)
    return tuple(value)


class CommandBuilder:
    """Base class for every tool builder.

    Subclasses set ``tool`` (used in diagnostics), optionally ``subcommand``,
    declare their flags, and implement ``executable`` to resolve the command
    prefix through the tool locator.
    """

    tool: ClassVar[str] = ""
    subcommand: tuple[str, ...] = ()
    flags: ClassVar[tuple[Flag, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        table: dict[str, Flag] = {}
        for klass in reversed(cls.__mro__):
            for attr in vars(klass).values():
                if isinstance(attr, Flag):
                    table[attr.name] = attr
        # Subclasses may redefine a flag; it keeps its original slot.
        cls.flags = tuple(table.values())

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> None:
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value currently configured for a flag."""
        return self._values.get(name, default)

    def args(self) -> list[str]:
        """Render the configured flags, without the executable."""
        rendered: dict[Position, list[str]] = {
            "leading": [],
            "option": [],
            "trailing": [],
        }
        for flag in self.flags:
            value = self._values.get(flag.name)
            if value is None:
                continue
            rendered[flag.position].extend(flag.render(value))
        return [
            *rendered["leading"],
            *self.subcommand,
            *rendered["option"],
            *rendered["trailing"],
        ]

    def executable(self, env: ToolEnvironment) -> list[str]:
        """Resolve the command prefix (executable and any fixed leading args)."""
        raise NotImplementedError

    def command(self, env: ToolEnvironment | None = None) -> CommandSpec:
        """Resolve the tool and render a CommandSpec."""
        env = env if env is not None else ToolEnvironment.from_os()
        prefix = self.executable(env)
        return CommandSpec(prefix[0], (*prefix[1:], *self.args()))

    def execute(
        self,
        env: ToolEnvironment | None = None,
        *,
        stream: bool = False,
        check: bool = True,
    ) -> ProcessResult:
        """Resolve, render and run the command."""
        return run_tool(self.command(env), check=check, stream=stream)

    def run(self, env: ToolEnvironment | None = None, *, stream: bool = False) -> Any:
        """Run the command. Subclasses may return an artifact path instead."""
        return self.execute(env, stream=stream)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({' '.join(self.args())!r})"
