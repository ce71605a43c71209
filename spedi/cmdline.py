"""A small command-line option parser with typed options, readers and usage text."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence

__all__ = ["CmdlineError", "in_range", "one_of", "Parser"]

_INT_PATTERN = re.compile(r"\s*[+-]?\d+")


class CmdlineError(Exception):
    """Raised for invalid option definitions, lookups and reader failures."""


def _type_name(value_type: type) -> str:
    if value_type is str:
        return "string"
    return value_type.__name__


def _format_default(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _default_reader(value_type: type) -> Callable[[str], Any]:
    """Return a strict string-to-value converter for ``value_type``."""

    def read(text: str) -> Any:
        if value_type is str:
            return text
        if value_type is bool:
            if text.lstrip() in ("0", "1"):
                return text.lstrip() == "1"
            raise ValueError(f"not a boolean: {text!r}")
        if value_type is int:
            if not _INT_PATTERN.fullmatch(text):
                raise ValueError(f"not an integer: {text!r}")
            return int(text)
        if value_type is float:
            if not text.strip() or text != text.rstrip():
                raise ValueError(f"not a number: {text!r}")
            return float(text)
        return value_type(text)

    return read


def in_range(low: Any, high: Any) -> Callable[[str], Any]:
    """Reader accepting values of ``low``'s type within ``[low, high]``."""
    base = _default_reader(type(low))

    def read(text: str) -> Any:
        value = base(text)
        if not (low <= value <= high):
            raise CmdlineError("range_error")
        return value

    return read


def one_of(*args: Any) -> Callable[[str], Any]:
    """Reader accepting only the given alternatives."""
    if not args:
        raise CmdlineError("one_of needs at least one alternative")
    alternatives = list(args)
    base = _default_reader(type(alternatives[0]))

    def read(text: str) -> Any:
        value = base(text)
        if value not in alternatives:
            raise CmdlineError("")
        return value

    return read


@dataclass
class _Flag:
    name: str
    short_name: Optional[str]
    description: str
    has_set: bool = False

    has_value = False
    required = False

    def set(self, value: Optional[str] = None) -> bool:
        if value is not None:
            return False
        self.has_set = True
        return True

    @property
    def valid(self) -> bool:
        return True

    @property
    def short_description(self) -> str:
        return "--" + self.name


@dataclass
class _ValueOption:
    name: str
    short_name: Optional[str]
    raw_description: str
    value_type: type
    required: bool
    default: Any
    reader: Callable[[str], Any]
    has_set: bool = False
    value: Any = field(init=False)

    has_value = True

    def __post_init__(self) -> None:
        self.value = self.default
        suffix = "" if self.required else " [=" + _format_default(self.default) + "]"
        self.description = (
            f"{self.raw_description} ({_type_name(self.value_type)}{suffix})"
        )

    def set(self, value: Optional[str] = None) -> bool:
        if value is None:
            return False
        try:
            self.value = self.reader(value)
        except Exception:
            return False
        self.has_set = True
        return True

    @property
    def valid(self) -> bool:
        return not (self.required and not self.has_set)

    @property
    def short_description(self) -> str:
        return "--" + self.name + "=" + _type_name(self.value_type)


class Parser:
    """Parses ``argv``-style argument lists against declared options."""

    def __init__(self, program_name: str = "", footer: str = "") -> None:
        self.program_name = program_name
        self.footer = footer
        self._options: dict[str, _Flag | _ValueOption] = {}
        self._others: list[str] = []
        self._errors: list[str] = []

    def _register(self, option: _Flag | _ValueOption) -> None:
        if option.name in self._options:
            raise CmdlineError("multiple definition: " + option.name)
        self._options[option.name] = option

    def add_flag(
        self, name: str, short_name: Optional[str] = None, description: str = ""
    ) -> None:
        """Declare an option that takes no value."""
        self._register(_Flag(name, short_name or None, description))

    def add(
        self,
        name: str,
        short_name: Optional[str] = None,
        description: str = "",
        value_type: type = str,
        required: bool = True,
        default: Any = None,
        reader: Optional[Callable[[str], Any]] = None,
    ) -> None:
        """Declare an option that takes a value of ``value_type``."""
        if default is None:
            default = value_type()
        if reader is None:
            reader = _default_reader(value_type)
        self._register(
            _ValueOption(
                name,
                short_name or None,
                description,
                value_type,
                required,
                default,
                reader,
            )
        )

    def _lookup(self, name: str) -> _Flag | _ValueOption:
        try:
            return self._options[name]
        except KeyError:
            raise CmdlineError("there is no flag: --" + name) from None

    def exists(self, name: str) -> bool:
        """Whether the named option was given on the command line."""
        return self._lookup(name).has_set

    def get(self, name: str) -> Any:
        """Value of the named option, or its default if it was not given."""
        option = self._lookup(name)
        if not isinstance(option, _ValueOption):
            raise CmdlineError("type mismatch flag '" + name + "'")
        return option.value

    def rest(self) -> list[str]:
        """Positional arguments left after parsing."""
        return list(self._others)

    def _set_option(self, name: str, value: Optional[str] = None) -> None:
        option = self._options.get(name)
        if option is None:
            self._errors.append("undefined option: --" + name)
        elif value is None:
            if not option.set():
                self._errors.append("option needs value: --" + name)
        elif not option.set(value):
            self._errors.append(f"option value is invalid: --{name}={value}")

    def _short_lookup(self) -> Optional[dict[str, str]]:
        lookup: dict[str, str] = {}
        for name in sorted(self._options):
            if not name:
                continue
            initial = self._options[name].short_name
            if not initial:
                continue
            if initial in lookup:
                self._errors.append(f"short option '{initial}' is ambiguous")
                return None
            lookup[initial] = name
        return lookup

    def _check_short(self, lookup: dict[str, str], char: str) -> Optional[str]:
        name = lookup.get(char)
        if name is None:
            self._errors.append("undefined short option: -" + char)
        return name

    def parse(self, args: Sequence[str]) -> bool:
        """Parse ``args`` (program name first); return True if there were no errors."""
        self._errors.clear()
        self._others.clear()
        if len(args) < 1:
            self._errors.append("argument number must be longer than 0")
            return False
        if not self.program_name:
            self.program_name = args[0]
        lookup = self._short_lookup()
        if lookup is None:
            return False

        remaining = iter(args[1:])
        for arg in remaining:
            if arg.startswith("--"):
                body = arg[2:]
                if "=" in body:
                    name, _, value = body.partition("=")
                    self._set_option(name, value)
                    continue
                option = self._options.get(body)
                if option is None:
                    self._errors.append("undefined option: --" + body)
                elif option.has_value:
                    value = next(remaining, None)
                    if value is None:
                        self._errors.append("option needs value: --" + body)
                    else:
                        self._set_option(body, value)
                else:
                    self._set_option(body)
            elif arg.startswith("-"):
                chars = arg[1:]
                if not chars:
                    continue
                for char in chars[:-1]:
                    name = self._check_short(lookup, char)
                    if name is not None:
                        self._set_option(name)
                name = self._check_short(lookup, chars[-1])
                if name is None:
                    continue
                if self._options[name].has_value:
                    value = next(remaining, None)
                    self._set_option(name, value)
                else:
                    self._set_option(name)
            else:
                self._others.append(arg)

        for name in sorted(self._options):
            if not self._options[name].valid:
                self._errors.append("need option: --" + name)
        return not self._errors

    @staticmethod
    def _split(arg: str) -> list[str]:
        tokens: list[str] = []
        buf: list[str] = []
        in_quote = False
        chars = iter(arg)
        for char in chars:
            if char == '"':
                in_quote = not in_quote
                continue
            if char == " " and not in_quote:
                tokens.append("".join(buf))
                buf = []
                continue
            if char == "\\":
                char = next(chars, None)
                if char is None:
                    raise CmdlineError(
                        "unexpected occurrence of '\\' at end of string"
                    )
            buf.append(char)
        if in_quote:
            raise CmdlineError("quote is not closed")
        if buf:
            tokens.append("".join(buf))
        return tokens

    def parse_string(self, arg: str) -> bool:
        """Split a whole command line honouring quotes and backslashes, then parse it."""
        self._errors.clear()
        try:
            args = self._split(arg)
        except CmdlineError as exc:
            self._errors.append(str(exc))
            return False
        for token in args:
            print(f'"{token}"')
        return self.parse(args)

    def parse_check(self, args: str | Iterable[str]) -> None:
        """Parse and exit with usage on ``--help`` or on errors."""
        if "help" not in self._options:
            self.add_flag("help", "?", "print this message")
        if isinstance(args, str):
            count, ok = 0, self.parse_string(args)
        else:
            arg_list = list(args)
            count, ok = len(arg_list), self.parse(arg_list)
        if (count == 1 and not ok) or self.exists("help"):
            sys.stderr.write(self.usage())
            raise SystemExit(0)
        if not ok:
            sys.stderr.write(self.error() + "\n" + self.usage())
            raise SystemExit(1)

    def error(self) -> str:
        """The first error of the last parse, or an empty string."""
        return self._errors[0] if self._errors else ""

    def error_full(self) -> str:
        """All errors of the last parse, one per line."""
        return "".join(message + "\n" for message in self._errors)

    def usage(self) -> str:
        """Usage text listing required options and describing every option."""
        options = list(self._options.values())
        required = "".join(
            option.short_description + " " for option in options if option.required
        )
        lines = [
            f"usage: {self.program_name} {required}[options] ... {self.footer}\n",
            "options:\n",
        ]
        max_width = max((len(option.name) for option in options), default=0)
        for option in options:
            prefix = f"  -{option.short_name}, " if option.short_name else "      "
            name = "--" + option.name.ljust(max_width + 4)
            lines.append(f"{prefix}{name}{option.description}\n")
        return "".join(lines)