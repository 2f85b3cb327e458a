"""Option descriptions and a config-file reader for solver settings."""

from __future__ import annotations

import itertools
import os
from dataclasses import dataclass
from typing import Any, Callable, Iterator

DEPTH_LIMIT = 50


class ConfigError(Exception):
    """Raised when a config file is malformed or does not match its options."""


@dataclass
class _Option:
    name: str
    parser: Callable[[str], Any]
    notifier: Callable[[Any], None] | None
    required: bool
    help: str

    def convert(self, raw: str) -> Any:
        try:
            return self.parser(raw)
        except (ValueError, TypeError) as exc:
            raise ConfigError(
                f"the argument ('{raw}') for option '{self.name}' is invalid"
            ) from exc


class OptionsDescription:
    """An ordered collection of named options."""

    def __init__(self) -> None:
        self._options: dict[str, _Option] = {}

    def add_option(
        self,
        name: str,
        parser: Callable[[str], Any] = str,
        notifier: Callable[[Any], None] | None = None,
        required: bool = False,
        help: str = "",
    ) -> "OptionsDescription":
        """Add one option; returns self so calls can be chained."""
        if name in self._options:
            raise ConfigError(f"option '{name}' is already defined")
        self._options[name] = _Option(name, parser, notifier, required, help)
        return self

    def add(self, other: "OptionsDescription") -> "OptionsDescription":
        """Add every option of another description."""
        for opt in other._options.values():
            if opt.name in self._options:
                raise ConfigError(f"option '{opt.name}' is already defined")
            self._options[opt.name] = opt
        return self

    def names(self) -> list[str]:
        return list(self._options)

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)


class WithLabel:
    """Builds dotted option names under a common prefix."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def label(self, suffix: str) -> str:
        return f"{self.prefix}.{suffix}"


@dataclass
class NullSettings:
    """Settings for something that has none."""


class NullOptions(WithLabel):
    """Options for something that has none."""

    settings_type = NullSettings

    def __call__(self, settings: NullSettings) -> OptionsDescription:
        return OptionsDescription()


def parse_config_file(path: str | os.PathLike) -> list[tuple[str, str]]:
    """Read ``name = value`` pairs from a config file, in file order.

    ``[section]`` headers prefix the names that follow with ``section.``;
    ``#`` starts a comment.
    """
    entries: list[tuple[str, str]] = []
    prefix = ""
    with open(path, encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            line = line.split("#", 1)[0].strip()
            if not line:
                continue
            if line.startswith("[") and line.endswith("]"):
                section = line[1:-1].strip()
                prefix = f"{section}." if section else ""
                continue
            name, sep, value = line.partition("=")
            name = name.strip()
            if not sep or not name:
                raise ConfigError(f"invalid config file syntax at line {lineno}: {line!r}")
            entries.append((prefix + name, value.strip()))
    return entries


def _store_and_notify(
    desc: OptionsDescription,
    entries: list[tuple[str, str]],
    allow_unregistered: bool,
) -> list[tuple[str, str]]:
    values: dict[str, Any] = {}
    unrecognized: list[tuple[str, str]] = []
    for name, raw in entries:
        opt = desc._options.get(name)
        if opt is None:
            if not allow_unregistered:
                raise ConfigError(f"unrecognised option '{name}'")
            unrecognized.append((name, raw))
            continue
        if name in values:
            raise ConfigError(f"option '{name}' cannot be specified more than once")
        values[name] = opt.convert(raw)

    for opt in desc._options.values():
        if opt.required and opt.name not in values:
            raise ConfigError(f"the option '{opt.name}' is required but missing")

    for name, value in values.items():
        notifier = desc._options[name].notifier
        if notifier is not None:
            notifier(value)
    return unrecognized


def read_config(path: str | os.PathLike, *args: Any) -> Any:
    """Fill settings for each options object from a config file.

    Each options object has a ``settings_type`` and, called with its
    settings, returns an :class:`OptionsDescription`.  Reading repeats until
    the set of unrecognised entries stops changing, so options that only
    appear once earlier ones are known get picked up.  A single options
    object yields its settings; several yield a tuple.
    """
    settings = [op.settings_type() for op in args]
    entries = parse_config_file(path)

    previous: list[tuple[str, str]] | None = None
    for depth in itertools.count():
        desc = OptionsDescription()
        for op, s in zip(args, settings):
            desc.add(op(s))

        unrecognized = _store_and_notify(desc, entries, allow_unregistered=True)
        if unrecognized == previous or depth >= DEPTH_LIMIT:
            _store_and_notify(desc, entries, allow_unregistered=False)
            break
        previous = unrecognized

    if len(settings) == 1:
        return settings[0]
    return tuple(settings)