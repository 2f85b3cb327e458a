"""Factories that build operators chosen by name from registered kinds."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from flecsolve.config import NullOptions, NullSettings, OptionsDescription, WithLabel
from flecsolve.operators.core import Operator
from flecsolve.operators.handle import Handle, make_shared as _make_shared
from flecsolve.variable import ANONYMOUS


def _parse_target(target_type: Any, token: Any) -> Any:
    """Convert ``token`` to a member of ``target_type``.

    Enum members match on their value or their name, ignoring case.
    """
    if isinstance(target_type, type) and isinstance(token, target_type):
        return token
    if isinstance(target_type, type) and issubclass(target_type, enum.Enum):
        text = str(token).strip().lower()
        for member in target_type:
            if str(member.value).lower() == text or member.name.lower() == text:
                return member
        raise ValueError(f"{token!r} is not a valid {target_type.__name__}")
    return target_type(token)


@dataclass(frozen=True)
class Registration:
    """How to build one kind of operator.

    ``make`` receives the kind's settings followed by the factory's extra
    arguments; ``settings`` creates default settings; ``options`` takes an
    option prefix and returns a callable that describes the settings' options.
    """

    make: Callable[..., Any]
    settings: Callable[[], Any] = NullSettings
    options: Callable[[str], Callable[[Any], OptionsDescription]] = NullOptions


@dataclass
class FactoryProduct:
    """Policy wrapping whatever a factory built; it forwards application to it."""

    var: Any
    params: Any = None

    @property
    def input_var(self) -> Any:
        return getattr(self.var, "input_var", ANONYMOUS)

    @property
    def output_var(self) -> Any:
        return getattr(self.var, "output_var", ANONYMOUS)

    def apply(self, x: Any, y: Any) -> Any:
        return self.var.apply(x, y)

    def get_operator(self) -> Any:
        getter = getattr(self.var, "get_operator", None)
        if getter is None:
            return self.var
        return getter()


@dataclass
class FactorySettings:
    """The chosen kind and the settings for that kind."""

    target_id: Any = None
    target_settings: Any = field(default=None)


class FactoryOptions(WithLabel):
    """Describes the ``type`` option and, once known, the kind's own options."""

    settings_type = FactorySettings

    def __init__(self, prefix: str, factory: Any) -> None:
        super().__init__(prefix)
        self.factory = factory

    def __call__(self, settings: FactorySettings) -> OptionsDescription:
        desc = OptionsDescription()

        def _set_target(target: Any) -> None:
            settings.target_id = target

        desc.add_option(
            self.label("type"),
            parser=self.factory.parse_target,
            notifier=_set_target,
            required=True,
            help="operator type",
        )
        if settings.target_id is not None:
            settings.target_settings = self.factory.make_settings(settings.target_id)
            desc.add(
                self.factory.make_options(
                    self.label("options"), settings.target_id, settings.target_settings
                )
            )
        return desc


class Factory:
    """Builds operators of the kinds registered for ``target_type``."""

    def __init__(self, target_type: Any, registry: Mapping[Any, Registration]) -> None:
        self.target_type = target_type
        self.registry = {_parse_target(target_type, k): v for k, v in registry.items()}

    def _registration(self, target: Any) -> Registration:
        try:
            return self.registry[target]
        except KeyError:
            raise ValueError(f"no operator registered for {target!r}") from None

    def parse_target(self, token: Any) -> Any:
        """Convert a name to a target of this factory."""
        return _parse_target(self.target_type, token)

    def make_settings(self, target: Any) -> Any:
        """Default settings for ``target``."""
        return self._registration(target).settings()

    def make_options(self, prefix: str, target: Any, settings: Any) -> OptionsDescription:
        """Options of ``target`` under ``prefix``; none if ``settings`` is of another kind."""
        reg = self._registration(target)
        expected = reg.settings
        if isinstance(expected, type) and not isinstance(settings, expected):
            return OptionsDescription()
        return reg.options(prefix)(settings)

    def options(self, prefix: str) -> FactoryOptions:
        """Options object for reading this factory's settings from a config file."""
        return FactoryOptions(prefix, self)

    def make(self, settings: FactorySettings, *args: Any) -> Operator:
        """Build the chosen operator."""
        return Operator(FactoryProduct(self.make_policy(settings, *args)))

    def make_shared(self, settings: FactorySettings, *args: Any) -> Handle:
        """Build the chosen operator behind an owning handle."""
        return _make_shared(FactoryProduct(self.make_policy(settings, *args)))

    def make_policy(self, settings: FactorySettings, *args: Any) -> Any:
        """Build what the chosen kind's registration makes."""
        if settings.target_id is None:
            raise ValueError("no operator type has been chosen")
        reg = self._registration(settings.target_id)
        expected = reg.settings
        if isinstance(expected, type) and not isinstance(settings.target_settings, expected):
            raise TypeError(
                f"settings of type {type(settings.target_settings).__name__} "
                f"do not belong to {settings.target_id!r}"
            )
        return reg.make(settings.target_settings, *args)


@dataclass(frozen=True)
class TargetUnion:
    """A target drawn from one of several target types."""

    value: Any

    @classmethod
    def parse(cls, token: Any, target_types: Iterable[Any]) -> "TargetUnion":
        """Parse ``token`` with each type; the last type that accepts it wins."""
        if isinstance(token, TargetUnion):
            return token
        found: list[Any] = []
        for target_type in target_types:
            try:
                found.append(_parse_target(target_type, token))
            except (ValueError, TypeError, KeyError):
                continue
        if not found:
            raise ValueError(f"{token!r} is not a valid target")
        return cls(found[-1])


class FactoryUnion:
    """A factory over the kinds of several factories."""

    def __init__(self, *args: Factory) -> None:
        if not args:
            raise ValueError("a factory union needs at least one factory")
        self.factories = args

    def _split(self, target: Any) -> tuple[Factory, Any]:
        value = target.value if isinstance(target, TargetUnion) else target
        for fact in self.factories:
            target_type = fact.target_type
            if isinstance(target_type, type) and isinstance(value, target_type):
                return fact, value
        raise ValueError(f"no factory accepts target {value!r}")

    def parse_target(self, token: Any) -> TargetUnion:
        return TargetUnion.parse(token, (f.target_type for f in self.factories))

    def make_settings(self, target: Any) -> Any:
        fact, value = self._split(target)
        return fact.make_settings(value)

    def make_options(self, prefix: str, target: Any, settings: Any) -> OptionsDescription:
        fact, value = self._split(target)
        return fact.make_options(prefix, value, settings)

    def options(self, prefix: str) -> FactoryOptions:
        return FactoryOptions(prefix, self)

    def make(self, settings: FactorySettings, *args: Any) -> Operator:
        return Operator(FactoryProduct(self.make_policy(settings, *args)))

    def make_shared(self, settings: FactorySettings, *args: Any) -> Handle:
        return _make_shared(FactoryProduct(self.make_policy(settings, *args)))

    def make_policy(self, settings: FactorySettings, *args: Any) -> Any:
        if settings.target_id is None:
            raise ValueError("no operator type has been chosen")
        fact, value = self._split(settings.target_id)
        return fact.make_policy(FactorySettings(value, settings.target_settings), *args)