"""Engine options as announced and set through the protocol."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from arcanum.utils import str_eq_ci, uci_out

Callback = Callable[[], None]

_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


class Option(ABC):
    """An option with a case-insensitive name and a change callback."""

    def __init__(self, name: str, callback: Callback | None = None) -> None:
        self.name = name
        self._callback = callback

    def matches(self, name: str) -> bool:
        """True when ``name`` names this option, ignoring case."""
        return str_eq_ci(self.name, name)

    def _notify(self) -> None:
        if self._callback is not None:
            self._callback()

    def _announce(self, line: str) -> str:
        uci_out(line)
        return line

    @abstractmethod
    def list(self) -> str:
        """Print and return the option's declaration line."""

    @abstractmethod
    def set(self, value: str) -> None:
        """Apply a value given as text."""


class SpinOption(Option):
    """An integer option clamped to a range."""

    def __init__(
        self,
        name: str,
        default: int,
        minimum: int,
        maximum: int,
        callback: Callback | None = None,
    ) -> None:
        super().__init__(name, callback)
        self.default = default
        self.minimum = minimum
        self.maximum = maximum
        self.value = default

    def list(self) -> str:
        return self._announce(
            f"option name {self.name} type spin default {self.default} "
            f"min {self.minimum} max {self.maximum}"
        )

    def set(self, value: str) -> None:
        self.value = min(max(_parse_int(value), self.minimum), self.maximum)
        self._notify()


class CheckOption(Option):
    """A boolean option."""

    def __init__(self, name: str, default: bool, callback: Callback | None = None) -> None:
        super().__init__(name, callback)
        self.default = default
        self.value = default

    def list(self) -> str:
        return self._announce(
            f"option name {self.name} type check default {'true' if self.default else 'false'}"
        )

    def set(self, value: str) -> None:
        text = value.lower()
        if text == "true":
            self.value = True
        elif text == "false":
            self.value = False
        else:
            return
        self._notify()


class ButtonOption(Option):
    """An option that only triggers its callback."""

    def list(self) -> str:
        return self._announce(f"option name {self.name} type button")

    def set(self, value: str = "") -> None:
        self._notify()


class StringOption(Option):
    """A free-text option."""

    def __init__(self, name: str, default: str, callback: Callback | None = None) -> None:
        super().__init__(name, callback)
        self.default = default
        self.value = default

    def list(self) -> str:
        return self._announce(f"option name {self.name} type string default {self.default}")

    def set(self, value: str) -> None:
        self.value = value
        self._notify()


class ComboOption(Option):
    """An option choosing one of a fixed list of values."""

    def __init__(
        self,
        name: str,
        default_index: int,
        choices: Iterable[str],
        callback: Callback | None = None,
    ) -> None:
        super().__init__(name, callback)
        self.choices = list(choices)
        if not 0 <= default_index < len(self.choices):
            raise IndexError(f"default index {default_index} out of range")
        self.default_index = default_index
        self.index = default_index

    @property
    def selected(self) -> str:
        """The currently chosen value."""
        return self.choices[self.index]

    def list(self) -> str:
        variants = "".join(f" var {choice}" for choice in self.choices)
        return self._announce(
            f"option name {self.name} type combo default "
            f"{self.choices[self.default_index]}{variants}"
        )

    def set(self, value: str) -> None:
        for index, choice in enumerate(self.choices):
            if str_eq_ci(choice, value):
                self.index = index
                break