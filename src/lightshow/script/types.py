"""
Core data structures for lightshow scripts.

This module contains the syntax tree produced by the parser and the
aggregate returned by the structuring engine:
- Wait, Blink, Color: the actions the interpreter can send to the bridge
- AssignedAction, AssignedSequence, MidiBind, Statement, Directive: entities
- VariableType, DirectiveType: closed keyword sets
- Script: variables, pad binds and directives of one run
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from ..exceptions import UndefinedVariableError, UnknownKeywordError


class VariableType(Enum):
    """Declared type of a variable: a sequence or a single action."""
    SEQ = "seq"
    ACT = "act"

    @classmethod
    def from_keyword(cls, keyword: str) -> "VariableType":
        """
        Convert a type keyword to a VariableType.

        Raises:
            UnknownKeywordError: If keyword is not 'seq' or 'act'
        """
        for member in cls:
            if member.value == keyword:
                return member
        raise UnknownKeywordError("variable type", keyword, [m.value for m in cls])


class DirectiveType(Enum):
    """File level directives that change the behaviour of a script."""
    MIDI = "midi"

    @classmethod
    def from_keyword(cls, keyword: str) -> "DirectiveType":
        """
        Convert a directive keyword to a DirectiveType.

        Raises:
            UnknownKeywordError: If keyword is not a known directive
        """
        for member in cls:
            if member.value == keyword:
                return member
        raise UnknownKeywordError("directive", keyword, [m.value for m in cls])


# Pads are control-surface buttons, 0-255
Pad = int


@dataclass(frozen=True)
class Variable:
    """Name of a variable and its declared type."""
    name: str
    type: VariableType


# =============================================================================
# Actions
# =============================================================================


@dataclass(frozen=True)
class Wait:
    """Block for duration seconds."""
    duration: int


@dataclass(frozen=True)
class Blink:
    """Flash all lights off and on count times, pause seconds dark each time."""
    count: int
    pause: int
    color: str


@dataclass(frozen=True)
class Color:
    """Set all lights to a hex color."""
    color: str


Action = Union[Wait, Blink, Color]
Sequence = tuple[Action, ...]


# =============================================================================
# Entities
# =============================================================================


@dataclass(frozen=True)
class AssignedAction:
    variable: Variable
    action: Action


@dataclass(frozen=True)
class AssignedSequence:
    variable: Variable
    sequence: Sequence


@dataclass(frozen=True)
class MidiBind:
    """Binds a control-surface pad to a variable name."""
    pad: Pad
    target: str


@dataclass(frozen=True)
class Trigger:
    """Execute the named variable right now."""
    target: str


@dataclass(frozen=True)
class Statement:
    statement: Trigger


@dataclass(frozen=True)
class Directive:
    directive: DirectiveType


Entity = Union[AssignedAction, AssignedSequence, MidiBind, Statement, Directive]
Assigned = Union[AssignedAction, AssignedSequence]


# =============================================================================
# Script
# =============================================================================


class Script:
    """
    Result of structuring a script.

    Holds read-only views of the variable table, the pad-bind table and
    the directive list as they stood after the last entity was processed.
    """

    def __init__(
        self,
        variables: dict[str, Assigned],
        midi_binds: dict[Pad, str],
        directives: list[DirectiveType],
    ):
        self._variables = MappingProxyType(dict(variables))
        self._midi_binds = MappingProxyType(dict(midi_binds))
        self._directives = tuple(directives)

    @property
    def variables(self) -> Mapping[str, Assigned]:
        return self._variables

    @property
    def midi_binds(self) -> Mapping[Pad, str]:
        return self._midi_binds

    @property
    def directives(self) -> tuple[DirectiveType, ...]:
        return self._directives

    def midi_enabled(self) -> bool:
        """Check if the midi directive is present."""
        return DirectiveType.MIDI in self._directives

    def lookup(self, name: str) -> Assigned:
        """
        Get the entity bound to a variable name.

        Raises:
            UndefinedVariableError: If nothing is bound to name
        """
        try:
            return self._variables[name]
        except KeyError:
            raise UndefinedVariableError(name) from None

    def target_for_pad(self, pad: Pad) -> str | None:
        """Variable name bound to a pad, or None if the pad is unbound."""
        return self._midi_binds.get(pad)

    def __repr__(self) -> str:
        return (
            f"Script(variables={sorted(self._variables)}, "
            f"midi_binds={dict(self._midi_binds)}, "
            f"directives={[d.value for d in self._directives]})"
        )
