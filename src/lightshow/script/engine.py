"""
Structuring engine for lightshow scripts.

Walks the parsed entities once, in file order. Bindings, pad binds and
directives are collected into tables; a trigger executes its target right
away, so it only sees bindings made earlier in the file.
"""

from __future__ import annotations

from typing import Iterable

from ..exceptions import UndefinedVariableError
from .executor import ActionExecutor
from .types import (
    Assigned,
    AssignedAction,
    AssignedSequence,
    Directive,
    DirectiveType,
    Entity,
    MidiBind,
    Pad,
    Script,
    Statement,
    Trigger,
)


class _ScriptBuilder:
    """Tables being filled during one structuring pass."""

    def __init__(self) -> None:
        self.variables: dict[str, Assigned] = {}
        self.midi_binds: dict[Pad, str] = {}
        self.directives: list[DirectiveType] = []

    def build(self) -> Script:
        return Script(self.variables, self.midi_binds, self.directives)


def structure(entities: Iterable[Entity], executor: ActionExecutor) -> Script:
    """
    Build a Script from entities, executing triggers as they are reached.

    Args:
        entities: Parsed entities in source order
        executor: Runs triggered actions against the bridge

    Returns:
        Script with the final variable table, pad binds and directives

    Raises:
        UndefinedVariableError: If a trigger names a variable not bound yet
        BridgeCommunicationError: If a triggered bridge call fails
        ColorConversionError: If a triggered color is malformed
    """
    builder = _ScriptBuilder()

    for entity in entities:
        if isinstance(entity, (AssignedAction, AssignedSequence)):
            builder.variables[entity.variable.name] = entity
        elif isinstance(entity, MidiBind):
            builder.midi_binds[entity.pad] = entity.target
        elif isinstance(entity, Statement):
            _run_statement(entity, builder, executor)
        elif isinstance(entity, Directive):
            builder.directives.append(entity.directive)
        else:
            raise TypeError(f"Unknown entity {entity!r}")

    return builder.build()


def _run_statement(
    entity: Statement,
    builder: _ScriptBuilder,
    executor: ActionExecutor,
) -> None:
    statement = entity.statement
    if isinstance(statement, Trigger):
        target = builder.variables.get(statement.target)
        if target is None:
            raise UndefinedVariableError(statement.target)
        executor.execute(target)
    else:
        raise TypeError(f"Unknown statement {statement!r}")
