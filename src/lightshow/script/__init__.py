"""
Script language for lightshow.

Provides the parser, the structuring engine and the action executor.
"""

from .types import (
    Action,
    Assigned,
    AssignedAction,
    AssignedSequence,
    Blink,
    Color,
    Directive,
    DirectiveType,
    Entity,
    MidiBind,
    Pad,
    Script,
    Statement,
    Trigger,
    Variable,
    VariableType,
    Wait,
)
from .parser import parse_script
from .executor import ActionExecutor
from .engine import structure

__all__ = [
    # Types
    "Action",
    "Assigned",
    "AssignedAction",
    "AssignedSequence",
    "Blink",
    "Color",
    "Directive",
    "DirectiveType",
    "Entity",
    "MidiBind",
    "Pad",
    "Script",
    "Statement",
    "Trigger",
    "Variable",
    "VariableType",
    "Wait",
    # Parser
    "parse_script",
    # Execution
    "ActionExecutor",
    "structure",
]
