"""
Parser for lightshow scripts.

Parses .lshow text like

    flash: act = blink 2 1 ff00ff;
    intro: seq = { color 0000ff; wait 2; color ff0000; };
    directive midi;
    bind 36 flash;
    trigger intro;

into an ordered list of entities, in source order.
"""

from __future__ import annotations

from ..exceptions import ScriptSyntaxError, VariableTypeError
from .types import (
    Action,
    AssignedAction,
    AssignedSequence,
    Blink,
    Color,
    Directive,
    DirectiveType,
    Entity,
    MidiBind,
    Statement,
    Trigger,
    Variable,
    VariableType,
    Wait,
)


U16_MAX = 65535
U8_MAX = 255

# Horizontal whitespace, allowed around operators and required after keywords
HSPACE = " \t"
HEX_DIGITS = set("0123456789abcdefABCDEF")


def parse_script(text: str) -> list[Entity]:
    """
    Parse script text into a list of entities.

    Supported syntax:
    - Actions: wait N; / blink COUNT PAUSE HEX; / color HEX;
    - Bindings: name: act = ACTION  and  name: seq = { ACTION ... };
    - Statements: trigger name;
    - Directives: directive midi;
    - Pad binds: bind PAD name;
    - Comments: # to end of line

    The whole input must be consumed.

    Returns:
        List of entities in source order

    Raises:
        ScriptSyntaxError: If the text does not match the grammar
        UnknownKeywordError: If a type or directive keyword is not recognized
        VariableTypeError: If a declared type does not match the bound value
    """
    return _Parser(text).program()


class _Parser:
    """Single-use parser over one script text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    # -------------------------------------------------------------------------
    # Grammar
    # -------------------------------------------------------------------------

    def program(self) -> list[Entity]:
        entities: list[Entity] = []
        self._skip_ws()
        while not self._at_end():
            entities.append(self._statement())
            self._skip_ws()
        return entities

    def _statement(self) -> Entity:
        start = self.pos
        word = self._identifier("statement")

        # "name:" always starts a binding, even if name is a statement word
        if self._peek() == ":":
            return self._binding(word)

        if word == "trigger":
            self._require_hspace("trigger")
            target = self._identifier("variable name")
            self._terminator()
            return Statement(Trigger(target))

        if word == "directive":
            self._require_hspace("directive")
            keyword = self._identifier("directive name")
            self._terminator()
            return Directive(DirectiveType.from_keyword(keyword))

        if word == "bind":
            self._require_hspace("bind")
            pad = self._number(U8_MAX)
            self._require_hspace("pad number")
            target = self._identifier("variable name")
            self._terminator()
            return MidiBind(pad, target)

        raise self._error(f"unknown statement '{word}'", start)

    def _binding(self, name: str) -> Entity:
        self._expect(":")
        self._skip_hspace()
        var_type = VariableType.from_keyword(self._identifier("variable type"))
        variable = Variable(name, var_type)

        self._skip_hspace()
        self._expect("=")
        self._skip_hspace()

        if self._peek() == "{":
            sequence = self._sequence()
            if var_type is not VariableType.SEQ:
                raise VariableTypeError(name, var_type.value, "a sequence")
            return AssignedSequence(variable, sequence)

        action = self._action()
        if var_type is not VariableType.ACT:
            raise VariableTypeError(name, var_type.value, "a single action")
        return AssignedAction(variable, action)

    def _sequence(self) -> tuple[Action, ...]:
        start = self.pos
        self._expect("{")
        actions: list[Action] = []
        while True:
            self._skip_ws()
            if self._peek() == "}":
                break
            if self._at_end():
                raise self._error("unterminated sequence", start)
            actions.append(self._action())
        self._expect("}")
        self._terminator()
        return tuple(actions)

    def _action(self) -> Action:
        start = self.pos
        word = self._identifier("action")

        if word == "wait":
            self._require_hspace("wait")
            duration = self._number(U16_MAX)
            self._terminator()
            return Wait(duration)

        if word == "blink":
            self._require_hspace("blink")
            count = self._number(U16_MAX)
            self._require_hspace("blink count")
            pause = self._number(U16_MAX)
            self._require_hspace("blink pause")
            color = self._hex()
            self._terminator()
            return Blink(count, pause, color)

        if word == "color":
            self._require_hspace("color")
            color = self._hex()
            self._terminator()
            return Color(color)

        raise self._error(f"unknown action '{word}'", start)

    # -------------------------------------------------------------------------
    # Tokens
    # -------------------------------------------------------------------------

    def _identifier(self, what: str) -> str:
        """Read an alphanumeric run."""
        start = self.pos
        while not self._at_end() and self._is_alnum(self.text[self.pos]):
            self.pos += 1
        if self.pos == start:
            raise self._error(f"expected {what}")
        return self.text[start:self.pos]

    def _number(self, maximum: int) -> int:
        """Read a digit run as an unsigned integer no larger than maximum."""
        start = self.pos
        while not self._at_end() and self.text[self.pos] in "0123456789":
            self.pos += 1
        if self.pos == start:
            raise self._error("expected a number")
        digits = self.text[start:self.pos].lstrip("0") or "0"
        # Check length before int() so huge literals never reach the conversion
        if len(digits) > len(str(maximum)) or int(digits) > maximum:
            shown = digits if len(digits) <= 20 else f"{digits[:20]}..."
            raise self._error(f"number {shown} out of range 0-{maximum}", start)
        return int(digits)

    def _hex(self) -> str:
        """Read a run of hex digits, kept verbatim."""
        start = self.pos
        while not self._at_end() and self.text[self.pos] in HEX_DIGITS:
            self.pos += 1
        if self.pos == start:
            raise self._error("expected a hex color")
        return self.text[start:self.pos]

    def _terminator(self) -> None:
        self._skip_hspace()
        self._expect(";")

    def _expect(self, literal: str) -> None:
        if not self.text.startswith(literal, self.pos):
            found = self._peek()
            found_str = repr(found) if found else "end of input"
            raise self._error(f"expected '{literal}', found {found_str}")
        self.pos += len(literal)

    def _require_hspace(self, after: str) -> None:
        if self._at_end() or self._peek() not in HSPACE:
            raise self._error(f"expected whitespace after {after}")
        self._skip_hspace()

    def _skip_hspace(self) -> None:
        while not self._at_end() and self.text[self.pos] in HSPACE:
            self.pos += 1

    def _skip_ws(self) -> None:
        """Skip spaces, tabs, newlines and # comments."""
        while not self._at_end():
            char = self.text[self.pos]
            if char.isspace():
                self.pos += 1
            elif char == "#":
                end = self.text.find("\n", self.pos)
                self.pos = len(self.text) if end == -1 else end
            else:
                break

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _at_end(self) -> bool:
        return self.pos >= len(self.text)

    @staticmethod
    def _is_alnum(char: str) -> bool:
        return char.isascii() and char.isalnum()

    def _error(self, reason: str, pos: int | None = None) -> ScriptSyntaxError:
        if pos is None:
            pos = self.pos
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return ScriptSyntaxError(reason, line, column)
