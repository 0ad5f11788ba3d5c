import pytest

from lightshow.exceptions import ScriptSyntaxError, UnknownKeywordError, VariableTypeError
from lightshow.script import (
    AssignedAction,
    AssignedSequence,
    Blink,
    Color,
    Directive,
    DirectiveType,
    MidiBind,
    Statement,
    Trigger,
    Variable,
    VariableType,
    Wait,
    parse_script,
)


def _action(text: str):
    (entity,) = parse_script(f"a: act = {text}")
    return entity.action


@pytest.mark.parametrize("n", [0, 1, 59, 255, 256, 65534, 65535])
def test_wait_accepts_full_u16_range(n: int) -> None:
    assert _action(f"wait {n};") == Wait(n)


@pytest.mark.parametrize("text", ["wait 65536;", "wait 100000;", "wait abc;", "wait -1;", "wait 1.5;", "wait ;", "wait " + "9" * 5000 + ";", "wait 000065536;"])
def test_wait_rejects_out_of_range_and_non_digits(text: str) -> None:
    with pytest.raises(ScriptSyntaxError):
        parse_script(f"a: act = {text}")


def test_blink_preserves_hex_verbatim() -> None:
    assert _action("blink 3 2 FfA0b1;") == Blink(3, 2, "FfA0b1")


def test_blink_requires_separating_whitespace() -> None:
    with pytest.raises(ScriptSyntaxError):
        parse_script("a: act = blink 3 2ff00ff;")
    with pytest.raises(ScriptSyntaxError):
        parse_script("a: act = blink3 2 ff00ff;")


def test_color_action() -> None:
    assert _action("color ff00ff;") == Color("ff00ff")


def test_color_rejects_non_hex() -> None:
    with pytest.raises(ScriptSyntaxError):
        parse_script("a: act = color zz0000;")
    with pytest.raises(ScriptSyntaxError):
        parse_script("a: act = color ff00gg;")


def test_assigned_action_entity() -> None:
    entities = parse_script("a: act = color ff00ff;\ntrigger a;\n")

    assert entities == [
        AssignedAction(Variable("a", VariableType.ACT), Color("ff00ff")),
        Statement(Trigger("a")),
    ]


def test_assigned_sequence_entity() -> None:
    entities = parse_script("intro: seq = { wait 1; color ff0000; };")

    assert entities == [
        AssignedSequence(
            Variable("intro", VariableType.SEQ),
            (Wait(1), Color("ff0000")),
        )
    ]


def test_sequence_spans_lines_and_may_be_empty() -> None:
    text = "s: seq = {\n    color 0000ff;\n\twait 2;\n    blink 1 1 ffffff;\n};\nempty: seq = {};\n"

    first, second = parse_script(text)

    assert first.sequence == (Color("0000ff"), Wait(2), Blink(1, 1, "ffffff"))
    assert second.sequence == ()


def test_assign_operator_whitespace_is_optional() -> None:
    assert parse_script("a:act=color 00ff00;") == parse_script("a:  act   =   color 00ff00;")


def test_directive_and_bind() -> None:
    entities = parse_script("directive midi;\nbind 36 flash;\n")

    assert entities == [Directive(DirectiveType.MIDI), MidiBind(36, "flash")]


def test_bind_pad_out_of_range() -> None:
    with pytest.raises(ScriptSyntaxError):
        parse_script("bind 256 flash;")


def test_statement_words_can_name_variables() -> None:
    entities = parse_script("trigger: act = wait 1;\ntrigger trigger;")

    assert entities[0].variable.name == "trigger"
    assert entities[1] == Statement(Trigger("trigger"))


def test_entities_keep_source_order_and_duplicates() -> None:
    text = "directive midi;\na: act = wait 1;\ndirective midi;\na: act = wait 2;\ntrigger a;\n"

    entities = parse_script(text)

    assert [type(e).__name__ for e in entities] == [
        "Directive", "AssignedAction", "Directive", "AssignedAction", "Statement",
    ]


def test_comments_and_blank_lines_are_skipped() -> None:
    text = "# intro\n\n  a: act = wait 1;  # short pause\n\n# end\n"

    assert parse_script(text) == [AssignedAction(Variable("a", VariableType.ACT), Wait(1))]


def test_empty_input() -> None:
    assert parse_script("") == []
    assert parse_script("\n\n   \n") == []


def test_trigger_without_identifier_is_syntax_error() -> None:
    with pytest.raises(ScriptSyntaxError) as exc_info:
        parse_script("trigger ;\n")

    assert exc_info.value.line == 1
    assert exc_info.value.column == 9


def test_trailing_garbage_is_syntax_error() -> None:
    with pytest.raises(ScriptSyntaxError) as exc_info:
        parse_script("a: act = color ff00ff;\ntrigger a;\n%%%")

    assert exc_info.value.line == 3
    assert exc_info.value.column == 1


def test_missing_semicolon_is_syntax_error() -> None:
    with pytest.raises(ScriptSyntaxError):
        parse_script("a: act = color ff00ff\ntrigger a;")
    with pytest.raises(ScriptSyntaxError):
        parse_script("s: seq = { wait 1; }")


def test_unterminated_sequence() -> None:
    with pytest.raises(ScriptSyntaxError, match="unterminated sequence"):
        parse_script("s: seq = { wait 1;")


def test_unknown_statement_and_action() -> None:
    with pytest.raises(ScriptSyntaxError, match="unknown statement 'fade'"):
        parse_script("fade a;")
    with pytest.raises(ScriptSyntaxError, match="unknown action 'fade'"):
        parse_script("a: act = fade 1;")


def test_unknown_type_keyword() -> None:
    with pytest.raises(UnknownKeywordError) as exc_info:
        parse_script("a: num = wait 1;")

    assert exc_info.value.keyword == "num"


def test_unknown_directive_keyword() -> None:
    with pytest.raises(UnknownKeywordError):
        parse_script("directive dmx;")


def test_declared_type_must_match_value() -> None:
    with pytest.raises(VariableTypeError):
        parse_script("a: act = { wait 1; };")
    with pytest.raises(VariableTypeError):
        parse_script("a: seq = wait 1;")


def test_zero_padded_numbers_keep_their_value() -> None:
    assert _action("wait " + "0" * 5000 + "1;") == Wait(1)
    assert _action("wait 00065535;") == Wait(65535)
    assert _action("wait 000;") == Wait(0)


def test_huge_pad_number_is_syntax_error() -> None:
    with pytest.raises(ScriptSyntaxError, match="out of range 0-255"):
        parse_script("bind " + "7" * 5000 + " flash;")
