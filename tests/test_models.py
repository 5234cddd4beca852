import re

import pytest

from openai_chat.llm import Message, Model

EXPECTED = {
    Model.GPT_35_TURBO: "gpt-3.5-turbo",
    Model.GPT_35_TURBO_16K: "gpt-3.5-turbo-16k",
    Model.GPT_35_TURBO_INSTRUCT: "gpt-3.5-turbo-instruct",
    Model.GPT_35_TURBO_1106: "gpt-3.5-turbo-1106",
    Model.GPT_4_1106_PREVIEW: "gpt-4-1106-preview",
    Model.GPT_4: "gpt-4",
    Model.GPT_4_32K: "gpt-4-32k",
    Model.GPT_4_INSTRUCT: "gpt-4-instruct",
    Model.GPT_4_32K_0613: "gpt-4-32k-0613",
}

WIRE_PATTERN = re.compile(r"gpt-[0-9.]+(-[a-z0-9]+)*")


def test_every_model_has_its_wire_string():
    # A member added to Model without a row here fails this test.
    assert set(EXPECTED) == set(Model)
    for model, wire in EXPECTED.items():
        assert model.format() == wire


@pytest.mark.parametrize("model", list(Model))
def test_format_is_deterministic_and_well_formed(model):
    first = model.format()
    assert first == model.format()
    assert first
    assert WIRE_PATTERN.fullmatch(first)
    assert str(model) == first


def test_wire_strings_are_unique():
    wires = [m.format() for m in Model]
    assert len(wires) == len(set(wires))


def test_parse_round_trips_and_tolerates_case():
    for model in Model:
        assert Model.parse(model.format()) is model
    assert Model.parse("  GPT-4 ") is Model.GPT_4


def test_parse_rejects_unknown_model():
    with pytest.raises(ValueError, match="unknown model"):
        Model.parse("gpt-5-nano")


def test_message_is_frozen_and_serialises_verbatim():
    m = Message("system", "  keep  spacing\n")
    assert m.to_dict() == {"role": "system", "content": "  keep  spacing\n"}
    with pytest.raises(AttributeError):
        m.role = "user"
