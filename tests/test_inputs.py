"""Tests for the input type closure."""

import pytest

from gql_tsgen.core.errors import UnknownInputTypeError, WrongKindError

from conftest import make_builder


MODEL = """
enum Color { RED GREEN }
input Pair { x: Int! y: Pair }
input A { b: B color: Color! }
input B { a: A many: [A!]! }
type Query { ok: Boolean }
"""


@pytest.fixture
def builder():
    return make_builder(MODEL)


class TestInputTypeClosure:
    """Tests for InputTypeClosure.expand."""

    def test_self_reference_renders_once(self, builder):
        output = builder.render_input_types(["Pair"])
        assert output.text == "type Pair = {\n  x: number;\n  y?: (Pair | null);\n};\n"
        assert output.input_types == ["Pair"]

    def test_duplicates_render_once(self, builder):
        output = builder.render_input_types(["Pair", "Pair"])
        assert output.text.count("type Pair =") == 1

    def test_mutual_recursion(self, builder):
        output = builder.render_input_types(["A"])
        assert output.input_types == ["A", "B"]
        assert output.text.count("type A =") == 1
        assert output.text.count("type B =") == 1
        assert "b?: (B | null);" in output.text
        assert "many: Array<A>;" in output.text

    def test_declarations_separated_by_blank_line(self, builder):
        output = builder.render_input_types(["Pair", "A"])
        assert "};\n\ntype A = {" in output.text

    def test_enums_inlined(self, builder):
        output = builder.render_input_types(["A"])
        assert 'color: "RED" | "GREEN";' in output.text

    def test_empty(self, builder):
        output = builder.render_input_types([])
        assert output.text == ""
        assert output.input_types == []

    def test_unknown(self, builder):
        with pytest.raises(UnknownInputTypeError):
            builder.render_input_types(["Nope"])

    def test_wrong_kind(self, builder):
        with pytest.raises(WrongKindError):
            builder.render_input_types(["Color"])
