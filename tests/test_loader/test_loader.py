"""Tests for loading definition files into indexed blocks."""

from pathlib import Path

import pytest

from blockdef.configuration import Configuration
from blockdef.loader import build_block, load_definition
from blockdef.model.selector import AttributeSelector
from blockdef.parser import ParseError, parse_definition

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestBuildBlock:
    def test_registers_key_nodes(self):
        root = parse_definition(
            """
            .list > .item { x: 1 }
            .item[state|active] { x: 1 }
            [state|open] { x: 1 }
            """
        )
        block = build_block(root, "menu.block.css")
        sources = [s.as_source() for s in block.all()]
        assert sources == [".item", ".item[state|active]", "[state|open]"]

    def test_root_stays_implicit_without_scope_rule(self):
        block = build_block(parse_definition("[state|open] { x: 1 }"), "m.css")
        assert block.root_class.implicit

    def test_scope_rule_makes_root_explicit(self):
        block = build_block(parse_definition(":scope { x: 1 }"), "m.css")
        assert not block.root_class.implicit

    def test_name_from_file(self):
        assert build_block(parse_definition(""), "dir/menu.block.css").name == "menu"

    def test_name_from_declaration(self):
        root = parse_definition(':scope { block-name: "nav"; }')
        assert build_block(root, "menu.block.css").name == "nav"

    def test_explicit_name_wins(self):
        root = parse_definition(':scope { block-name: "nav"; }')
        assert build_block(root, "menu.block.css", name="given").name == "given"


class TestLoadDefinition:
    def test_valid_fixture(self):
        block = load_definition(FIXTURES / "nav.block.css")
        assert block.errors == []
        assert block.name == "navigation"
        indexes = {s.as_source(): s.index for s in block.all(include_implicit=True)}
        assert indexes == {
            ":scope": 0,
            ".item": 2,
            "[state|collapsed]": 1,
            ".item[state|active]": 3,
            '.item[state|size="large"]': 4,
        }

    def test_missing_scope_fixture(self):
        file = FIXTURES / "missing_scope.block.css"
        block = load_definition(file)
        assert len(block.errors) == 1
        assert "Style node :scope" in block.errors[0].message
        assert block.errors[0].filename == str(file)
        assert block.get_attribute_value(":scope", AttributeSelector("state", "on")).index == 1

    def test_broken_fixture(self):
        block = load_definition(FIXTURES / "broken.block.css")
        messages = [e.message for e in block.errors]
        assert len(messages) == 4
        assert messages[0] == "block-interface-index must be a number."
        assert messages[1].startswith("Each block-interface-index")
        assert "Style node .a " in messages[2]
        assert "Style node .b " in messages[3]
        assert block.get_class("c").index == 1

    def test_locations_relative_to_root_dir(self):
        block = load_definition(
            FIXTURES / "broken.block.css", Configuration(root_dir=str(FIXTURES))
        )
        location = block.errors[0].location
        assert location.start.filename == "broken.block.css"
        assert (location.start.line, location.start.column) == (2, 6)

    def test_syntax_error(self):
        with pytest.raises(ParseError):
            load_definition(FIXTURES / "syntax_error.block.css")


class TestConfiguration:
    def test_relative_inside_root(self, tmp_path):
        config = Configuration(root_dir=str(tmp_path))
        assert config.relative_path(str(tmp_path / "a" / "b.css")) == str(Path("a") / "b.css")

    def test_outside_root_unchanged(self, tmp_path):
        config = Configuration(root_dir=str(tmp_path / "sub"))
        outside = str(tmp_path / "b.css")
        assert config.relative_path(outside) == outside
