"""Tests for the block selector parser."""

import pytest

from blockdef.model.selector import AttributeSelector, CompoundSelector, ParsedSelector
from blockdef.parser import ParseError, parse_selector, parse_selector_list


class TestCompound:
    def test_class(self):
        sel = parse_selector(".item")
        assert sel.key == CompoundSelector(class_name="item")

    def test_scope(self):
        sel = parse_selector(":scope")
        assert sel.key == CompoundSelector(scope=True)
        assert sel.key.targets_root

    def test_bare_attribute_targets_root(self):
        sel = parse_selector("[state|on]")
        assert sel.key.targets_root
        assert sel.key.attributes == (AttributeSelector("state", "on"),)

    def test_attribute_with_value(self):
        sel = parse_selector('.item[state|size="large"]')
        assert sel.key.class_name == "item"
        assert sel.key.attributes == (AttributeSelector("state", "size", "large"),)

    def test_unquoted_attribute_value(self):
        sel = parse_selector(".item[state|size=large]")
        assert sel.key.attributes[0].value == "large"

    def test_multiple_attributes(self):
        sel = parse_selector(":scope[state|a][state|b]")
        assert [a.name for a in sel.key.attributes] == ["a", "b"]


class TestCombinators:
    def test_child(self):
        sel = parse_selector(".list > .item")
        assert sel.combinators == (">",)
        assert sel.key == CompoundSelector(class_name="item")
        assert sel.compounds[0] == CompoundSelector(class_name="list")

    def test_descendant(self):
        sel = parse_selector(":scope[state|open]  .item")
        assert sel.combinators == (" ",)
        assert sel.key.class_name == "item"

    def test_sibling_combinators(self):
        sel = parse_selector(".a + .b ~ .c")
        assert sel.combinators == ("+", "~")
        assert sel.key.class_name == "c"

    def test_str(self):
        assert str(parse_selector(".a>.b[state|x]")) == ".a > .b[state|x]"


class TestSelectorList:
    def test_single(self):
        assert len(parse_selector_list(".a")) == 1

    def test_comma_separated(self):
        sels = parse_selector_list(".a, .b[state|x], :scope")
        assert [str(s) for s in sels] == [".a", ".b[state|x]", ":scope"]

    def test_comma_inside_quotes(self):
        sels = parse_selector_list('.a[state|x="1,2"]')
        assert len(sels) == 1
        assert sels[0].key.attributes[0].value == "1,2"


class TestInvalid:
    @pytest.mark.parametrize(
        "raw",
        ["", "#id", ".a.b", ".a >", "[nonamespace]", ".a, ", "div"],
    )
    def test_rejected(self, raw):
        with pytest.raises(ParseError):
            parse_selector_list(raw)


class TestParsedSelector:
    def test_key_is_last_compound(self):
        sel = ParsedSelector(
            compounds=(CompoundSelector(class_name="a"), CompoundSelector(class_name="b")),
            combinators=(" ",),
        )
        assert sel.key.class_name == "b"
