"""Unit tests for the generic parser combinators."""

import pytest

from typed_pddl.ast import (
    NUMBER_TYPE,
    OBJECT_TYPE,
    EitherType,
    ExactType,
    Name,
    PrimitiveType,
    Variable,
)
from typed_pddl.ast.operators import BinaryComp
from typed_pddl.errors import ParseError
from typed_pddl.parsing import (
    Span,
    alt,
    empty_or,
    function_typed_list,
    keyword_enum,
    opt,
    parens,
    parse_name,
    parse_type,
    parse_variable,
    prefix_expr,
    space_separated_list0,
    space_separated_list1,
    spaced,
    tag,
    typed_list,
    ws,
)


def test_tag_respects_word_boundaries() -> None:
    """Verify that a keyword does not match the prefix of a longer name."""
    parse_and = tag("and")

    rest, _ = parse_and("and (p)")
    assert rest.remaining == " (p)"

    with pytest.raises(ParseError):
        parse_and("android")


def test_tag_matches_multiword_keywords() -> None:
    """Verify that the words of a multi-word keyword may be separated by any whitespace."""
    rest, keyword = tag("at end")("at\n   end (p)")

    assert keyword == "at end"
    assert rest.remaining == " (p)"


def test_parens_tolerates_inner_whitespace() -> None:
    """Verify that whitespace just inside parentheses is skipped."""
    rest, name = parens(parse_name)("(  truck\n)")

    assert name == Name("truck")
    assert rest.at_end


def test_prefix_expr() -> None:
    """Verify that a keyword-tagged form is parsed, returning only the inner node."""
    rest, name = prefix_expr(":domain", parse_name)("( :domain briefcase-world )rest")

    assert name == "briefcase-world"
    assert rest.remaining == "rest"


def test_ws_consumes_surrounding_whitespace() -> None:
    """Verify that the whitespace wrapper consumes whitespace and comments on both sides."""
    rest, name = ws(parse_name)("  ; comment\n truck  \n")

    assert name == "truck"
    assert rest.at_end


def test_spaced_requires_separation() -> None:
    """Verify that sequenced parsers require whitespace between two names."""
    both = spaced(parse_name, parse_name)

    _, names = both("a b")
    assert names == (Name("a"), Name("b"))

    with pytest.raises(ParseError):
        both("a(b")


def test_space_separated_lists() -> None:
    """Verify the zero-or-more and one-or-more list combinators."""
    # Act
    rest0, empty = space_separated_list0(parse_name)(")")
    rest1, several = space_separated_list1(parse_name)("a b\n c)")

    # Assert
    assert empty == ()
    assert rest0.remaining == ")"
    assert several == (Name("a"), Name("b"), Name("c"))
    assert rest1.remaining == ")"

    with pytest.raises(ParseError):
        space_separated_list1(parse_name)(")")


def test_list_elements_need_no_space_between_parentheses() -> None:
    """Verify that adjacent parenthesized elements are separated by their parentheses."""
    rest, elements = space_separated_list1(parens(parse_name))("(a)(b) (c)")

    assert elements == (Name("a"), Name("b"), Name("c"))
    assert rest.at_end


def test_alt_commits_to_first_success() -> None:
    """Verify that ordered choice returns the first alternative that succeeds."""
    choice = alt(parse_variable, parse_name)

    _, variable = choice("?x")
    _, name = choice("x")

    assert isinstance(variable, Variable)
    assert isinstance(name, Name)


def test_alt_reports_furthest_failure() -> None:
    """Verify that when every alternative fails, the error that got furthest is raised."""
    # Arrange - The second alternative gets further into the input before failing
    choice = alt(prefix_expr("or", parse_name), prefix_expr("and", parse_variable))

    # Act/Assert
    with pytest.raises(ParseError) as exc_info:
        choice("(and 5)")

    assert exc_info.value.offset == 5


def test_opt_yields_none_without_consuming() -> None:
    """Verify that an optional parser yields None and leaves the input untouched on failure."""
    span = Span("(p)")

    rest, node = opt(parse_name)(span)

    assert node is None
    assert rest == span


def test_list_reports_failure_inside_its_last_element() -> None:
    """Verify that a list element failing partway is reported instead of the closing parenthesis."""
    parser = parens(space_separated_list0(prefix_expr("and", parse_name)))

    with pytest.raises(ParseError) as exc_info:
        parser("((and a) (and ?b))")

    assert exc_info.value.offset == len("((and a) (and ")


def test_empty_or() -> None:
    """Verify that `()` yields None, while anything else is parsed by the wrapped parser."""
    parser = empty_or(parens(parse_name))

    _, empty = parser("(  )")
    _, name = parser("(b)")

    assert empty is None
    assert name == "b"


def test_keyword_enum_prefers_longer_keywords() -> None:
    """Verify that `>=` is matched whole rather than as `>` followed by `=`."""
    parse_comp = keyword_enum(BinaryComp)

    rest, comp = parse_comp(">= 1 2")

    assert comp is BinaryComp.GREATER_THAN_OR_EQUAL
    assert rest.remaining == " 1 2"


def test_parse_either_type() -> None:
    """Verify that an `either` type lists its primitive types in order."""
    _, type_ = parse_type("(either truck airplane)")

    assert type_ == EitherType((PrimitiveType("truck"), PrimitiveType("airplane")))


def test_parse_typed_list_of_names(typed_list_of_names: str) -> None:
    """Verify that an example typed list of names is parsed with the correct types."""
    # Arrange - The PDDL example is provided by the test fixture
    parser = typed_list(parse_name)

    # Act - Match a typed list of names
    rest, result = parser(typed_list_of_names)

    # Assert - Verify that the types were parsed correctly
    assert rest.at_end
    assert [str(value) for value in result.values] == ["integer", "float", "physob"]
    assert result.types == (NUMBER_TYPE, NUMBER_TYPE, OBJECT_TYPE)


def test_typed_list_groups() -> None:
    """Verify that contiguous runs of same-typed items are regrouped for display."""
    # Arrange
    parser = typed_list(parse_variable)

    # Act
    _, result = parser("?a ?b - block ?c - (either block table) ?d ?e")

    # Assert
    block = ExactType(PrimitiveType("block"))
    either = EitherType((PrimitiveType("block"), PrimitiveType("table")))
    assert len(result) == 5
    assert result.groups() == [
        ((Variable("a"), Variable("b")), block),
        ((Variable("c"),), either),
        ((Variable("d"), Variable("e")), OBJECT_TYPE),
    ]


def test_typed_list_may_be_empty() -> None:
    """Verify that a typed list with no items parses to an empty list."""
    rest, result = typed_list(parse_name)(")")

    assert len(result) == 0
    assert rest.remaining == ")"


def test_function_typed_list_defaults_to_number() -> None:
    """Verify that untyped items of a function typed list have type `number`."""
    _, result = function_typed_list(parens(parse_name))("(fuel) (loc) - location (cost)")

    assert result.types == (
        ExactType(PrimitiveType("location")),
        ExactType(PrimitiveType("location")),
        NUMBER_TYPE,
    )
