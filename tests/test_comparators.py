"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_comparators.py
@DateTime: 2026-02-08
@Docs: Tests for comparators.py module.
comparators.py 模块测试。
"""

from contract_checks.comparators import (
    LENGTH_ALIASES,
    NUMERIC_ALIASES,
    Clause,
    LengthComparator,
    NumericComparator,
    UnknownComparator,
    resolve_clauses,
)


class TestAliases:
    """Tests for alias tables.
    别名表测试。
    """

    def test_numeric_synonyms(self) -> None:
        for name in ("equal_to", "eq", "equals", "is"):
            assert NUMERIC_ALIASES[name] is NumericComparator.EQUAL_TO
        for name in ("greater_than_or_equal_to", "min", "gte"):
            assert NUMERIC_ALIASES[name] is NumericComparator.GREATER_THAN_OR_EQUAL_TO
        for name in ("less_than_or_equal_to", "max", "lte"):
            assert NUMERIC_ALIASES[name] is NumericComparator.LESS_THAN_OR_EQUAL_TO

    def test_every_canonical_numeric_name_is_an_alias(self) -> None:
        for comparator in NumericComparator:
            assert NUMERIC_ALIASES[comparator.value] is comparator

    def test_length_synonyms(self) -> None:
        assert LENGTH_ALIASES["min"] is LengthComparator.GTE
        assert LENGTH_ALIASES["max"] is LengthComparator.LTE
        assert "greater_than" not in LENGTH_ALIASES


class TestResolveClauses:
    """Tests for resolve_clauses.
    resolve_clauses 测试。
    """

    def test_mapping_keeps_order(self) -> None:
        clauses = resolve_clauses({"lt": 10, "min": 3}, NUMERIC_ALIASES)
        assert clauses == [
            Clause(NumericComparator.LESS_THAN, 10),
            Clause(NumericComparator.GREATER_THAN_OR_EQUAL_TO, 3),
        ]

    def test_pairs(self) -> None:
        clauses = resolve_clauses([("is", 3), ("in", range(1, 4))], LENGTH_ALIASES)
        assert [c.comparator for c in clauses] == [LengthComparator.IS, LengthComparator.IN]

    def test_pairs_allow_repeated_comparators(self) -> None:
        clauses = resolve_clauses([("gt", 1), ("gt", 2)], NUMERIC_ALIASES)
        assert [c.threshold for c in clauses] == [1, 2]

    def test_enum_member_names(self) -> None:
        clauses = resolve_clauses({NumericComparator.LESS_THAN: 1}, NUMERIC_ALIASES)
        assert clauses[0].comparator is NumericComparator.LESS_THAN

    def test_unknown_comparator(self) -> None:
        clauses = resolve_clauses({"around": 3}, NUMERIC_ALIASES)
        assert clauses == [Clause(UnknownComparator("around"), 3)]
        assert clauses[0].comparator.message == "unknown check 'around'"

    def test_non_string_comparator_is_unknown(self) -> None:
        clauses = resolve_clauses({3: 3}, NUMERIC_ALIASES)
        assert isinstance(clauses[0].comparator, UnknownComparator)

    def test_not_a_clause_spec(self) -> None:
        assert resolve_clauses(None, NUMERIC_ALIASES) == []
        assert resolve_clauses("min", NUMERIC_ALIASES) == []
