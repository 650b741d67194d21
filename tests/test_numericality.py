"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_numericality.py
@DateTime: 2026-02-08
@Docs: Tests for numericality.py module.
numericality.py 模块测试。
"""

from decimal import Decimal

import pytest

from contract_checks.numericality import check_numericality


class TestCheckNumericality:
    """Tests for check_numericality.
    check_numericality 测试。
    """

    def test_all_pass_collapses_to_true(self) -> None:
        """All clauses pass -> bare True / 全部通过时返回单个 True。"""
        assert check_numericality({"a": 5}, "a", {"greater_than_or_equal_to": 3, "less_than": 10}) is True

    def test_any_failure_returns_full_list(self) -> None:
        """Any failure -> full ordered list / 任一失败时返回完整有序列表。"""
        assert check_numericality({"a": 5}, "a", {"greater_than_or_equal_to": 3, "less_than": 4}) == [
            True,
            {"a": "must be less than 4; got: 5"},
        ]

    def test_list_length_matches_clause_count(self) -> None:
        result = check_numericality({"a": 5}, "a", [("gt", 1), ("lt", 2), ("eq", 5)])
        assert isinstance(result, list)
        assert result == [True, {"a": "must be less than 2; got: 5"}, True]

    @pytest.mark.parametrize(
        ("name", "threshold", "message"),
        [
            ("equal_to", 4, "must be equal to 4; got: 3"),
            ("eq", 4, "must be equal to 4; got: 3"),
            ("equals", 4, "must be equal to 4; got: 3"),
            ("is", 4, "must be equal to 4; got: 3"),
            ("greater_than", 3, "must be greater than 3; got: 3"),
            ("gt", 3, "must be greater than 3; got: 3"),
            ("greater_than_or_equal_to", 4, "must be greater than or equal to 4; got: 3"),
            ("min", 4, "must be greater than or equal to 4; got: 3"),
            ("gte", 4, "must be greater than or equal to 4; got: 3"),
            ("less_than", 3, "must be less than 3; got: 3"),
            ("lt", 3, "must be less than 3; got: 3"),
            ("less_than_or_equal_to", 2, "must be less than or equal to 2; got: 3"),
            ("max", 2, "must be less than or equal to 2; got: 3"),
            ("lte", 2, "must be less than or equal to 2; got: 3"),
        ],
    )
    def test_comparator_failures(self, name: str, threshold: int, message: str) -> None:
        assert check_numericality({"a": 3}, "a", {name: threshold}) == [{"a": message}]

    def test_boundaries_pass(self) -> None:
        assert check_numericality({"a": 3}, "a", {"equal_to": 3}) is True
        assert check_numericality({"a": 3}, "a", {"min": 3, "max": 3}) is True

    def test_numeric_equality_across_types(self) -> None:
        """equal_to compares numerically / equal_to 按数值比较。"""
        assert check_numericality({"a": 3.0}, "a", {"equal_to": 3}) is True
        assert check_numericality({"a": Decimal("2.5")}, "a", {"gt": 2}) is True

    def test_absent_passes(self) -> None:
        assert check_numericality({}, "a", {"gt": 100}) is True

    def test_not_a_number(self) -> None:
        assert check_numericality({"a": "5"}, "a", {"gt": 1}) == {"a": "not a number. got: '5'"}
        assert check_numericality({"a": None}, "a", {"gt": 1}) == {"a": "not a number. got: None"}

    def test_bool_is_not_a_number(self) -> None:
        assert check_numericality({"a": True}, "a", {"eq": 1}) == {"a": "not a number. got: True"}

    def test_unknown_comparator_only_affects_its_slot(self) -> None:
        assert check_numericality({"a": 5}, "a", {"gt": 1, "around": 5}) == [
            True,
            {"a": "unknown check 'around'"},
        ]

    def test_uncomparable_threshold_fails_clause(self) -> None:
        assert check_numericality({"a": 5}, "a", {"lt": "10"}) == [{"a": "must be less than 10; got: 5"}]

    def test_decimal_nan_fails_ordering_clauses(self) -> None:
        """Decimal NaN orders as a failed clause, not an exception / Decimal NaN 比较时子句失败而非抛出。"""
        assert check_numericality({"a": Decimal("NaN")}, "a", {"lt": 4, "eq": 4}) == [
            {"a": "must be less than 4; got: Decimal('NaN')"},
            {"a": "must be equal to 4; got: Decimal('NaN')"},
        ]
        assert check_numericality({"a": 3}, "a", {"gte": Decimal("sNaN")}) == [
            {"a": "must be greater than or equal to sNaN; got: 3"}
        ]

    def test_float_nan_fails_every_clause(self) -> None:
        nan = float("nan")
        assert check_numericality({"a": nan}, "a", {"gt": 1, "lte": 1}) == [
            {"a": "must be greater than 1; got: nan"},
            {"a": "must be less than or equal to 1; got: nan"},
        ]

    def test_pairs_record(self) -> None:
        assert check_numericality([("a", 5)], "a", {"gt": 1}) is True

    def test_empty_clauses(self) -> None:
        assert check_numericality({"a": 5}, "a", {}) is True
