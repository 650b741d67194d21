"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_length.py
@DateTime: 2026-02-08
@Docs: Tests for length.py module.
length.py 模块测试。
"""

from enum import Enum

import pytest

from contract_checks.length import WRONG_TYPE_MESSAGE, check_length, get_length


class Status(Enum):
    ACTIVE = 1


class TestGetLength:
    """Tests for get_length.
    get_length 测试。
    """

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ([1, 2, 3], 3),
            ((1, 2), 2),
            ("héllo", 5),
            ("", 0),
            (Status.ACTIVE, 6),
            ({"a": 1, "b": 2}, 2),
        ],
    )
    def test_supported(self, value: object, expected: int) -> None:
        assert get_length(value) == expected

    @pytest.mark.parametrize("value", [None, 12, 1.5, {1, 2}, b"ab"])
    def test_unsupported(self, value: object) -> None:
        assert get_length(value) is None


class TestCheckLength:
    """Tests for check_length.
    check_length 测试。
    """

    def test_single_pass_is_still_a_list(self) -> None:
        """Never collapses to True / 从不折叠为单个 True。"""
        assert check_length({"a": "abc"}, "a", {"min": 1}) == [True]

    def test_all_pass(self) -> None:
        assert check_length({"a": ["1", "2", "3"]}, "a", {"is": 3, "max": 4}) == [True, True]
        assert check_length({"a": ["1", "2", "3"]}, "a", {"in": range(2, 5)}) == [True]

    def test_mixed_results_keep_order(self) -> None:
        assert check_length({"a": "abcd"}, "a", {"min": 1, "max": 3, "gt": 2}) == [
            True,
            {"a": "length must be less than or equal to 3; got length: 4"},
            True,
        ]

    @pytest.mark.parametrize(
        ("name", "threshold", "message"),
        [
            ("min", 4, "length must be greater than or equal to 4; got length: 3"),
            ("gte", 4, "length must be greater than or equal to 4; got length: 3"),
            ("gt", 3, "length must be greater than 3; got length: 3"),
            ("max", 2, "length must be less than or equal to 2; got length: 3"),
            ("lte", 2, "length must be less than or equal to 2; got length: 3"),
            ("lt", 3, "length must be less than 3; got length: 3"),
            ("is", 2, "length must be equal to 2; got length: 3"),
            ("in", range(5, 8), "length must be in range 5..7; got length: 3"),
        ],
    )
    def test_comparator_failures(self, name: str, threshold: object, message: str) -> None:
        assert check_length({"a": [1, 2, 3]}, "a", {name: threshold}) == [{"a": message}]

    @pytest.mark.parametrize("bounds", [range(2, 5), [2, 3, 4], {2, 3, 4}, (2, 3), frozenset({3})])
    def test_in_accepts_any_container(self, bounds: object) -> None:
        """Length inside the container passes / 长度在容器内时通过。"""
        assert check_length({"a": [1, 2, 3]}, "a", {"in": bounds}) == [True]

    @pytest.mark.parametrize(
        ("bounds", "rendered"),
        [(range(4, 6), "4..5"), ([1, 2], "[1, 2]"), ({5}, "{5}")],
    )
    def test_in_outside_container(self, bounds: object, rendered: str) -> None:
        assert check_length({"a": [1, 2, 3]}, "a", {"in": bounds}) == [
            {"a": f"length must be in range {rendered}; got length: 3"}
        ]

    def test_map_and_atom(self) -> None:
        assert check_length({"a": {"x": 1}}, "a", {"is": 1}) == [True]
        assert check_length({"a": Status.ACTIVE}, "a", {"is": 6}) == [True]

    def test_wrong_type_in_every_slot(self) -> None:
        """Unsupported shape reported per clause / 不支持的形态按子句报告。"""
        assert check_length({"a": 12}, "a", {"min": 1, "around": 2}) == [
            {"a": WRONG_TYPE_MESSAGE},
            {"a": WRONG_TYPE_MESSAGE},
        ]

    def test_none_is_wrong_type(self) -> None:
        assert check_length({"a": None}, "a", {"min": 1}) == [{"a": WRONG_TYPE_MESSAGE}]

    def test_absent_passes_every_clause(self) -> None:
        assert check_length({}, "a", {"min": 1, "max": 3}) == [True, True]

    def test_unknown_comparator(self) -> None:
        assert check_length({"a": "abc"}, "a", {"min": 1, "around": 3}) == [True, {"a": "unknown check 'around'"}]

    def test_bad_threshold_fails_clause(self) -> None:
        assert check_length({"a": "abc"}, "a", {"in": 3}) == [
            {"a": "length must be in range 3; got length: 3"}
        ]
        assert check_length({"a": "abc"}, "a", {"in": "0123"}) == [
            {"a": "length must be in range '0123'; got length: 3"}
        ]
        assert check_length({"a": "abc"}, "a", {"min": "1", "max": None}) == [
            {"a": "length must be greater than or equal to '1'; got length: 3"},
            {"a": "length must be less than or equal to None; got length: 3"},
        ]

    def test_pairs_record(self) -> None:
        assert check_length([("a", "abc")], "a", [("is", 3)]) == [True]
