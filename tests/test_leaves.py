"""
Unit tests for uint256 parsing, address normalization and leaf hashing.
"""

import pytest

from merkle_fixtures.config import MEMBERS, UINT256_MAX
from merkle_fixtures.exceptions import InvalidAddressError, InvalidUintError
from merkle_fixtures.leaves import member_leaf, member_leaves, normalize_address, parse_uint256
from tests.helpers import packed_leaf


class TestParseUint256:

    @pytest.mark.parametrize("text,expected", [
        ("0", 0),
        ("100", 100),
        (" 42 ", 42),
        ("0x64", 100),
        ("0XfF", 255),
        (str(UINT256_MAX), UINT256_MAX),
        ("0x" + "f" * 64, UINT256_MAX),
    ])
    def test_valid(self, text, expected):
        assert parse_uint256(text, "val") == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.5", "1e3", "0x", "--1", "12abc"])
    def test_not_numeric(self, text):
        with pytest.raises(InvalidUintError) as exc_info:
            parse_uint256(text, "price")
        assert exc_info.value.name == "price"
        assert "not a decimal" in exc_info.value.reason

    def test_negative(self):
        with pytest.raises(InvalidUintError, match="negative"):
            parse_uint256("-1", "val")

    def test_overflow(self):
        with pytest.raises(InvalidUintError, match="exceeds uint256"):
            parse_uint256(str(UINT256_MAX + 1), "val")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_uint256("nope")


class TestNormalizeAddress:

    def test_checksums(self):
        assert normalize_address("0x92bb439374a091c7507be100183d8d1ed2c9dad3") == MEMBERS[1]

    def test_adds_prefix(self):
        assert normalize_address("  92bb439374a091c7507be100183d8d1ed2c9dad3 ") == MEMBERS[1]

    @pytest.mark.parametrize("addr", ["0x1234", "0xZZbb439374a091c7507be100183d8d1ed2c9dad3", ""])
    def test_invalid(self, addr):
        with pytest.raises(InvalidAddressError):
            normalize_address(addr)


class TestMemberLeaf:

    @pytest.mark.parametrize("member", MEMBERS)
    def test_matches_packed_encoding(self, member):
        assert member_leaf(member, 100, 1) == packed_leaf(member, 100, 1)

    def test_case_insensitive_member(self):
        member = MEMBERS[1]
        assert member_leaf(member.lower(), 7, 9) == member_leaf(member, 7, 9)

    def test_is_32_bytes(self):
        leaf = member_leaf(MEMBERS[0], 0, 0)
        assert isinstance(leaf, bytes)
        assert len(leaf) == 32

    def test_out_of_range(self):
        with pytest.raises(InvalidUintError, match="is negative"):
            member_leaf(MEMBERS[0], -1, 1)
        with pytest.raises(InvalidUintError, match="exceeds uint256"):
            member_leaf(MEMBERS[0], 1, UINT256_MAX + 1)

    def test_member_leaves_keeps_order(self, members):
        leaves = member_leaves(members, 100, 1)
        assert leaves == [packed_leaf(m, 100, 1) for m in members]

    def test_negative_int_reports_negative(self):
        with pytest.raises(InvalidUintError) as exc_info:
            member_leaf(MEMBERS[0], 1, -5)
        assert exc_info.value.name == "price"
        assert exc_info.value.reason == "is negative"
