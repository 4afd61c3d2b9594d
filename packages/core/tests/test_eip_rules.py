"""Tests for EIP naming and classification rules."""

import pytest

from eipdiff_core.errors import ClassificationError
from eipdiff_core.utils.eip import AUTHOR_RE, Classification, assert_category, extract_filename_eip_num, match_all


class TestMatchAll:
    def test_captures_handles_and_emails_in_order(self):
        text = "Alice (@alice), Bob <bob@example.com>, Carol (@carol)"
        assert match_all(text, AUTHOR_RE, 1) == ["@alice", "bob@example.com", "@carol"]

    def test_no_matches(self):
        assert match_all("Alice, Bob", AUTHOR_RE, 1) == []

    def test_keeps_duplicates(self):
        assert match_all("(@a) (@a)", AUTHOR_RE, 1) == ["@a", "@a"]


class TestExtractFilenameEipNum:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("eip-1.md", 1),
            ("eip-1559.md", 1559),
            ("EIPS/eip-20.md", 20),
        ],
    )
    def test_extracts_number(self, name, expected):
        assert extract_filename_eip_num(name) == expected

    @pytest.mark.parametrize("name", ["README.md", "eip-draft.md", "eip-12.txt", "erc-20.md", ""])
    def test_returns_none_without_number(self, name):
        assert extract_filename_eip_num(name) is None


class TestAssertCategory:
    def test_standards_track_with_category(self):
        result = assert_category(maybe_category="Core", file_name="eip-1.md", maybe_type="Standards Track")
        assert result == Classification(category="core", type="standards track")

    def test_erc_category_is_case_insensitive(self):
        result = assert_category(maybe_category="ERC", file_name="eip-20.md", maybe_type="standards track")
        assert result.category == "erc"

    @pytest.mark.parametrize("eip_type", ["Meta", "Informational"])
    def test_non_standards_types_use_type_as_category(self, eip_type):
        result = assert_category(maybe_category=None, file_name="eip-1.md", maybe_type=eip_type)
        assert result.category == eip_type.lower()
        assert result.type == eip_type.lower()

    def test_standards_track_without_category_raises(self):
        with pytest.raises(ClassificationError) as exc_info:
            assert_category(maybe_category=None, file_name="eip-1.md", maybe_type="Standards Track")
        assert exc_info.value.file_name == "eip-1.md"

    def test_unknown_category_raises(self):
        with pytest.raises(ClassificationError):
            assert_category(maybe_category="Frontend", file_name="eip-1.md", maybe_type="Standards Track")

    def test_missing_type_raises(self):
        with pytest.raises(ClassificationError):
            assert_category(maybe_category="Core", file_name="eip-1.md", maybe_type=None)

    def test_same_inputs_same_result(self):
        kwargs = {"maybe_category": "Networking", "file_name": "eip-7.md", "maybe_type": "Standards Track"}
        assert assert_category(**kwargs) == assert_category(**kwargs)
