# SPDX-License-Identifier: MIT
"""Unit tests for version segment ordering, equality and hashing."""

import pytest

from pyver import (
    DevHead,
    PostHead,
    PostHeader,
    PreHeader,
    PreTag,
    ReleaseHeader,
)


class TestReleaseHeader:
    """Tests for ReleaseHeader ordering."""

    def test_lexicographic_order(self):
        """Test that major is compared before minor."""
        assert ReleaseHeader(1, 0) < ReleaseHeader(1, 1) < ReleaseHeader(2, 1)

    def test_large_minor_below_next_major(self):
        """Test that a large minor never outranks a higher major."""
        assert ReleaseHeader(1, 52) < ReleaseHeader(2, 1)

    def test_minor_defaults_to_zero(self):
        """Test that minor defaults to 0."""
        assert ReleaseHeader(3) == ReleaseHeader(3, 0)

    def test_str(self):
        """Test string form."""
        assert str(ReleaseHeader(2013, 10)) == "2013.10"


class TestPreHeader:
    """Tests for PreHeader rank and numeric ordering."""

    def test_variant_rank(self):
        """Test the fixed rank beta < alpha < preview < rc."""
        assert PreHeader.beta() < PreHeader.alpha()
        assert PreHeader.alpha() < PreHeader.preview()
        assert PreHeader.preview() < PreHeader.release_candidate()

    def test_rank_dominates_number(self):
        """Test that tag rank wins over the numeric suffix."""
        assert PreHeader.release_candidate(1) > PreHeader.beta(45067885)

    def test_missing_number_below_zero(self):
        """Test that a missing number sorts below 0."""
        assert PreHeader.alpha() < PreHeader.alpha(0) < PreHeader.alpha(1)

    def test_numeric_comparison(self):
        """Test that numbers compare numerically, not lexically."""
        assert PreHeader.beta(2) < PreHeader.beta(10)

    @pytest.mark.parametrize(
        "keyword, tag",
        [
            ("a", PreTag.ALPHA),
            ("alpha", PreTag.ALPHA),
            ("b", PreTag.BETA),
            ("beta", PreTag.BETA),
            ("pre", PreTag.PREVIEW),
            ("preview", PreTag.PREVIEW),
            ("c", PreTag.RELEASE_CANDIDATE),
            ("rc", PreTag.RELEASE_CANDIDATE),
            ("RC", PreTag.RELEASE_CANDIDATE),
        ],
    )
    def test_keyword_folding(self, keyword, tag):
        """Test that synonyms fold to the same tag."""
        assert PreHeader.from_keyword(keyword, 3) == PreHeader(tag, 3)

    def test_unknown_keyword(self):
        """Test that unknown keywords are rejected."""
        with pytest.raises(KeyError):
            PreHeader.from_keyword("gamma")

    def test_hash_matches_equality(self):
        """Test that equal headers hash equal."""
        assert hash(PreHeader.from_keyword("a", 1)) == hash(PreHeader.alpha(1))

    def test_str(self):
        """Test string form."""
        assert str(PreHeader.release_candidate(2)) == "rc2"
        assert str(PreHeader.beta()) == "beta"

    def test_comparison_with_other_type(self):
        """Test that ordering against other types is unsupported."""
        with pytest.raises(TypeError):
            PreHeader.alpha() < DevHead()  # noqa: B015


class TestPostHeader:
    """Tests for PostHeader ordering."""

    def test_missing_number_below_present(self):
        """Test None < 0 < 1 regardless of head."""
        assert PostHeader(PostHead.POST, None) < PostHeader(PostHead.REV, 0)
        assert PostHeader(PostHead.REV, 0) < PostHeader(PostHead.POST, 1)
        assert PostHeader(None, 0) < PostHeader(PostHead.POST, 1)

    def test_head_ignored(self):
        """Test that POST, REV and the bare form are interchangeable."""
        assert PostHeader(PostHead.POST, 1) == PostHeader(PostHead.REV, 1)
        assert PostHeader(None, 1) == PostHeader(PostHead.POST, 1)
        assert hash(PostHeader(PostHead.POST, 1)) == hash(PostHeader(PostHead.REV, 1))

    def test_not_ordered_when_equal(self):
        """Test that equal numbers are neither less nor greater."""
        a = PostHeader(PostHead.POST, 5)
        b = PostHeader(PostHead.REV, 5)
        assert not a < b
        assert not a > b
        assert a <= b

    def test_str(self):
        """Test string form."""
        assert str(PostHeader(PostHead.REV, 3)) == "rev3"
        assert str(PostHeader(None, 3)) == "-3"
        assert str(PostHeader(None, None)) == "post"


class TestDevHead:
    """Tests for DevHead ordering."""

    def test_missing_number_below_present(self):
        """Test None < 0 < 1."""
        assert DevHead(None) < DevHead(0) < DevHead(1)

    def test_equality_and_hash(self):
        """Test equality and hashing."""
        assert DevHead(4) == DevHead(4)
        assert hash(DevHead(4)) == hash(DevHead(4))
        assert DevHead(None) != DevHead(0)

    def test_frozen(self):
        """Test that segments are immutable."""
        dev = DevHead(1)
        with pytest.raises(AttributeError):
            dev.num = 2  # type: ignore
