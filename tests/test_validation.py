"""Tests for argument validation."""

import pytest

from core.errors import InvalidParamsError
from core.validation import validate_arguments


@pytest.mark.unit
class TestSemanticSearchArguments:
    """Tests for semantic_search arguments."""

    def test_valid_arguments_build_request(self) -> None:
        """Test query and collection produce a request with no limit or mode."""
        request = validate_arguments("semantic_search", {"query": "x", "collection": "docs"})

        assert request.tool_name == "semantic_search"
        assert request.query == "x"
        assert request.collection == "docs"
        assert request.limit is None
        assert request.mode is None

    @pytest.mark.parametrize(
        "arguments",
        [
            {"collection": "docs"},
            {"query": "x"},
            {"query": 42, "collection": "docs"},
            {"query": "x", "collection": ["docs"]},
            {"query": "x", "collection": ""},
            {},
        ],
    )
    def test_missing_or_mistyped_fields_raise(self, arguments: dict) -> None:
        """Test every missing or mistyped required field is rejected."""
        with pytest.raises(InvalidParamsError) as exc_info:
            validate_arguments("semantic_search", arguments)

        assert exc_info.value.message == "Invalid semantic search arguments"
        assert exc_info.value.kind == "InvalidParams"
        assert exc_info.value.code == -32602

    def test_none_arguments_are_treated_as_empty(self) -> None:
        """Test a call without an argument object fails validation."""
        with pytest.raises(InvalidParamsError):
            validate_arguments("semantic_search", None)


@pytest.mark.unit
class TestImageSearchArguments:
    """Tests for image_search arguments."""

    def test_image_url_becomes_primary_input(self) -> None:
        """Test imageUrl is carried as the request query."""
        request = validate_arguments(
            "image_search",
            {"imageUrl": "https://example.com/cat.png", "collection": "images"},
        )

        assert request.query == "https://example.com/cat.png"
        assert request.collection == "images"

    def test_query_is_not_accepted_in_place_of_image_url(self) -> None:
        """Test image_search requires imageUrl, not query."""
        with pytest.raises(InvalidParamsError) as exc_info:
            validate_arguments("image_search", {"query": "cat", "collection": "images"})

        assert exc_info.value.message == "Invalid image search arguments"


@pytest.mark.unit
class TestCrossModalSearchArguments:
    """Tests for cross_modal_search arguments."""

    @pytest.mark.parametrize("mode", ["text2image", "image2text"])
    def test_allowed_modes_are_kept(self, mode: str) -> None:
        """Test both modes are accepted and stored on the request."""
        request = validate_arguments(
            "cross_modal_search", {"query": "a red car", "collection": "media", "mode": mode}
        )

        assert request.mode == mode

    @pytest.mark.parametrize("mode", [None, "", "text", "image", "TEXT2IMAGE", 1])
    def test_other_modes_raise(self, mode: object) -> None:
        """Test any mode outside the enum is rejected."""
        arguments = {"query": "a red car", "collection": "media", "mode": mode}

        with pytest.raises(InvalidParamsError) as exc_info:
            validate_arguments("cross_modal_search", arguments)

        assert exc_info.value.message == "Invalid cross-modal search arguments"

    def test_missing_mode_raises(self) -> None:
        """Test mode is required."""
        with pytest.raises(InvalidParamsError):
            validate_arguments("cross_modal_search", {"query": "x", "collection": "media"})


@pytest.mark.unit
class TestLimitHandling:
    """Tests for the optional limit argument."""

    @pytest.mark.parametrize("limit", [3, 0, -1, 2.5, 1000])
    def test_numeric_limit_passes_through(self, limit: float) -> None:
        """Test numeric limits are kept unchanged, without clamping."""
        request = validate_arguments(
            "semantic_search", {"query": "x", "collection": "docs", "limit": limit}
        )

        assert request.limit == limit

    @pytest.mark.parametrize("limit", ["5", True, None, [5]])
    def test_non_numeric_limit_is_unset(self, limit: object) -> None:
        """Test non-numeric limits are ignored rather than rejected."""
        request = validate_arguments(
            "semantic_search", {"query": "x", "collection": "docs", "limit": limit}
        )

        assert request.limit is None

    def test_limit_helper_is_annotated_like_the_request_field(self) -> None:
        """Test the limit coercion returns the same type SearchRequest.limit declares."""
        from typing import get_type_hints

        from core.models import SearchRequest
        from core.validation import _numeric_or_none

        assert get_type_hints(_numeric_or_none)["return"] == get_type_hints(SearchRequest)["limit"]
