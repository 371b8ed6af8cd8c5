# =============================================================================
# core/validation.py  —  Request Validator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the untyped argument bag of a tool call into a SearchRequest, or
#   raises InvalidParamsError.  There is no partial validity and no
#   field-level error report: one message per tool kind.
#
# ONE TABLE INSTEAD OF THREE GUARDS:
#   The three tools only differ in which field carries the primary input
#   and whether a `mode` is required.  Each ArgumentRules entry records
#   exactly that, and a single function applies it.
#
# `limit` HANDLING:
#   A numeric limit is passed through untouched (no clamping, no positivity
#   check).  Anything else — missing, a string, a bool — is treated as
#   "not given", and the client later substitutes the default of 10.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from core.errors import InvalidParamsError
from core.models import CROSS_MODAL_MODES, SearchRequest


@dataclass(frozen=True)
class ArgumentRules:
    """Validation rules for one tool kind."""

    primary_field: str
    error_message: str
    modes: Optional[tuple[str, ...]] = None  # None → tool takes no mode


ARGUMENT_RULES: dict[str, ArgumentRules] = {
    "semantic_search": ArgumentRules(
        primary_field="query",
        error_message="Invalid semantic search arguments",
    ),
    "image_search": ArgumentRules(
        primary_field="imageUrl",
        error_message="Invalid image search arguments",
    ),
    "cross_modal_search": ArgumentRules(
        primary_field="query",
        error_message="Invalid cross-modal search arguments",
        modes=CROSS_MODAL_MODES,
    ),
}


def _numeric_or_none(value: Any) -> Optional[Union[int, float]]:
    # bool is an int subclass in Python, but JSON true is not a number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def validate_arguments(
    tool_name: str,
    arguments: Optional[Mapping[str, Any]],
) -> SearchRequest:
    """Validate the arguments of a search tool call.

    Args:
        tool_name: One of the keys of ARGUMENT_RULES.
        arguments: The raw argument bag.  None is treated as empty.

    Returns:
        A fully populated SearchRequest.

    Raises:
        InvalidParamsError: A required field is missing, mistyped or empty,
            or `mode` is outside the allowed values.
        KeyError: tool_name has no rules (the dispatcher checks this first).
    """
    rules = ARGUMENT_RULES[tool_name]
    args = arguments or {}

    primary = args.get(rules.primary_field)
    collection = args.get("collection")

    if not isinstance(primary, str) or not isinstance(collection, str) or not collection:
        raise InvalidParamsError(rules.error_message)

    mode = None
    if rules.modes is not None:
        mode = args.get("mode")
        if mode not in rules.modes:
            raise InvalidParamsError(rules.error_message)

    return SearchRequest(
        tool_name=tool_name,
        query=primary,
        collection=collection,
        limit=_numeric_or_none(args.get("limit")),
        mode=mode,
    )
