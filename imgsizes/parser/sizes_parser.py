"""Sizes attribute parser — turns an img `sizes` string into ordered rules."""

from __future__ import annotations

import logging
import re
from typing import Optional

from imgsizes.errors import SizesParseError
from imgsizes.models.sizes import SUPPORTED_FEATURES, Condition, SizeRule
from imgsizes.parser.media_tokenizer import (
    FEATURE,
    FEATURE_EXPRESSION,
    KEYWORD,
    VALUE,
    MediaTokenizer,
    default_tokenizer,
)
from imgsizes.units import px_value

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = re.compile(r"\s*,\s*")
DESCRIPTOR_PATTERN = re.compile(r"^(.*)\s+(\S+)$")
WRAPPED_PATTERN = re.compile(r"^\(.*\)$")


def parse_sizes(sizes: str, tokenizer: Optional[MediaTokenizer] = None) -> list[SizeRule]:
    """Parse the value of an img element's sizes attribute.

    `(min-width: 680px) 400px, 100vw` becomes two rules: one conditional,
    one unconditional fallback. Rule order is preserved.
    """
    tokenizer = tokenizer or default_tokenizer
    rules = [
        _parse_descriptor(descriptor, tokenizer)
        for descriptor in SEGMENT_SEPARATOR.split(sizes.strip())
    ]
    logger.debug("Parsed %d sizes rules from %r", len(rules), sizes)
    return rules


def _parse_descriptor(descriptor: str, tokenizer: MediaTokenizer) -> SizeRule:
    match = DESCRIPTOR_PATTERN.match(descriptor)
    if not match:
        # No condition clause: the whole segment is the width
        return SizeRule(conditions=[], width=descriptor)

    media_condition, width = match.groups()
    conditions: list[Condition] = []
    if media_condition:
        conditions = _parse_conditions(media_condition, tokenizer)
    return SizeRule(conditions=conditions, width=width)


def _parse_conditions(media_condition: str, tokenizer: MediaTokenizer) -> list[Condition]:
    # Strips the outer parentheses of "(a) and (b)", not of "((a) and (b))".
    if (
        WRAPPED_PATTERN.match(media_condition)
        and media_condition.find("(", 1) > media_condition.find(")")
    ):
        media_condition = media_condition[1:-1]

    conditions: list[Condition] = []
    for node in tokenizer.tokenize(media_condition):
        if node.type == FEATURE_EXPRESSION:
            feature = node.find(FEATURE)
            value = node.find(VALUE)
            if feature is None or value is None:
                raise SizesParseError(
                    f"Media feature '{node.value}' has no value in '{media_condition}'"
                )
            if feature.value not in SUPPORTED_FEATURES:
                raise SizesParseError(
                    f"Unsupported media feature '{feature.value}' in '{media_condition}'"
                )
            px_value(value.value, kind="query")
            conditions.append(Condition(media_feature=feature.value, value=value.value))
        elif node.type == KEYWORD and node.value == "and":
            continue
        else:
            # not/or and media types are unsupported; keep what was parsed so far
            logger.debug("Stopped parsing %r at %s '%s'", media_condition, node.type, node.value)
            break
    return conditions
