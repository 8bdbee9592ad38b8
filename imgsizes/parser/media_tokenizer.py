"""Media condition tokenizer — turns `(min-width: 600px) and (max-width: 900px)`
into a flat list of typed nodes.

The sizes parser only depends on the `MediaTokenizer` protocol; the default
implementation is built on tinycss2's component value parser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

import tinycss2

logger = logging.getLogger(__name__)

KEYWORDS = {"and", "not", "only", "or"}

# Node types
FEATURE_EXPRESSION = "media-feature-expression"  # (max-width: 100px)
FEATURE = "media-feature"  # max-width
VALUE = "value"  # 100px
KEYWORD = "keyword"  # and, not
MEDIA_TYPE = "media-type"  # print
UNKNOWN = "unknown"


@dataclass
class MediaQueryNode:
    type: str
    value: str
    nodes: list[MediaQueryNode] = field(default_factory=list)

    def find(self, node_type: str) -> Optional[MediaQueryNode]:
        """Return the first child of the given type, if any."""
        for node in self.nodes:
            if node.type == node_type:
                return node
        return None


class MediaTokenizer(Protocol):
    def tokenize(self, clause: str) -> list[MediaQueryNode]: ...


class Tinycss2MediaTokenizer:
    """Tokenizes a single media condition clause with tinycss2."""

    def tokenize(self, clause: str) -> list[MediaQueryNode]:
        nodes: list[MediaQueryNode] = []
        for token in tinycss2.parse_component_value_list(clause, skip_comments=True):
            if token.type == "whitespace":
                continue
            if token.type == "() block":
                nodes.append(self._feature_expression(token))
            elif token.type == "ident":
                kind = KEYWORD if token.lower_value in KEYWORDS else MEDIA_TYPE
                nodes.append(MediaQueryNode(type=kind, value=token.lower_value))
            elif token.type == "error":
                # unmatched ) and friends
                nodes.append(MediaQueryNode(type=UNKNOWN, value=token.kind))
            else:
                nodes.append(MediaQueryNode(type=UNKNOWN, value=tinycss2.serialize([token])))
        logger.debug("Tokenized %r into %s", clause, [n.type for n in nodes])
        return nodes

    @staticmethod
    def _feature_expression(block) -> MediaQueryNode:
        content = block.content
        colon = next(
            (i for i, t in enumerate(content) if t.type == "literal" and t.value == ":"),
            None,
        )
        before = content if colon is None else content[:colon]
        children = [
            MediaQueryNode(type=FEATURE, value=tinycss2.serialize(before).strip().lower())
        ]
        if colon is not None:
            children.append(
                MediaQueryNode(type=VALUE, value=tinycss2.serialize(content[colon + 1:]).strip())
            )
        return MediaQueryNode(
            type=FEATURE_EXPRESSION,
            value=tinycss2.serialize([block]),
            nodes=children,
        )


default_tokenizer = Tinycss2MediaTokenizer()
