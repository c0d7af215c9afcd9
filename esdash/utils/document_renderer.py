"""Document rendering for the detail drawer.

Turns a document into display lines in one of three views, marks every
occurrence of the query's first term, and fits the output to a line
limit. Lines are tuples of ``Segment`` so the presenter decides styling.
"""

from __future__ import annotations

import json
import logging
from typing import Any, NamedTuple

from esdash.constants.enums import DocViewMode
from esdash.constants.values import (
    DOCUMENT_ACTIONS,
    FLATTEN_COMPLEX,
    FLATTEN_EMPTY,
    FLATTEN_ROOT,
    NO_DOCUMENT_SELECTED,
    TRUNCATION_SENTINEL,
)
from esdash.models.search import Document

logger = logging.getLogger(__name__)


class Segment(NamedTuple):
    """A run of text; ``highlighted`` runs are drawn distinctly."""

    text: str
    highlighted: bool = False


RenderedLine = tuple[Segment, ...]

VIEW_MODE_LABELS: dict[DocViewMode, str] = {
    DocViewMode.PRETTY: "Pretty",
    DocViewMode.RAW: "Raw",
    DocViewMode.FLATTEN: "Flatten",
}

# ID, view selector, actions, blank separator.
HEADER_LINE_COUNT = 4

_QUOTES = ('"', "'")


def _plain(text: str) -> RenderedLine:
    return (Segment(text),)


# ============================================================================
# Body views
# ============================================================================


def pretty_lines(value: Any) -> list[str]:
    return json.dumps(value, indent=2, ensure_ascii=False).splitlines()


def raw_lines(value: Any) -> list[str]:
    return [json.dumps(value, separators=(",", ":"), ensure_ascii=False)]


def inline_value(value: Any) -> str:
    """Render a leaf value as it appears after ``=`` in flattened output."""
    if isinstance(value, str):
        return f'"{value}"'
    if value is None or isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return FLATTEN_COMPLEX


def flatten_lines(value: Any) -> list[str]:
    """Flatten nested objects and arrays into ``path = value`` lines.

    Object keys are joined with ``.`` and array positions appended as
    ``[i]``. A scalar at the top level is labelled ``<root>``; input with
    no leaves yields a single ``<empty>`` line.
    """
    out: list[str] = []
    _flatten_into(value, "", out)
    return out or [FLATTEN_EMPTY]


def _flatten_into(value: Any, prefix: str, out: list[str]) -> None:
    if isinstance(value, dict):
        for key, child in value.items():
            _flatten_into(child, f"{prefix}.{key}" if prefix else str(key), out)
    elif isinstance(value, list):
        for index, child in enumerate(value):
            _flatten_into(child, f"{prefix}[{index}]", out)
    else:
        out.append(f"{prefix or FLATTEN_ROOT} = {inline_value(value)}")


def body_lines(value: Any, mode: DocViewMode) -> list[str]:
    if mode == DocViewMode.RAW:
        return raw_lines(value)
    if mode == DocViewMode.FLATTEN:
        return flatten_lines(value)
    return pretty_lines(value)


# ============================================================================
# Highlighting
# ============================================================================


def highlight_token(query: str) -> str:
    """First term of the query with one layer of quotes removed.

    An empty result disables highlighting.
    """
    parts = query.split()
    if not parts:
        return ""
    token = parts[0]
    if token[:1] in _QUOTES:
        token = token[1:]
    if token[-1:] in _QUOTES:
        token = token[:-1]
    return token


def highlight_line(line: str, token: str) -> RenderedLine:
    """Split ``line`` around every occurrence of ``token``.

    Segments alternate plain and highlighted and always start and end with
    a plain segment, which may be empty. A line without the token is
    returned as one plain segment.
    """
    if not token or token not in line:
        return _plain(line)
    pieces = line.split(token)
    segments: list[Segment] = [Segment(pieces[0])]
    for piece in pieces[1:]:
        segments.append(Segment(token, highlighted=True))
        segments.append(Segment(piece))
    return tuple(segments)


# ============================================================================
# Drawer rendering
# ============================================================================


def header_lines(document: Document, mode: DocViewMode) -> list[RenderedLine]:
    view: list[Segment] = [Segment("View: ")]
    for index, (candidate, label) in enumerate(VIEW_MODE_LABELS.items()):
        if index:
            view.append(Segment(" | "))
        view.append(Segment(label, highlighted=candidate == mode))
    return [
        _plain(f"ID: {document.id}"),
        tuple(view),
        _plain(f"Actions: {DOCUMENT_ACTIONS}"),
        _plain(""),
    ]


def render_document_lines(
    document: Document | None,
    mode: DocViewMode,
    query: str,
    max_lines: int,
) -> list[RenderedLine]:
    """Render the drawer content for ``document`` within ``max_lines``.

    When body lines do not fit, the last emitted line is replaced by the
    ``...`` sentinel.
    """
    if document is None:
        return [_plain(NO_DOCUMENT_SELECTED)]
    if max_lines <= 0:
        return []

    lines = header_lines(document, mode)
    if len(lines) >= max_lines:
        return lines[:max_lines]

    token = highlight_token(query)
    body = body_lines(document.source, mode)
    room = max_lines - len(lines)
    lines.extend(highlight_line(line, token) for line in body[:room])
    if len(body) > room:
        lines[-1] = _plain(TRUNCATION_SENTINEL)
    return lines
