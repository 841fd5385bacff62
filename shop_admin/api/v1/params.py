"""Nested query-string parsing for the users listing.

Admin screens send bracketed keys (``q[email_cont]=jane``, ``q[s]=email desc``,
``enterprise_id_in[]=3``). parse_nested_params folds them into nested dicts
and lists so the search service sees the same structure a form would post.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from starlette.requests import Request

_KEY_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _split_key(key: str) -> list[str] | None:
    match = _KEY_RE.match(key)
    if match is None:
        return None
    return [match.group(1), *_SEGMENT_RE.findall(match.group(2))]


def _assign(container: dict[str, Any], parts: list[str], value: str) -> None:
    head, *rest = parts
    existing = container.get(head)
    if not rest:
        # A bracketed form of the same key always wins over a plain value.
        if not isinstance(existing, (dict, list)):
            container[head] = value
        return
    if rest == [""]:
        if isinstance(existing, dict):
            return
        if not isinstance(existing, list):
            existing = []
            container[head] = existing
        existing.append(value)
        return
    if isinstance(existing, list):
        return
    if not isinstance(existing, dict):
        existing = {}
        container[head] = existing
    _assign(existing, rest, value)


def parse_nested_params(items: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """Fold ``a[b][]=v`` style pairs into nested dicts/lists.

    Repeated scalar keys keep the last value; ``[]`` keys accumulate a list.
    When a key is sent both plain and bracketed (``q=jan&q[s]=email``) the
    bracketed form wins whatever the order, and a key used first as a list
    (``a[]``) or a map (``a[b]``) keeps that form. Keys that are not
    well-formed bracket expressions are kept verbatim.

    Args:
        items: (key, value) pairs in query-string order.

    Returns:
        Nested dict of parameters.
    """
    params: dict[str, Any] = {}
    for key, value in items:
        parts = _split_key(key)
        if parts is None:
            params[key] = value
            continue
        _assign(params, parts, value)
    return params


def is_interactive(request: Request) -> bool:
    """True for background (XHR) requests: X-Requested-With header or ``xhr`` param."""
    if request.headers.get("x-requested-with", "").lower() == "xmlhttprequest":
        return True
    return request.query_params.get("xhr", "").strip().lower() in _TRUTHY
