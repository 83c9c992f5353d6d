#!/usr/bin/env python3
"""
Custom adapter for error payloads returned by a JSON API.

Errors arriving over the wire are plain dicts, not exceptions. An adapter
tells errortree how to read them, after which exactly_is and scan work the
same as on native exception trees.
"""

import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from errortree import ErrorTreeAdapter, NodeShape, exactly_is, scan


class ApiErrorAdapter(ErrorTreeAdapter):
    """Adapter for ``{"code": ..., "errors": [...]}`` / ``{"cause": ...}`` payloads."""

    def classify(self, node: Any) -> NodeShape:
        """Classify a payload dict.

        - ``errors`` list: multi-child (a batch of failures)
        - ``cause`` object: single-child (a failure wrapping another)
        - otherwise: leaf

        A payload matches a target string when its ``code`` equals it.
        """
        def matcher(target):
            return node.get("code") == target

        if "errors" in node:
            return NodeShape.multi(node["errors"], matcher)
        if "cause" in node:
            return NodeShape.single(node["cause"], matcher)
        return NodeShape.leaf(matcher)


RESPONSE = """
{
    "code": "BATCH_FAILED",
    "errors": [
        {"code": "UPSTREAM_ERROR", "cause": {"code": "RATE_LIMITED"}},
        {"code": "RATE_LIMITED"},
        {"code": "UPSTREAM_ERROR", "cause": {"code": "RATE_LIMITED"}}
    ]
}
"""


def main():
    adapter = ApiErrorAdapter()
    payload = json.loads(RESPONSE)

    # Retry the whole batch only if every item was rate limited
    if exactly_is(payload, "RATE_LIMITED", adapter=adapter):
        print("All items rate limited: retrying batch later")

    codes = [node["code"] for node in scan(payload, Mapping, adapter=adapter)]
    print(f"Visited {len(codes)} payloads: {', '.join(codes)}")


if __name__ == "__main__":
    main()
