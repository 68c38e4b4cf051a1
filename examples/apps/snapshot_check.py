"""Minimal snapshot check: compare a rendered page against its stored copy."""

from __future__ import annotations

import sys

import diffkit

STORED = """\
<ul>
  <li>alpha</li>
  <li>beta</li>
  <li>gamma</li>
</ul>
"""


def render_page(items: list[str]) -> str:
    body = "".join(f"  <li>{item}</li>\n" for item in items)
    return f"<ul>\n{body}</ul>\n"


def main() -> int:
    diffkit.assert_diff(STORED, render_page(["alpha", "beta", "gamma"]), "page unchanged")

    result = diffkit.try_diff(STORED, render_page(["alpha", "delta", "gamma"]), "page drifted")
    if result.passed:
        return 1
    print(result.report)
    print(result.comparison.render_patch(expected_label="a/page.html", actual_label="b/page.html"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
