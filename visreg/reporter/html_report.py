"""Renders snapshot comparisons into one static HTML report page."""

from __future__ import annotations

import html
from typing import Sequence

from visreg.models.snapshot import SnapshotComparison


def _image_cell(path: str | None, alt: str, placeholder: str, css_class: str = "") -> str:
    if not path:
        return placeholder
    class_attr = f' class="{css_class}"' if css_class else ""
    return f'<img src="{html.escape(path)}" alt="{alt}" loading="lazy"{class_attr} />'


def _build_row(c: SnapshotComparison) -> str:
    """Build one table row for a comparison."""
    row_class = "failed" if c.has_diff else "passed"
    baseline = _image_cell(c.baseline_path, "Baseline", "<em>No baseline</em>")
    actual = _image_cell(c.actual_path, "Actual", "<em>No actual</em>")
    diff = _image_cell(c.diff_path, "Diff", '<span class="badge pass">&#10003; Match</span>', "diff-img")
    return f'''
    <tr class="{row_class}">
      <td data-label="Snapshot"><strong>{html.escape(c.name)}</strong></td>
      <td data-label="Baseline">
        {baseline}
      </td>
      <td data-label="Actual">
        {actual}
      </td>
      <td data-label="Diff">
        {diff}
      </td>
    </tr>'''


def count_results(comparisons: Sequence[SnapshotComparison]) -> tuple[int, int]:
    """Return (passed, failed) counts."""
    failed = sum(1 for c in comparisons if c.has_diff)
    return len(comparisons) - failed, failed


def render_html_report(comparisons: Sequence[SnapshotComparison], generated_at: str) -> str:
    """Render the report page. Pure: the same input always yields the same string."""
    passed, failed = count_results(comparisons)
    rows = "".join(_build_row(c) for c in comparisons)

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Visual Regression Report</title>
  <style>
    * {{ box-sizing: border-box; }}
    body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, sans-serif; margin: 0; padding: 24px; background: #0f0f0f; color: #e0e0e0; }}
    .header {{ display: flex; justify-content: space-between; align-items: center; flex-wrap: wrap; gap: 16px; margin-bottom: 32px; padding-bottom: 24px; border-bottom: 1px solid #333; }}
    h1 {{ margin: 0; font-size: 1.75rem; }}
    .summary {{ display: flex; gap: 24px; font-size: 0.95rem; }}
    .badge {{ padding: 6px 12px; border-radius: 6px; font-weight: 600; }}
    .badge.pass {{ background: #1a472a; color: #4ade80; }}
    .badge.fail {{ background: #4a1a1a; color: #f87171; }}
    table {{ width: 100%; border-collapse: collapse; background: #1a1a1a; border-radius: 8px; overflow: hidden; }}
    th, td {{ padding: 16px; text-align: left; border-bottom: 1px solid #333; vertical-align: top; }}
    th {{ background: #252525; font-weight: 600; color: #a0a0a0; }}
    tr.failed {{ background: rgba(248, 113, 113, 0.08); }}
    tr.passed:hover {{ background: #222; }}
    td img {{ max-width: 100%; max-height: 400px; border-radius: 4px; border: 1px solid #333; display: block; }}
    td img.diff-img {{ border-color: #f87171; }}
    .meta {{ font-size: 0.85rem; color: #888; margin-top: 24px; }}
    @media (max-width: 768px) {{
      th:nth-child(n), td:nth-child(n) {{ display: block; }}
      tr {{ display: block; margin-bottom: 24px; border: 1px solid #333; border-radius: 8px; padding: 16px; }}
      th {{ display: none; }}
      td::before {{ content: attr(data-label); font-weight: 600; display: block; margin-bottom: 8px; color: #888; }}
    }}
  </style>
</head>
<body>
  <div class="header">
    <h1>Visual Regression Report</h1>
    <div class="summary">
      <span class="badge pass">&#10003; {passed} passed</span>
      <span class="badge fail">&#10007; {failed} failed</span>
    </div>
  </div>
  <table>
    <thead>
      <tr>
        <th>Snapshot</th>
        <th>Baseline</th>
        <th>Actual</th>
        <th>Diff</th>
      </tr>
    </thead>
    <tbody>{rows}
    </tbody>
  </table>
  <p class="meta">Generated: {html.escape(generated_at)} &middot; Run <code>visual-report</code> to regenerate</p>
</body>
</html>'''
