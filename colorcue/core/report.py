"""Report builder: text and JSON output for database coverage checks."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from colorcue.core.types import CoverageReport

# Missing score ranges listed before the rest is summarized
MAX_LISTED_RANGES = 10


def score_ranges(scores: list[int]) -> list[tuple[int, int]]:
    """Collapse sorted scores into inclusive (first, last) runs."""
    ranges: list[tuple[int, int]] = []
    for score in scores:
        if ranges and score == ranges[-1][1] + 1:
            ranges[-1] = (ranges[-1][0], score)
        else:
            ranges.append((score, score))
    return ranges


def _format_ranges(scores: list[int]) -> str:
    ranges = score_ranges(scores)
    parts = [str(a) if a == b else f'{a}-{b}' for a, b in ranges[:MAX_LISTED_RANGES]]
    if len(ranges) > MAX_LISTED_RANGES:
        parts.append(f'... ({len(ranges) - MAX_LISTED_RANGES} more ranges)')
    return ', '.join(parts)


def format_text(report: CoverageReport, db_path: str | Path | None = None) -> str:
    """Format a coverage report as human-readable text."""
    lines = []
    if db_path is not None:
        lines.append(f'colorcue: {db_path}')
        lines.append('')

    required = report.required_scores
    covered = required - len(report.missing_scores)
    average = report.words / required if required else 0.0
    lines.append(f'Number of words            : {report.words}')
    lines.append(f'Number of scores           : {report.distinct_scores}')
    lines.append(f'Number of required scores  : {required} ({covered} covered)')
    if report.max_score is not None:
        lines.append(f'Score span                 : {report.score_span} ({report.min_score}..{report.max_score})')
        lines.append(
            f'Words per (required) score : ~{average:.2f} ([{report.min_per_score},{report.max_per_score}])'
        )
    if report.missing_scores:
        lines.append(f'Missing scores             : {_format_ranges(report.missing_scores)}')

    lines.append('')
    if report.passed:
        lines.append('PASS every required score has a word')
    else:
        lines.append(f'FAIL {len(report.missing_scores)}/{required} required scores without a word')
    return '\n'.join(lines)


def format_json(report: CoverageReport, db_path: str | Path | None = None) -> str:
    """Format a coverage report as JSON."""
    obj: dict[str, Any] = {}
    if db_path is not None:
        obj['database'] = str(db_path)
    obj.update(report.to_dict())
    obj['missing_ranges'] = [list(r) for r in score_ranges(report.missing_scores)]
    return json.dumps(obj, indent=2)
