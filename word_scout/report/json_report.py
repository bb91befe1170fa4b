# word_scout/report/json_report.py

"""
JSON report for a WordScout search.

Serialises a CrawlOutcome, including the per-visit trace, to a file.
"""
import json
from pathlib import Path

from word_scout.crawler.models import CrawlOutcome


def render_json(outcome: CrawlOutcome, output_path: Path | str) -> Path:
    """
    Save *outcome* as JSON at *output_path*.

    :param outcome: result of a search
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from word_scout.report.json_report import render_json
    report_path = render_json(outcome, 'reports/search.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(outcome.to_dict(), f, ensure_ascii=False, indent=2)

    return output
