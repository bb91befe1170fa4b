"""word_scout.report: reports written by the CLI."""
from word_scout.report.json_report import render_json

__all__ = ["render_json"]
