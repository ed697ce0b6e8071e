"""Report output for strixt.

Text output prints one line per peeve as it is found:

    path:line:column: error: message

JSON and YAML output collect every report and print a single document:

```yaml
strixt:
  version: "0.1.0"
files:
  - path: "src/app.py"
    peeves:
      - line: 3
        column: 12
        message: "whitespace at end of line"
    hidden: 0
skipped:
  - path: "build/logo.png"
    reason: "binary file"
summary:
  files_checked: 1
  files_with_peeves: 1
  peeves: 1
  skipped: 1
```
"""

import json
from typing import Optional

import click
import yaml

from strixt import __version__
from strixt.config import VERBOSE, QUIET, ScanOptions
from strixt.models import FileReport, ScanSummary


class TextReporter:
    """Echo peeves in compiler-error format."""

    def __init__(self, options: ScanOptions):
        self.options = options
        self.summary = ScanSummary()

    def add(self, report: FileReport) -> None:
        self.summary.add(report)
        verbosity = self.options.verbosity

        if report.skipped:
            if verbosity >= VERBOSE or (report.depth < 1 and verbosity > QUIET):
                click.echo(f"{report.path}: skipping {report.skipped_reason}")
            return

        if report.is_clean:
            if verbosity >= VERBOSE:
                click.echo(f"{report.path}: ok")
            return

        limit = self.options.max_shown_peeves_per_file
        for peeve in report.shown_peeves(limit):
            click.echo(peeve.format(report.path))
        hidden = report.hidden_count(limit)
        if hidden:
            click.echo(f"{report.path}: {hidden} more peeves not shown")

    def finish(self) -> ScanSummary:
        if self.options.verbosity >= VERBOSE:
            click.echo(str(self.summary), err=True)
        return self.summary


class StructuredReporter:
    """Collect reports and dump them as one JSON or YAML document."""

    def __init__(self, options: ScanOptions, fmt: str = "json"):
        if fmt not in ("json", "yaml"):
            raise ValueError(f"Unsupported report format: {fmt}")
        self.options = options
        self.fmt = fmt
        self.summary = ScanSummary()
        self.files: list[dict] = []
        self.skipped: list[dict] = []

    def add(self, report: FileReport) -> None:
        self.summary.add(report)

        if report.skipped:
            self.skipped.append({"path": report.path, "reason": report.skipped_reason})
            return

        # Clean files are listed only when verbose
        if report.is_clean and self.options.verbosity < VERBOSE:
            return

        limit = self.options.max_shown_peeves_per_file
        self.files.append({
            "path": report.path,
            "peeves": [peeve.to_dict() for peeve in report.shown_peeves(limit)],
            "hidden": report.hidden_count(limit),
        })

    def to_dict(self) -> dict:
        return {
            "strixt": {"version": __version__},
            "files": self.files,
            "skipped": self.skipped,
            "summary": self.summary.to_dict(),
        }

    def render(self) -> str:
        data = self.to_dict()
        if self.fmt == "yaml":
            return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        return json.dumps(data, indent=2)

    def finish(self) -> ScanSummary:
        click.echo(self.render().rstrip("\n"))
        return self.summary


def make_reporter(options: ScanOptions, fmt: Optional[str] = None):
    """Pick the reporter for an output format name."""
    if fmt is None or fmt == "text":
        return TextReporter(options)
    return StructuredReporter(options, fmt)
