# Path: xml_validator/output/reporters.py
"""
Result reporters.

A reporter receives the pipeline result and renders it. The pipeline never
knows which reporter is in use.

Contains:
- FormatterConfig: presentation settings, built once at startup
- Reporter: base class (render_header / render_issue / render_summary)
- ConsoleReporter: rich console output, colored or plain
- JsonReporter: one JSON document on stdout
"""

from __future__ import annotations

import json
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from xml_validator.core.logger import get_logger
from xml_validator.engine.models import Issue, PipelineResult
from xml_validator.output.context import ContextRenderer
from xml_validator.output.tips import CLOSING_NOTE, CORRECTION_TIPS, DETECTED_PROBLEMS
from xml_validator.constants import DEFAULT_CONTEXT_LINES, LOG_OUTPUT

logger = get_logger(__name__, 'output')

SEPARATOR = "-" * 40
OUTPUT_FORMATS = ('text', 'json')


@dataclass(frozen=True)
class FormatterConfig:
    """Presentation settings for one run."""

    color: bool = True
    context_lines: int = DEFAULT_CONTEXT_LINES
    show_tips: bool = True
    output_format: str = 'text'


class Reporter(ABC):
    """Renders a validation run."""

    def __init__(self, config: FormatterConfig):
        self.config = config

    @abstractmethod
    def render_header(self, source: str, max_issues: int) -> None:
        """Called before the document is loaded."""

    @abstractmethod
    def render_issue(self, issue: Issue, index: int, content: bytes) -> None:
        """Render one issue; ``index`` is 1-based."""

    @abstractmethod
    def render_summary(self, result: PipelineResult, max_issues: int) -> None:
        """Render totals after all issues."""

    def render_error(self, message: str) -> None:
        """Render a fatal error (acquisition, configuration)."""

    def report(self, result: PipelineResult, content: bytes, max_issues: int) -> None:
        logger.debug(f"{LOG_OUTPUT} Reporting {len(result.issues)} issue(s) for {result.source}")
        for index, issue in enumerate(result.issues, 1):
            self.render_issue(issue, index, content)
        self.render_summary(result, max_issues)


class ConsoleReporter(Reporter):
    """
    Human-readable report on a rich console.

    Color is a configuration choice: with ``color=False`` the same output is
    produced without styles.
    """

    def __init__(self, config: FormatterConfig, console: Optional[Console] = None):
        super().__init__(config)
        self.console = console or Console(
            no_color=not config.color,
            color_system='auto' if config.color else None,
            highlight=False,
        )
        self.context = ContextRenderer(config.context_lines)

    def _plain(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(Text(text, style=style or ''), soft_wrap=True)

    def render_header(self, source: str, max_issues: int) -> None:
        self.console.print(f"[bold]Validating XML:[/bold] {escape(source)}")
        if max_issues > 0:
            self.console.print(f"Will report up to {max_issues} errors")
        else:
            self.console.print("Will report all errors")

    def render_issue(self, issue: Issue, index: int, content: bytes) -> None:
        self.console.print(f"\n[bold]Issue #{index}:[/bold]")
        if issue.has_position:
            self.console.print(
                f"[cyan]Line {issue.line}, Column {issue.column}:[/cyan] "
                f"[red bold]{escape(issue.kind.value)}[/red bold]"
            )
        else:
            self.console.print(f"[red bold]{escape(issue.kind.value)}[/red bold]")
        self.console.print(f"[yellow]Message:[/yellow] {escape(issue.message)}")

        block = self.context.render(content, issue)
        if not block.lines:
            return

        self.console.print("\nContext:")
        self._plain(SEPARATOR)
        for line in block.lines:
            self._plain(line.rendered, 'bold' if line.is_issue_line else 'dim')
            if line.is_issue_line and block.pointer:
                self._plain(block.pointer, 'red bold')
        self._plain(SEPARATOR)

    def render_summary(self, result: PipelineResult, max_issues: int) -> None:
        if result.is_valid:
            self.console.print("[green bold]✅ XML is well-formed![/green bold]")
            return

        shown = len(result.issues)
        self.console.print(
            f"\n[red bold]❌ Found {result.total_found} XML issues "
            f"(showing {shown}):[/red bold]"
        )
        if result.truncated:
            self.console.print(
                f"[yellow]Note:[/yellow] {result.hidden_count} more issue(s) exist "
                f"beyond the limit of {max_issues}. "
                f"Run with --max-errors={result.total_found} or --max-errors=0 to see more."
            )

        if self.config.show_tips:
            self._render_tips()

    def render_error(self, message: str) -> None:
        self.console.print(f"[red bold]❌ Error:[/red bold] {escape(message)}")

    def _render_tips(self) -> None:
        self.console.print("\n[bold]Common XML issues detected by this validator:[/bold]")
        for problem in DETECTED_PROBLEMS:
            self._plain(f"  - {problem}")
        self.console.print("\n[bold]Correction tips:[/bold]")
        for tip in CORRECTION_TIPS:
            self._plain(f"  - {tip}")
        self._plain(f"\n{CLOSING_NOTE}")


class JsonReporter(Reporter):
    """Machine-readable report: a single JSON object written at the end."""

    def __init__(self, config: FormatterConfig, stream: Optional[TextIO] = None):
        super().__init__(config)
        self.stream = stream or sys.stdout
        self.context = ContextRenderer(config.context_lines)
        self._issues: list[dict] = []

    def render_header(self, source: str, max_issues: int) -> None:
        pass

    def render_issue(self, issue: Issue, index: int, content: bytes) -> None:
        entry = issue.to_dict()
        entry['index'] = index
        entry['context'] = self.context.render(content, issue).render()
        self._issues.append(entry)

    def render_summary(self, result: PipelineResult, max_issues: int) -> None:
        document = result.to_dict()
        document['max_issues'] = max_issues
        document['issues'] = self._issues
        json.dump(document, self.stream, indent=2, ensure_ascii=False)
        self.stream.write("\n")
        self._issues = []

    def render_error(self, message: str) -> None:
        json.dump({'error': message}, self.stream, indent=2, ensure_ascii=False)
        self.stream.write("\n")


def create_reporter(config: FormatterConfig, console: Optional[Console] = None) -> Reporter:
    """Build the reporter for ``config.output_format``."""
    if config.output_format == 'json':
        return JsonReporter(config)
    if config.output_format == 'text':
        return ConsoleReporter(config, console)
    raise ValueError(f"Unknown output format: {config.output_format}")


__all__ = [
    'FormatterConfig',
    'Reporter',
    'ConsoleReporter',
    'JsonReporter',
    'create_reporter',
    'OUTPUT_FORMATS',
]
