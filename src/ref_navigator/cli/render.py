from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from ref_navigator.models import ValidationFinding

console = Console()


def render_findings(findings: Sequence[ValidationFinding]) -> None:
    table = Table(show_lines=False)
    for header in ("file", "line", "column", "code", "message"):
        table.add_column(header)
    for finding in findings:
        table.add_row(
            finding.document.path,
            str(finding.span.start.row + 1),
            str(finding.span.start.column + 1),
            finding.code.value,
            finding.message,
        )
    console.print(table)
    console.print(f"({len(findings)} findings)")
