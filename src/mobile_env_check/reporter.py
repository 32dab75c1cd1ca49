from __future__ import annotations
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from .models import CheckResult, SetupReport


class Reporter:
    def __init__(self, console: Console) -> None:
        self.console = console

    @staticmethod
    def _status(r: CheckResult) -> str:
        if r.ok:
            return "✅"
        return "⚠️" if r.probe_failed else "❌"

    def progress(self, result: CheckResult) -> None:
        style = "green" if result.ok else ("yellow" if result.probe_failed else "red")
        self.console.print(Text.assemble(f"{self._status(result)} ", (result.title, style)))

    def report(self, report: SetupReport) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Status", width=8)
        table.add_column("Requirement", style="bold")
        table.add_column("Message")
        for r in report.results:
            table.add_row(self._status(r), r.title, r.message)
        self.console.print(Panel.fit(table, title=Text(report.profile, style="bold blue")))

    def exit_code(self, report: SetupReport) -> int:
        return 0 if report.overall_satisfied else 1

    def summary(self, report: SetupReport) -> None:
        ok = sum(1 for r in report.results if r.ok)
        probe_failed = sum(1 for r in report.results if r.probe_failed)
        missing = len(report.results) - ok - probe_failed
        table = Table(show_header=True, header_style="bold")
        table.add_column("FULFILLED")
        table.add_column("UNFULFILLED")
        table.add_column("PROBE FAILED")
        table.add_row(str(ok), str(missing), str(probe_failed))
        style = "bold green" if report.overall_satisfied else "bold red"
        label = "Setup satisfied" if report.overall_satisfied else "Setup incomplete"
        self.console.print(Panel.fit(table, title=Text(label, style=style)))
