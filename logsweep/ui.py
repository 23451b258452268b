"""Central UI handler for logsweep.

Single source of truth for Rich console styling. The console writes to
stderr: stdout carries only the per-match, per-update and per-revert lines.

Usage:
    from logsweep.ui import console, print_summary

    print_summary(SweepMode.REPORT, walker.stats)
"""

from rich.console import Console
from rich.theme import Theme

SWEEP_THEME = Theme({
    "error": "bold red",
    "success": "bold green",
})

# Single console instance - import this, don't create your own
console = Console(theme=SWEEP_THEME, stderr=True)


def format_summary(mode: str, stats: dict[str, int]) -> str:
    """One-line, markup-free description of a finished run."""
    if mode == "delete":
        text = f"Updated {stats['files_updated']} files ({stats['matches']} statements removed)"
    elif mode == "revert":
        text = f"Reverted {stats['files_reverted']} files"
    else:
        text = f"Scanned {stats['files_scanned']} files, {stats['matches']} matches"

    if stats.get("entries_skipped"):
        text += f", {stats['entries_skipped']} entries skipped"
    if stats.get("errors"):
        text += f", {stats['errors']} errors"
    return text


def print_summary(mode: str, stats: dict[str, int]) -> None:
    """Print the end-of-run summary, red when any file failed."""
    style = "error" if stats.get("errors") else "success"
    console.print(format_summary(mode, stats), style=style, highlight=False)
