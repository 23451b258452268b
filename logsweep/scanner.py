"""Line-oriented statement scanner.

Finds calls to the target logging function (console.log by default) and
optionally strips them. The scanner is a small state machine over lines:

    CODE           - plain code, lines are searched for the target call
    BLOCK COMMENT  - inside /* ... */, lines pass through untouched
    CALL ACTIVE    - inside a call that spans lines, parenthesis depth
                     decides where the statement ends

scan_line() is the whole machine: a pure function from (state, line) to
(new state, outcome). find_matches() and remove_matches() are the two
consumers of the same outcome stream.

Known limitation: string literals are not tokenized. A parenthesis inside
a string counts toward the depth, and a call whose parentheses never
balance consumes the rest of the file.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from logsweep.config import SweepConfig
from logsweep.utils.logging import logger


@dataclass(frozen=True)
class MatchRecord:
    """One detected call. Line numbers are 1-based."""

    start_line: int
    end_line: int
    text: str

    @property
    def is_multiline(self) -> bool:
        return self.end_line != self.start_line

    @property
    def span_label(self) -> str:
        """'Line 7' or 'Lines 7-9', as printed in reports."""
        if self.is_multiline:
            return f"Lines {self.start_line}-{self.end_line}"
        return f"Line {self.start_line}"


@dataclass(frozen=True)
class FileEditResult:
    content: bytes
    changed: bool
    removed_statements: int = 0
    removed_lines: int = 0


@dataclass(frozen=True)
class ScanState:
    """State threaded across the lines of one file.

    in_block_comment and in_call are never both true. While in_call,
    match_start is the 0-based index of the line that opened the call and
    accumulated holds every line of the statement so far.
    """

    in_block_comment: bool = False
    in_call: bool = False
    paren_depth: int = 0
    match_start: int = 0
    accumulated: tuple[str, ...] = ()


@dataclass(frozen=True)
class LineOutcome:
    """What the scanner decided about one line.

    keep is False for every line belonging to a matched call. match is set
    on the line that closes a call.
    """

    keep: bool
    match: MatchRecord | None = None


KEPT = LineOutcome(keep=True)
CONSUMED = LineOutcome(keep=False)


def _balance(text: str, depth: int) -> tuple[int, bool]:
    """Count parentheses from depth; stop when a ')' brings depth to zero.

    Returns (depth, closed).
    """
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return 0, True
    return depth, False


def _ends_in_comment(line: str, config: SweepConfig) -> bool:
    """True if the last comment marker on the line opens a block comment."""
    return line.rfind(config.block_comment_open) > line.rfind(config.block_comment_close)


def truncate_statement(text: str, config: SweepConfig) -> str:
    """Cap statement text at max_statement_length, ending in the ellipsis."""
    if len(text) <= config.max_statement_length:
        return text
    keep = config.max_statement_length - len(config.ellipsis)
    return text[:keep] + config.ellipsis


def scan_line(state: ScanState, line: str, index: int,
              config: SweepConfig) -> tuple[ScanState, LineOutcome]:
    """Advance the scanner by one line.

    Args:
        state: State after the previous line
        line: Line content without its trailing newline
        index: 0-based line index
        config: Scanner settings

    Returns:
        Tuple of (state for the next line, outcome for this line)
    """
    if state.in_call:
        accumulated = state.accumulated + (line,)
        depth, closed = _balance(line, state.paren_depth)
        if not closed:
            return replace(state, paren_depth=depth, accumulated=accumulated), CONSUMED

        record = MatchRecord(
            start_line=state.match_start + 1,
            end_line=index + 1,
            text=truncate_statement("\n".join(accumulated), config),
        )
        return ScanState(), LineOutcome(keep=False, match=record)

    if state.in_block_comment:
        # The terminator line itself is never searched for calls
        if config.block_comment_close in line:
            return replace(state, in_block_comment=_ends_in_comment(line, config)), KEPT
        return state, KEPT

    if line.strip().startswith(config.line_comment):
        return state, KEPT

    if config.block_comment_open in line:
        return replace(state, in_block_comment=_ends_in_comment(line, config)), KEPT

    start = line.find(config.target_call)
    if start == -1:
        return state, KEPT

    if config.line_comment in line[:start]:
        return state, KEPT

    rest = line[start + len(config.target_call):]
    paren = rest.find("(")
    if paren == -1:
        # A bare reference such as `const log = console.log;` is not a call
        return state, KEPT

    depth, closed = _balance(rest[paren:], 0)
    if closed:
        record = MatchRecord(
            start_line=index + 1,
            end_line=index + 1,
            text=truncate_statement(line.strip(), config),
        )
        return state, LineOutcome(keep=False, match=record)

    return ScanState(
        in_call=True,
        paren_depth=depth,
        match_start=index,
        accumulated=(line,),
    ), CONSUMED


def scan_lines(lines: Iterable[str],
               config: SweepConfig) -> Iterator[tuple[str, LineOutcome]]:
    """Run the state machine over lines, yielding each line with its outcome.

    A fresh ScanState is created per call, so nothing leaks between files.
    """
    state = ScanState()
    for index, line in enumerate(lines):
        state, outcome = scan_line(state, line, index, config)
        yield line, outcome

    if state.in_call:
        logger.debug(
            "Unbalanced {call} opened on line {line} consumed the rest of the input",
            call=config.target_call,
            line=state.match_start + 1,
        )


def split_lines(content: bytes, errors: str = "surrogateescape") -> list[str]:
    """Decode content and split it on line feeds. Carriage returns are kept."""
    return content.decode("utf-8", errors).split("\n")


def find_matches(content: bytes, config: SweepConfig) -> Iterator[MatchRecord]:
    """Lazily yield every target call in content, in line order."""
    for _line, outcome in scan_lines(split_lines(content, errors="replace"), config):
        if outcome.match is not None:
            yield outcome.match


def remove_matches(content: bytes, config: SweepConfig) -> FileEditResult:
    """Drop every line that belongs to a target call.

    Kept lines retain their exact bytes and order. Removed lines are
    omitted, not blanked.
    """
    kept: list[str] = []
    statements = 0
    removed = 0

    for line, outcome in scan_lines(split_lines(content), config):
        if outcome.keep:
            kept.append(line)
        else:
            removed += 1
        if outcome.match is not None:
            statements += 1

    if removed == 0:
        return FileEditResult(content=content, changed=False)

    return FileEditResult(
        content="\n".join(kept).encode("utf-8", "surrogateescape"),
        changed=True,
        removed_statements=statements,
        removed_lines=removed,
    )
