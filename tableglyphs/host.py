# tableglyphs/host.py
"""In-memory host: text buffer, incremental render scheduler, commands.

The decoration engine only talks to its host through a few narrow
interfaces (line access, scanner registration, command interception).
This module provides a small reference host implementing them, used by
the formatter plugin and the tests.

Usage:
    from tableglyphs.host import Editor

    editor = Editor("+---+\\n| a |\\n+---+")
    editor.scheduler.register_incremental_scanner(scanner)
    editor.redisplay()          # scanner(start_line, end_line) per pending span
    editor.buffer.set_line(1, "| b |")   # invalidates lines 0-2
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from .positions import Position
from .regions import LineTableRegions
from .trace import trace as _trace_write


IncrementalScanner = Callable[[int, int], None]
ChangeListener = Callable[[int, int], None]


def _trace(msg: str) -> None:
    _trace_write("Host", msg)


class TextBuffer:
    """Lines of text addressed by (line, column).

    Change listeners are called with the [start, end) line span whose
    content changed; when the line count changes that span runs to the
    end of the buffer.
    """

    def __init__(self, text: str = ""):
        self._lines: List[str] = text.split("\n")
        self._listeners: List[ChangeListener] = []

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def line(self, index: int) -> str:
        if index < 0:
            raise IndexError(f"line index out of range: {index}")
        return self._lines[index]

    def lines(self) -> List[str]:
        return list(self._lines)

    def char_at(self, position: Position) -> Optional[str]:
        if not 0 <= position.line < len(self._lines):
            return None
        text = self._lines[position.line]
        if not 0 <= position.column < len(text):
            return None
        return text[position.column]

    def set_line(self, index: int, text: str) -> None:
        self.replace_lines(index, index + 1, [text])

    def replace_lines(self, start: int, end: int, new_lines: List[str]) -> None:
        """Replace lines [start, end) with new_lines."""
        if start < 0 or end < start or end > len(self._lines):
            raise IndexError(f"invalid line span [{start}, {end})")
        self._lines[start:end] = list(new_lines)
        changed_end = start + len(new_lines)
        if len(new_lines) != end - start:
            # Everything below moved to a different line index.
            changed_end = len(self._lines)
        for listener in list(self._listeners):
            listener(start, changed_end)

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)


class RenderScheduler:
    """Lazy re-render pipeline in the spirit of an editor's redisplay.

    Edited or newly exposed line spans are queued; redisplay() hands the
    pending spans, clipped to the visible window, to every registered
    incremental scanner in the order they were queued.
    """

    def __init__(self, buffer: TextBuffer):
        self._buffer = buffer
        self._scanners: List[IncrementalScanner] = []
        self._pending: List[Tuple[int, int]] = []

    @property
    def scanners(self) -> List[IncrementalScanner]:
        return list(self._scanners)

    @property
    def pending(self) -> List[Tuple[int, int]]:
        return list(self._pending)

    def register_incremental_scanner(self, fn: IncrementalScanner) -> None:
        if fn in self._scanners:
            return
        self._scanners.append(fn)
        # A new scanner has not seen any of the buffer yet.
        self.invalidate(0, self._buffer.line_count)
        _trace(f"register: {len(self._scanners)} scanner(s)")

    def unregister_incremental_scanner(self, fn: IncrementalScanner) -> None:
        if fn in self._scanners:
            self._scanners.remove(fn)
            _trace(f"unregister: {len(self._scanners)} scanner(s)")

    def invalidate(self, start_line: int, end_line: int) -> None:
        if end_line > start_line:
            self._pending.append((start_line, end_line))

    def redisplay(self, start_line: int = 0, end_line: Optional[int] = None) -> int:
        """Render pending spans that fall inside [start_line, end_line).

        Parts of pending spans outside the window stay queued.

        Returns:
            Number of scanner calls made.
        """
        if end_line is None:
            end_line = self._buffer.line_count
        pending, self._pending = self._pending, []
        calls = 0
        for span_start, span_end in pending:
            lo, hi = max(span_start, start_line), min(span_end, end_line)
            if lo >= hi:
                self._pending.append((span_start, span_end))
                continue
            if span_start < lo:
                self._pending.append((span_start, lo))
            if hi < span_end:
                self._pending.append((hi, span_end))
            for scanner in list(self._scanners):
                scanner(lo, hi)
                calls += 1
        return calls


class CommandTable:
    """Function-level interception of host commands.

    intercept(fn, wrapper) installs wrapper(fn) as the implementation
    used by invoke(fn, ...); remove_interception(fn) restores fn.
    """

    def __init__(self):
        self._wrapped: Dict[Callable[..., Any], Callable[..., Any]] = {}

    def intercept(
        self,
        fn: Callable[..., Any],
        wrapper: Callable[[Callable[..., Any]], Callable[..., Any]],
    ) -> None:
        if fn in self._wrapped:
            raise ValueError(f"{getattr(fn, '__name__', fn)!r} is already intercepted")
        self._wrapped[fn] = wrapper(fn)

    def remove_interception(self, fn: Callable[..., Any]) -> None:
        self._wrapped.pop(fn, None)

    def is_intercepted(self, fn: Callable[..., Any]) -> bool:
        return fn in self._wrapped

    def resolve(self, fn: Callable[..., Any]) -> Callable[..., Any]:
        return self._wrapped.get(fn, fn)

    def invoke(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        return self.resolve(fn)(*args, **kwargs)


class Editor:
    """Buffer, table regions, scheduler and command table wired together."""

    def __init__(self, text: str = ""):
        self.buffer = TextBuffer(text)
        self.regions = LineTableRegions(self.buffer)
        self.scheduler = RenderScheduler(self.buffer)
        self.commands = CommandTable()
        self.buffer.add_change_listener(self._on_change)

    def redisplay(self, start_line: int = 0, end_line: Optional[int] = None) -> int:
        return self.scheduler.redisplay(start_line, end_line)

    def _on_change(self, start: int, end: int) -> None:
        # A border's glyph depends on whether the lines next to it are
        # table lines, so the line on each side of an edit is stale too.
        self.scheduler.invalidate(max(0, start - 1),
                                  min(self.buffer.line_count, end + 1))
