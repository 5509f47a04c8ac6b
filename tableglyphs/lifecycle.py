# tableglyphs/lifecycle.py
"""Mode lifecycle: turning table decoration on and off.

TableGlyphMode owns the on/off state for one host. While active it keeps
exactly one scanner registered with the host's render scheduler and one
interception on the host's realign command; while inactive it keeps
none and no decorations remain.

Realign rewrites table text, so decorations over that table must not
be updated while it runs. The wrapped realign suspends decoration for
the table, runs the real command, then restores decoration whether or
not the command raised. A realign that deactivates the mode stays off.

Usage:
    from tableglyphs.host import Editor
    from tableglyphs.lifecycle import TableGlyphMode

    editor = Editor(text)
    mode = TableGlyphMode.for_editor(editor, realign=my_realign)
    mode.activate()
    editor.redisplay()
    editor.commands.invoke(my_realign, Position(3, 0))
    mode.deactivate()
"""

import functools
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Iterator, Optional, Protocol, Tuple, Union

from .decorations import DecorationApplier
from .glyphs import GlyphSet, SINGLE
from .positions import Position
from .regions import LineSource, TableRegions, table_bounds
from .scanner import RegionScanner
from .trace import trace as _trace_write


RealignFn = Callable[..., Any]


def _trace(msg: str, include_traceback: bool = False) -> None:
    _trace_write("TableGlyphMode", msg, include_traceback=include_traceback)


class ModeState(Enum):
    """Decoration mode state."""
    INACTIVE = "inactive"
    ACTIVE = "active"
    SUSPENDED = "suspended"   # Active, but paused around a realign


class ModeError(RuntimeError):
    """Raised when decoration could not be restored after a realign."""


class ScannerScheduler(Protocol):
    def register_incremental_scanner(self, fn: Callable[[int, int], None]) -> None:
        ...

    def unregister_incremental_scanner(self, fn: Callable[[int, int], None]) -> None:
        ...


class CommandInterceptor(Protocol):
    def intercept(
        self, fn: RealignFn, wrapper: Callable[[RealignFn], RealignFn]
    ) -> None:
        ...

    def remove_interception(self, fn: RealignFn) -> None:
        ...


class TableGlyphMode:
    """Explicit decoration mode for one host buffer.

    Args:
        source: Buffer lines.
        regions: Boundary finder.
        scheduler: Host render scheduler the scanner is registered with.
        commands: Host command table used to intercept realign.
        realign: The host's realign command. Its first argument must be
            a Position (or line number) inside the table to realign.
        glyphs: Initial glyph set.
        applier: Decoration store; a fresh one is created if omitted.
    """

    def __init__(
        self,
        source: LineSource,
        regions: TableRegions,
        scheduler: ScannerScheduler,
        commands: CommandInterceptor,
        realign: RealignFn,
        glyphs: GlyphSet = SINGLE,
        applier: Optional[DecorationApplier] = None,
    ):
        self._source = source
        self._regions = regions
        self._scheduler = scheduler
        self._commands = commands
        self._realign = realign
        self.applier = applier if applier is not None else DecorationApplier()
        self.scanner = RegionScanner(source, regions, self.applier, glyphs)
        self._state = ModeState.INACTIVE

    @classmethod
    def for_editor(
        cls, editor: Any, realign: RealignFn, glyphs: GlyphSet = SINGLE
    ) -> "TableGlyphMode":
        """Build a mode wired to a tableglyphs.host.Editor."""
        return cls(
            editor.buffer,
            editor.regions,
            editor.scheduler,
            editor.commands,
            realign,
            glyphs=glyphs,
        )

    @property
    def state(self) -> ModeState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state is not ModeState.INACTIVE

    @property
    def glyphs(self) -> GlyphSet:
        return self.scanner.glyphs

    def activate(self) -> None:
        if self._state is not ModeState.INACTIVE:
            return
        self._scheduler.register_incremental_scanner(self.scanner)
        try:
            self._commands.intercept(self._realign, self.wrap_realign)
        except Exception:
            self._scheduler.unregister_incremental_scanner(self.scanner)
            raise
        self._state = ModeState.ACTIVE
        _trace("activated")

    def deactivate(self) -> None:
        if self._state is ModeState.INACTIVE:
            return
        self._teardown()
        _trace("deactivated")

    def toggle(self) -> bool:
        """Flip the mode; returns the new active flag."""
        if self.active:
            self.deactivate()
        else:
            self.activate()
        return self.active

    def set_glyph_set(self, glyphs: GlyphSet) -> None:
        """Swap the whole glyph set, redecorating the buffer when active.

        While suspended the swap takes effect when decoration resumes.
        """
        self.scanner.glyphs = glyphs
        if self._state is ModeState.ACTIVE:
            self.scanner(0, self._source.line_count)

    def wrap_realign(self, fn: RealignFn) -> RealignFn:
        """Return fn wrapped so decoration is suspended while it runs."""

        @functools.wraps(fn)
        def wrapped(position: Union[Position, int], *args: Any, **kwargs: Any) -> Any:
            with self.suspended(position):
                return fn(position, *args, **kwargs)

        return wrapped

    @contextmanager
    def suspended(self, position: Union[Position, int]) -> Iterator[None]:
        """Pause decoration of the table at position for the block.

        Outside the ACTIVE state this does nothing, so a realign nested in
        another realign runs as a plain call. Decoration is resumed on
        exit unless the block deactivated the mode; an exception from the
        block propagates as is.
        """
        if self._state is not ModeState.ACTIVE:
            yield
            return

        position = _as_position(position)
        glyphs = self.scanner.glyphs
        self._state = ModeState.SUSPENDED
        self._scheduler.unregister_incremental_scanner(self.scanner)
        bounds = self._table_bounds(position)
        if bounds is not None:
            self.applier.remove_lines(*bounds)
        _trace(f"suspended for table {bounds}")

        try:
            yield
        except BaseException:
            self._resume(position, glyphs, block_failed=True)
            raise
        self._resume(position, glyphs, block_failed=False)

    def _resume(self, position: Position, glyphs: GlyphSet, block_failed: bool) -> None:
        if self._state is not ModeState.SUSPENDED:
            # The block turned the mode off (and maybe on again).
            _trace(f"not resuming, mode is {self._state.value}")
            return
        try:
            self._scheduler.register_incremental_scanner(self.scanner)
        except Exception as exc:
            _trace("re-registering scanner failed, deactivating",
                   include_traceback=True)
            self._teardown()
            if block_failed:
                return
            raise ModeError("could not resume table decoration after realign") from exc

        self._state = ModeState.ACTIVE
        if self.scanner.glyphs != glyphs:
            bounds: Optional[Tuple[int, int]] = (0, self._source.line_count)
        else:
            bounds = self._table_bounds(position)
        if bounds is not None:
            self.scanner(*bounds)
        _trace(f"resumed for lines {bounds}")

    def _teardown(self) -> None:
        self._scheduler.unregister_incremental_scanner(self.scanner)
        self._commands.remove_interception(self._realign)
        self.applier.remove_all()
        self._state = ModeState.INACTIVE

    def _table_bounds(self, position: Position) -> Optional[Tuple[int, int]]:
        try:
            return table_bounds(self._regions, position)
        except Exception:
            _trace(f"no table at {position}", include_traceback=True)
            return None


def _as_position(position: Union[Position, int]) -> Position:
    if isinstance(position, Position):
        return position
    return Position(int(position), 0)
