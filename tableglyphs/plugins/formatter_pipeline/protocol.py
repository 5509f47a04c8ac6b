# tableglyphs/plugins/formatter_pipeline/protocol.py
"""Protocol definition for streaming formatter plugins.

Formatter plugins process output text in a streaming pipeline. Each formatter
receives chunks incrementally and decides whether to:
- Pass through immediately (yield chunk as-is)
- Buffer internally (yield nothing, accumulate)
- Emit processed content (yield transformed text when ready)

Plain text flows through immediately while table blocks are held back
until the whole block is known, since a border's glyph depends on the
lines around it.
"""

from typing import Any, Dict, Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class FormatterPlugin(Protocol):
    """Protocol for streaming formatter plugins.

    Each formatter has a unique name, a priority (lower runs first),
    processes chunks via process_chunk(), emits leftovers via flush()
    and clears state via reset().
    """

    @property
    def name(self) -> str:
        ...

    @property
    def priority(self) -> int:
        """Execution priority. Lower values run first.

        Suggested ranges:
        - 0-19: Pre-processing (normalization, encoding fixes)
        - 20-39: Structural formatting (tables)
        - 40-79: Everything else
        """
        ...

    def process_chunk(self, chunk: str) -> Iterator[str]:
        """Process an incoming chunk, yielding zero or more output chunks."""
        ...

    def flush(self) -> Iterator[str]:
        """Emit any buffered content at end of stream."""
        ...

    def reset(self) -> None:
        ...


@runtime_checkable
class ConfigurableFormatter(FormatterPlugin, Protocol):
    """Extended protocol for formatters that support configuration."""

    def initialize(self, config: Optional[Dict[str, Any]] = None) -> None:
        ...

    def shutdown(self) -> None:
        ...
