# tableglyphs/plugins/formatter_pipeline/pipeline.py
"""Streaming formatter pipeline.

Usage:
    from tableglyphs.plugins.formatter_pipeline import create_pipeline
    from tableglyphs.plugins.table_glyph_formatter import create_plugin

    pipeline = create_pipeline()
    pipeline.register(create_plugin())

    for chunk in stream:
        for output in pipeline.process_chunk(chunk):
            display(output)
    for output in pipeline.flush():
        display(output)
"""

from typing import List, Optional, Iterator

from .protocol import FormatterPlugin
from tableglyphs.trace import trace as _trace_write


def _trace(msg: str) -> None:
    _trace_write("FormatterPipeline", msg)


class FormatterPipeline:
    """Routes chunks through registered formatters in priority order.

    Output from one formatter becomes input to the next.
    """

    def __init__(self):
        self._formatters: List[FormatterPlugin] = []

    def register(self, formatter: FormatterPlugin) -> None:
        _trace(f"register: {formatter.name} at priority {formatter.priority}")

        # Stable insert: equal priorities keep registration order.
        index = len(self._formatters)
        for i, existing in enumerate(self._formatters):
            if formatter.priority < existing.priority:
                index = i
                break
        self._formatters.insert(index, formatter)

    def unregister(self, name: str) -> bool:
        for i, formatter in enumerate(self._formatters):
            if formatter.name == name:
                self._formatters.pop(i)
                return True
        return False

    def get_formatter(self, name: str) -> Optional[FormatterPlugin]:
        for formatter in self._formatters:
            if formatter.name == name:
                return formatter
        return None

    def list_formatters(self) -> List[str]:
        return [f.name for f in self._formatters]

    def process_chunk(self, chunk: str) -> Iterator[str]:
        yield from self._run(chunk, self._formatters)

    def flush(self) -> Iterator[str]:
        """Flush each formatter in order.

        Content flushed by one formatter still passes through the
        formatters after it, which are flushed afterwards.
        """
        for i, formatter in enumerate(self._formatters):
            for chunk in formatter.flush():
                yield from self._run(chunk, self._formatters[i + 1:])

    def reset(self) -> None:
        for formatter in self._formatters:
            formatter.reset()

    def format(self, text: str) -> str:
        """Process complete text through the pipeline (batch mode)."""
        self.reset()
        parts = list(self.process_chunk(text))
        parts.extend(self.flush())
        return "".join(parts)

    @staticmethod
    def _run(chunk: str, formatters: List[FormatterPlugin]) -> Iterator[str]:
        chunks = [chunk]
        for formatter in formatters:
            chunks = [out for c in chunks for out in formatter.process_chunk(c)]
        yield from chunks


def create_pipeline() -> FormatterPipeline:
    """Factory function to create a FormatterPipeline instance."""
    return FormatterPipeline()
