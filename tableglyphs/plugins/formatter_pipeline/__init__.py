# tableglyphs/plugins/formatter_pipeline/__init__.py
"""Streaming formatter pipeline for processing output through registered formatters.

Formatters process chunks incrementally; each can pass chunks through
immediately or hold them back until ready (e.g., a complete table block).

Example (batch):
    pipeline = create_pipeline()
    pipeline.register(create_plugin())
    formatted = pipeline.format(complete_text)
"""

from .protocol import FormatterPlugin, ConfigurableFormatter
from .pipeline import FormatterPipeline, create_pipeline

__all__ = [
    "FormatterPlugin",
    "ConfigurableFormatter",
    "FormatterPipeline",
    "create_pipeline",
]
