"""Conversion pipeline: run context and two-phase engine."""

from .context import ConversionContext
from .engine import ConversionPipeline, EventCallback

__all__ = [
    "ConversionContext",
    "ConversionPipeline",
    "EventCallback",
]
