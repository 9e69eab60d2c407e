"""
poddown - POD to Markdown converter and usage example extractor

Renders Perl POD documentation as Markdown and pulls out titled Perl usage
examples for display.
"""

__version__ = "1.0.0"

from .lib import (
    Renderer,
    pod_renderer,
    pod_render,
    Extractor,
    example_extractor,
    examples_extract,
    description_extract,
    pod_isolate,
    LOG,
    state_connectToLogger,
)
from .models import UsageExample

__all__ = [
    "Renderer",
    "pod_renderer",
    "pod_render",
    "Extractor",
    "example_extractor",
    "examples_extract",
    "description_extract",
    "pod_isolate",
    "UsageExample",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
