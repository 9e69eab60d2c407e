"""
poddown - POD to Markdown converter and usage example extractor
"""

__version__ = "1.0.0"

from .renderer import Renderer, pod_renderer, pod_render
from .extractor import Extractor, example_extractor, examples_extract
from .describe import description_extract
from .log import LOG, state_connectToLogger
from .segmenter import pod_isolate

__all__ = [
    "Renderer",
    "pod_renderer",
    "pod_render",
    "Extractor",
    "example_extractor",
    "examples_extract",
    "description_extract",
    "pod_isolate",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
