"""
Usage example model

The record the extractor returns for every code snippet it surfaces.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class UsageExample:
    """
    A titled, optionally described code snippet from a POD document

    Attributes:
        title: Section heading, nearby label line, or a fixed fallback
        code: Dedented snippet text
        language: Always the configured language tag ("perl")
        description: Prose that follows the snippet, or None

    Example:
        UsageExample(
            title="Synopsis",
            code="use DBI;",
            language="perl",
            description="Basic usage example from the module synopsis",
        )
    """
    title: str
    code: str
    language: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form, used for JSON output"""
        return asdict(self)
