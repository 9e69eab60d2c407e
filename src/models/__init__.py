"""
Models package for poddown

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .directives import DirectiveSpec, DirectiveKind, DIRECTIVE_SPECS
from .blocks import Block, Heading, PlainLine, CodeLine, Directive, Section, CodeBlock
from .examples import UsageExample

__all__ = [
    "ProgramState",
    "pipeline",
    "DirectiveSpec",
    "DirectiveKind",
    "DIRECTIVE_SPECS",
    "Block",
    "Heading",
    "PlainLine",
    "CodeLine",
    "Directive",
    "Section",
    "CodeBlock",
    "UsageExample",
]
