"""
Segmenter data models

Typed line blocks, sections and code blocks produced by the segmenter.
Every value is built fresh per call and never shared between calls.
"""

from dataclasses import dataclass
from typing import Union

from .directives import DirectiveKind


@dataclass
class Heading:
    """
    A =head1..=head4 line

    Attributes:
        level: Heading depth, 1 to 4
        text: Heading text with surrounding whitespace removed
        line_number: 1-based source line
        offset: Character offset of the line start in the scanned text
    """
    level: int
    text: str
    line_number: int = 0
    offset: int = 0


@dataclass
class PlainLine:
    """Any line that is not a heading, directive or indented code (blank lines included)"""
    text: str
    line_number: int = 0
    offset: int = 0


@dataclass
class CodeLine:
    """A non-blank line indented by two or more columns; text keeps its indentation"""
    text: str
    line_number: int = 0
    offset: int = 0


@dataclass
class Directive:
    """
    A bare structural directive line (=pod, =cut, =over, =back, =item)

    Attributes:
        kind: DirectiveKind of the command
        argument: Whatever followed the command word, stripped
                  (e.g. "4" for "=over 4", "* First" for "=item * First")
    """
    kind: DirectiveKind
    argument: str = ""
    line_number: int = 0
    offset: int = 0


Block = Union[Heading, PlainLine, CodeLine, Directive]


@dataclass
class Section:
    """
    Body of a named section

    Attributes:
        name: Heading text as written in the document
        text: Everything between the heading line and the terminator
        offset: Character offset of text within the document
    """
    name: str
    text: str
    offset: int = 0


@dataclass
class CodeBlock:
    """
    A maximal run of code lines with the shared indentation removed

    Attributes:
        text: Dedented code, never empty after trimming
        start: Offset of the first raw line of the run in the scanned text
        end: Offset just past the last raw line of the run (before its newline)
    """
    text: str
    start: int = 0
    end: int = 0
