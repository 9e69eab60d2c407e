"""
POD directive specification and metadata models

Defines the structural POD commands the segmenter recognises as directives
and which of them carry renderable text after the command word.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional


class DirectiveKind(Enum):
    """
    Kinds of bare POD directives

    Headings (=head1..=head4) are not directives; they are segmented into
    Heading blocks and rendered.
    """
    POD_START = "pod"     # =pod
    CUT = "cut"           # =cut
    LIST_OPEN = "over"    # =over 4
    LIST_CLOSE = "back"   # =back
    LIST_ITEM = "item"    # =item * text


@dataclass(frozen=True)
class DirectiveSpec:
    """
    Specification for a POD directive

    Attributes:
        command: Command word without the leading '='
        kind: DirectiveKind of the command
        description: Human-readable description
        keeps_text: Whether text after the command is document content
                    (=item labels) rather than a directive argument
                    (=over indent width)
    """
    command: str
    kind: DirectiveKind
    description: str
    keeps_text: bool = False


DIRECTIVE_SPECS: Dict[str, DirectiveSpec] = {
    spec.command: spec
    for spec in (
        DirectiveSpec('pod', DirectiveKind.POD_START, 'Start of a POD block'),
        DirectiveSpec('cut', DirectiveKind.CUT, 'End of a POD block'),
        DirectiveSpec('over', DirectiveKind.LIST_OPEN, 'Open an indented list'),
        DirectiveSpec('back', DirectiveKind.LIST_CLOSE, 'Close an indented list'),
        DirectiveSpec('item', DirectiveKind.LIST_ITEM, 'List item', keeps_text=True),
    )
}


def directive_lookup(command: str) -> Optional[DirectiveSpec]:
    """Get the DirectiveSpec for a command word, or None if it is not a directive"""
    return DIRECTIVE_SPECS.get(command)
