"""
Heuristic Perl source detection

Decides whether an indented block found outside SYNOPSIS/EXAMPLES looks
like Perl worth surfacing as a usage example. This is a heuristic, not a
grammar: a block passes when any one signature matches.
"""

import re
from dataclasses import dataclass
from typing import List, Pattern


@dataclass(frozen=True)
class SignatureSpec:
    """
    A single Perl signature

    Attributes:
        name: Short identifier, reported by signatures_match()
        pattern: Compiled regex searched anywhere in the block
        description: Human-readable description
    """
    name: str
    pattern: Pattern[str]
    description: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


SOURCE_SIGNATURES: List[SignatureSpec] = [
    SignatureSpec('use', re.compile(r'use\s+\w+'), 'use/import declaration'),
    SignatureSpec('my', re.compile(r'my\s+\$\w+'), 'lexical scalar declaration'),
    SignatureSpec('scalar', re.compile(r'\$\w+'), 'scalar variable'),
    SignatureSpec('array', re.compile(r'@\w+'), 'array variable'),
    SignatureSpec('hash', re.compile(r'%\w+'), 'hash variable'),
    SignatureSpec('arrow', re.compile(r'->\w+'), 'method call'),
    SignatureSpec('sub', re.compile(r'\bsub\s+\w+'), 'subroutine declaration'),
    SignatureSpec('print', re.compile(r'print\s+'), 'print statement'),
]


def source_looksLike(text: str) -> bool:
    """
    Check whether text resembles Perl source

    Example:
        >>> source_looksLike("my $dbh = DBI->connect($dsn);")
        True
        >>> source_looksLike("This is plain prose, indented.")
        False
    """
    return any(signature.matches(text) for signature in SOURCE_SIGNATURES)


def signatures_match(text: str) -> List[str]:
    """Names of every signature that matches text, in signature order"""
    return [signature.name for signature in SOURCE_SIGNATURES if signature.matches(text)]
