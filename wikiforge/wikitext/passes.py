# wikiforge/wikitext/passes.py
"""
Named rewrite passes.

Each pipeline is a flat list of pass objects applied in order. A pass receives
the current text and the run state (the ShieldTable for the normalizer, the
table stash for the HTML converter) and returns the new text.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Union

from .shielding import ShieldTable

logger = logging.getLogger(__name__)

# Upper bound for passes that repeat until nothing matches
MAX_FIXED_POINT_ITERATIONS = 100

Replacement = Union[str, Callable[[re.Match], str]]


@dataclass
class RewritePass:
    """Plain regex substitution. ``count=0`` replaces every match."""

    name: str
    pattern: str
    replacement: Replacement
    flags: int = 0
    count: int = 0
    regex: re.Pattern = field(init=False, repr=False)

    def __post_init__(self):
        self.regex = re.compile(self.pattern, self.flags)

    def __call__(self, text: str, state) -> str:
        return self.regex.sub(self.replacement, text, count=self.count)


@dataclass
class ShieldPass:
    """Hide every match behind a placeholder; ``render`` can rewrite what is stored."""

    name: str
    pattern: str
    flags: int = 0
    render: Callable[[re.Match], str] = None
    regex: re.Pattern = field(init=False, repr=False)

    def __post_init__(self):
        self.regex = re.compile(self.pattern, self.flags)

    def __call__(self, text: str, shields: ShieldTable) -> str:
        return shields.shield(text, self.regex, render=self.render)


@dataclass
class FixedPointPass(RewritePass):
    """
    Repeat the substitution while ``guard`` still matches.

    Stops early when a round changes nothing, and after ``limit`` rounds at most.
    The guard defaults to the pass pattern itself.
    """

    guard: str = None
    limit: int = MAX_FIXED_POINT_ITERATIONS

    def __post_init__(self):
        super().__post_init__()
        self.guard_regex = re.compile(self.guard, self.flags) if self.guard else self.regex

    def __call__(self, text: str, state) -> str:
        for _ in range(self.limit):
            if not self.guard_regex.search(text):
                break
            updated = self.regex.sub(self.replacement, text)
            if updated == text:
                break
            text = updated
        else:
            logger.warning(f"Pass '{self.name}' stopped after {self.limit} iterations")
        return text


@dataclass
class FunctionPass:
    """Arbitrary text transform that does not fit a single regex."""

    name: str
    func: Callable[[str, object], str]

    def __call__(self, text: str, state) -> str:
        return self.func(text, state)


def shield_tag(tag: str) -> ShieldPass:
    """Shield ``<tag ...>...</tag>`` blocks, ``tag`` may be a regex fragment."""
    return ShieldPass(
        f"shield <{tag}>",
        rf"<{tag}( [^>]+)?>[\s\S]+?</{tag}>",
        re.IGNORECASE,
    )


def apply_passes(text: str, passes: Sequence, state) -> str:
    """Apply all passes in order"""
    for rewrite in passes:
        text = rewrite(text, state)
    return text


def pass_names(passes: Sequence) -> List[str]:
    return [rewrite.name for rewrite in passes]
