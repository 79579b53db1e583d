"""
Ordered, named regex rules shared by the extractors.

Each extractor is an explicit tuple of MatchRule objects tried in priority
order. A rule's build function turns a regex match into a structured result,
or returns None to let the next rule try.
"""

import re
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class MatchRule(Generic[T]):
    """A named pattern plus the function that builds a result from its match."""

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], T | None]

    def apply(self, text: str) -> T | None:
        """Build a result from the first match of this rule, if any."""
        match = self.pattern.search(text)
        if match is None:
            return None
        return self.build(match)

    def apply_all(self, text: str) -> list[T]:
        """Build results from every non-overlapping match of this rule."""
        results = []
        for match in self.pattern.finditer(text):
            result = self.build(match)
            if result is not None:
                results.append(result)
        return results


def first_match(rules: Iterable[MatchRule[T]], text: str) -> T | None:
    """Return the result of the first rule that produces one."""
    for rule in rules:
        result = rule.apply(text)
        if result is not None:
            return result
    return None


def first_match_with_rule(
    rules: Iterable[MatchRule[T]], text: str
) -> tuple[MatchRule[T], T] | tuple[None, None]:
    """Like first_match, but also report which rule fired."""
    for rule in rules:
        result = rule.apply(text)
        if result is not None:
            return rule, result
    return None, None


def all_matches(rules: Iterable[MatchRule[T]], text: str) -> list[T]:
    """Run every rule over the whole text and concatenate results in rule order."""
    results: list[T] = []
    for rule in rules:
        results.extend(rule.apply_all(text))
    return results


def whole_match(match: re.Match[str]) -> str:
    """Build function returning the matched literal."""
    return match.group(0)
