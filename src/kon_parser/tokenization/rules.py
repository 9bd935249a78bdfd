"""Character adjacency rules for the KON tokenizer.

A rule is a pair of character predicates ``(first, follow)``. Two adjacent
characters belong to the same token when some rule accepts the pair: the
left character matches ``first`` and the right one matches ``follow``. The
rule table is plain data so it can be inspected and tested on its own.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Tuple

CharPredicate = Callable[[str], bool]

NEWLINE = "\n"


def is_letter(char: str) -> bool:
    return char.isalpha()


def is_digit(char: str) -> bool:
    return char.isdecimal()


def is_sign(char: str) -> bool:
    return char in "+-"


def is_blank(char: str) -> bool:
    """Whitespace other than a newline."""
    return char.isspace() and char != NEWLINE


def is_char(expected: str) -> CharPredicate:
    """Build a predicate matching exactly one character."""

    def predicate(char: str) -> bool:
        return char == expected

    predicate.__name__ = f"is_{expected!r}"
    return predicate


@dataclass(frozen=True)
class CharRule:
    """Directed adjacency rule: a ``first`` character may be followed by a ``follow`` one."""

    first: CharPredicate
    follow: CharPredicate
    name: str = ""

    def accepts(self, previous: str, char: str) -> bool:
        return self.first(previous) and self.follow(char)


@dataclass(frozen=True)
class RuleSet:
    """Ordered, immutable table of adjacency rules."""

    rules: Tuple[CharRule, ...] = ()

    def directed(self, first: CharPredicate, follow: CharPredicate, name: str = "") -> "RuleSet":
        """Return a new rule set extended with ``first`` → ``follow``."""
        return RuleSet(self.rules + (CharRule(first, follow, name),))

    def same(self, predicate: CharPredicate, name: str = "") -> "RuleSet":
        """Return a new rule set where runs of ``predicate`` characters aggregate."""
        return self.directed(predicate, predicate, name)

    def symmetric(self, first: CharPredicate, second: CharPredicate, name: str = "") -> "RuleSet":
        """Return a new rule set where ``first`` and ``second`` characters may alternate."""
        return RuleSet(
            self.rules
            + (CharRule(first, second, name), CharRule(second, first, name))
        )

    def extend(self, rules: Iterable[CharRule]) -> "RuleSet":
        return RuleSet(self.rules + tuple(rules))

    def accepts(self, previous: str, char: str) -> bool:
        """Check whether ``char`` continues a token whose last character is ``previous``."""
        return any(rule.accepts(previous, char) for rule in self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)


KON_RULES = (
    RuleSet()
    .directed(is_letter, is_digit, "identifier-digits")
    .directed(is_sign, is_digit, "signed-number")
    .same(is_letter, "letters")
    .same(is_digit, "digits")
    .same(is_blank, "blanks")
    .symmetric(is_digit, is_char("."), "decimal")
    .symmetric(is_letter, is_char("_"), "snake-case")
    .symmetric(is_letter, is_char("-"), "kebab-case")
)
