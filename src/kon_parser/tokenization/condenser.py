"""Span condensation over token sequences.

The classifier has no notion of quoting, so ``"hello world"`` arrives as
five tokens. A :class:`SpanCondenser` merges every run from a start marker to
its end marker back into a single token.
"""

from typing import Callable, Generic, List, Sequence, TypeVar

from kon_parser.shared.errors import UnterminatedLiteralError

T = TypeVar("T")


def _join(items: Sequence[str]) -> str:
    return "".join(items)


class SpanCondenser(Generic[T]):
    """Re-merges runs of items lying between a start and an end marker.

    When the two markers are equal, spans cannot nest: the next marker always
    closes the open span. When they differ, nested start markers are counted
    and the outermost span is merged as a whole.
    """

    def __init__(
        self,
        start: T,
        end: T,
        merge: Callable[[Sequence[T]], T] = _join,
    ) -> None:
        self.start = start
        self.end = end
        self.merge = merge

    @property
    def nests(self) -> bool:
        return self.start != self.end

    def group(self, items: Sequence[T]) -> List[T]:
        """Return ``items`` with every marker-delimited run merged into one item.

        Raises:
            UnterminatedLiteralError: If a span is still open at the end
        """
        result: List[T] = []
        span: List[T] = []
        span_start = 0
        depth = 0

        for index, item in enumerate(items):
            if depth == 0:
                if item == self.start:
                    span = [item]
                    span_start = index
                    depth = 1
                else:
                    result.append(item)
                continue

            span.append(item)
            if item == self.end:
                depth -= 1
                if depth == 0:
                    result.append(self.merge(span))
            elif self.nests and item == self.start:
                depth += 1

        if depth:
            raise UnterminatedLiteralError(
                str(self.end), str(self.merge(span)), span_start
            )
        return result


STRING_CONDENSER: SpanCondenser[str] = SpanCondenser('"', '"')
