from cProfile import Profile
from io import StringIO
from pathlib import Path
from time import perf_counter_ns

from indenter import Indenter
from indenter.markup import Element, Markup


class Uncached(Indenter):
    """Recreates every indent, for checking the cache gives nothing different."""

    __slots__ = ()

    def _indent(self, index: int) -> str:
        if self._step <= 0 or index < 0:
            return Indenter.empty
        text = self._create()
        self._cache.set(index, text)  # only for the high-water mark
        if self._cache.size() > 0:
            return text
        return Indenter.empty


class Timer:
    def __init__(self):
        self.total = 0
        self.count = 0
        self.start = 0

    def __enter__(self):
        self.start = perf_counter_ns()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.total += perf_counter_ns() - self.start
        self.count += 1

    @property
    def avg(self) -> float:
        return self.total / self.count if self.count else 0

    def times(self, other: "Timer") -> float:
        """how many times slower than `other` on average, zero if nothing to go on."""
        return round(self.avg / other.avg, 2) if other.avg else 0


class TimedMarkup:
    def __init__(self, step: int, pstats: Path | None):
        self.cached_timer = Timer()
        self.uncached_timer = Timer()
        self.cached = Markup(Indenter(step))
        self.uncached = Markup(Uncached(step))
        self.pstats = pstats
        self.profile = Profile(builtins=False) if pstats else None

    def encode(self, root: Element) -> str:
        with self.profile if self.profile else self.cached_timer:
            return self.cached.encode(root).getvalue()

    def reference(self, root: Element) -> str | None:
        if self.profile:
            return None
        with self.uncached_timer:
            return self.uncached.encode(root).getvalue()

    def timers(self) -> None:
        print("   Markup")
        if self.pstats and self.profile:
            self.profile.dump_stats(self.pstats)
            print(f"\t(written to {self.pstats})")
        else:
            print(f"\t  cached = {self.cached_timer.avg}")
            print(f"\tuncached = {self.uncached_timer.avg}  ({self.uncached_timer.times(self.cached_timer)})")


def encoded(root: Element, step: int = 3) -> str:
    return Markup(Indenter(step)).encode(root).getvalue()


def lines(markup: str | StringIO) -> list[str]:
    if isinstance(markup, StringIO):
        markup = markup.getvalue()
    return markup.split("\n")
