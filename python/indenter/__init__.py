from typing import ClassVar

__all__ = ["Indenter"]


class _Cache:
    """Indent strings addressed by stack position, grown on demand.

    Only ever owned by one `Indenter`, so that a given position is only created once.
    """

    __slots__ = ("_list", "_count")

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("cache size can't be negative")
        self._list: list[str | None] = [None] * size
        self._count: int = 0

    def size(self) -> int:
        """highest index ever set, zero while only the first indent exists."""
        return self._count

    def get(self, index: int) -> str | None:
        if 0 <= index < len(self._list):
            return self._list[index]
        return None

    def set(self, index: int, text: str) -> None:
        if index < 0:
            raise IndexError("cache index can't be negative")
        if index >= len(self._list):
            self._resize(max(index * 2, 1))
        if index > self._count:
            self._count = index
        self._list[index] = text

    def _resize(self, size: int) -> None:
        # grows relative to the requested index, not to the current capacity
        self._list.extend([None] * (size - len(self._list)))


class Indenter:
    """Creates indent strings using the stack paradigm.

    Markup is written by pushing before an opening tag and popping before a closing
    tag. Every indent is a line feed followed by `step` spaces per level; each is
    created once per stack position and then reused. With a `step` of zero or less
    the indents are all empty strings and the cache is never touched.

    Pushing at the document level (depth zero) always gives an empty string, as no
    indent is needed before a root element. Popping more than was pushed also gives
    an empty string, unless `strict` in which case it raises `AssertionError`.

    single thread only: each document being written needs its own `Indenter`.
    """

    empty: ClassVar[str] = ""
    __slots__ = ("_cache", "_step", "_width", "_index", "_strict")

    def __init__(self, step: int = 3, size: int = 16, *, strict: bool = False):
        self._cache = _Cache(size if step > 0 else 0)
        self._step = step
        self._width: int = 0
        self._index: int = 0
        self._strict = strict

    @property
    def step(self) -> int:
        return self._step

    @property
    def depth(self) -> int:
        return self._index

    def __len__(self) -> int:
        return max(self._width, 0)

    def __repr__(self) -> str:
        return f"<Indenter depth={self._index} step={self._step} cached={self.cached()}>"

    def cached(self) -> int:
        return self._cache.size()

    def push(self) -> str:
        """indent to write before an opening tag, then move one level deeper."""
        index = self._index
        text = self._indent(index)
        self._index = index + 1
        if self._step > 0:
            self._width += self._step
        return text if index else Indenter.empty

    def pop(self) -> str:
        """move one level shallower, then the indent to write before a closing tag."""
        index = self._index - 1
        if index < 0 and self._strict:
            raise AssertionError("indent can't go negative")
        self._index = index
        if self._step > 0:
            self._width -= self._step
        return self._indent(index)

    def zero(self) -> "Indenter":
        """back to the document level, keeping every indent created so far."""
        self._index = 0
        self._width = 0
        return self

    def _indent(self, index: int) -> str:
        if self._step <= 0 or index < 0:
            return Indenter.empty
        text = self._cache.get(index)
        if text is None:
            text = self._create()
            self._cache.set(index, text)
        if self._cache.size() > 0:
            return text
        return Indenter.empty

    def _create(self) -> str:
        if self._width > 0:
            return "\n" + " " * self._width
        return "\n"
