from io import StringIO
from string import ascii_letters, digits
from typing import Any
from xml.sax.saxutils import escape, quoteattr

from . import Indenter

__all__ = ["Element", "Markup"]

first = frozenset(ascii_letters + "_")
rest = first | frozenset(digits + "-.")


def legal(name: str) -> bool:
    return bool(name) and name[0] in first and rest.issuperset(name)


class Element(list["Element"]):
    name: str
    attributes: dict[str, str]
    text: str | None  # = None
    __slots__ = ("name", "attributes", "text")

    def __init__(self, name: str, *children: "Element", text: str | None = None, **attributes: Any):
        if not legal(name):
            raise ValueError(f"illegal element name: {name!r}")
        super().__init__(children)
        self.name = name
        self.attributes = {k: str(v) for k, v in attributes.items()}
        self.text = text

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name} #{len(self)}>"


class Markup(StringIO):
    """Writes an `Element` tree as XML, one tag per line, nested by an `Indenter`.

    Only opening tags and the closing tags of elements with children get a line of
    their own; text is written inline so that it reads back unchanged. An element
    holds text or children, never both.
    """

    def __init__(self, indenter: Indenter | None = None):
        super().__init__()
        self.indenter = Indenter() if indenter is None else indenter

    def encode(self, root: Element) -> StringIO:
        self.seek(0)
        self.truncate()
        self.indenter.zero()
        self._element(root)
        return self

    def _element(self, element: Element) -> None:
        if not isinstance(element, Element):
            raise ValueError(f"unexpected type: {type(element)}")
        if element and element.text:
            raise ValueError(f"text and children in element: {element.name}")
        for key in element.attributes:
            if not legal(key):
                raise ValueError(f"illegal attribute name: {key!r}")
        self.write(self.indenter.push())
        self.write("<")
        self.write(element.name)
        for key, value in element.attributes.items():
            self.write(" ")
            self.write(key)
            self.write("=")
            self.write(quoteattr(value))
        if not element and element.text is None:
            self.indenter.pop()
            self.write("/>")
            return
        self.write(">")
        if element.text:
            self.write(escape(element.text))
        for child in element:
            self._element(child)
        indent = self.indenter.pop()
        if element:
            self.write(indent)
        self.write("</")
        self.write(element.name)
        self.write(">")
