from typing import Any, TypeVar
from xml.etree.ElementTree import Element as Parsed, fromstring

from deepdiff import DeepDiff

from indenter.markup import Element

T = TypeVar("T")


def python(any: Element | Parsed) -> dict[str, Any]:
    """Simple Python data for either tree, ignoring the whitespace between tags."""
    match any:
        case Element():
            children = [python(child) for child in any]
            text = any.text
            attributes = any.attributes
            name = any.name
        case Parsed():
            children = [python(child) for child in any]
            text = any.text
            attributes = dict(any.attrib)
            name = any.tag
        case _:
            raise ValueError(f"unexpected type: {type(any)}")
    if children and text is not None and not text.strip():
        text = None  # indent before the first child
    return {"name": name, "attributes": attributes, "text": text or None, "children": children}


def diff_any(was: T, now: T) -> bool:
    if was == now:
        return False
    print()
    print(DeepDiff(was, now, verbose_level=2).pretty())
    return True


def diff_parsed(was: Element, markup: str) -> bool:
    return diff_any(python(was), python(fromstring(markup)))
