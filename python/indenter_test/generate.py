from random import randrange, choice, choices

from indenter.markup import Element, first, rest

bools = (False, True)
printable = "".join(chr(it) for it in range(32, 127))
starts = "".join(sorted(first - set("xX")))  # xml* is reserved
follows = "".join(sorted(rest))


class Random:
    "single thread only"

    def __init__(self, *, deepest=6, widest=8) -> None:
        self.deepest = deepest
        self.widest = widest

    def _name(self) -> str:
        return choice(starts) + "".join(choices(follows, k=randrange(12)))

    def _attributes(self) -> dict[str, str]:
        result = dict[str, str]()
        for loop in range(randrange(3)):
            result[self._name()] = "".join(choices(printable, k=randrange(20)))
        return result

    def _element(self, depth: int) -> Element:
        element = Element(self._name())
        element.attributes.update(self._attributes())
        if depth < randrange(self.deepest + 1):
            for loop in range(randrange(self.widest + 1)):
                element.append(self._element(depth + 1))
        if not element and choice(bools):
            element.text = "".join(choices(printable, k=randrange(40)))
        return element

    def document(self) -> Element:
        return self._element(0)
