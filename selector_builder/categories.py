from enum import Enum


class SelectorCategory(Enum):
    """
    Fragment kinds of a compound selector, in the only valid append order:

        element#id.class[attr]:pseudoClass::pseudoElement
    """

    ELEMENT = (1, "", "", True)
    ID = (2, "#", "", True)
    CLASS = (3, ".", "", False)
    ATTRIBUTE = (4, "[", "]", False)
    PSEUDO_CLASS = (5, ":", "", False)
    PSEUDO_ELEMENT = (6, "::", "", True)

    def __init__(self, ordinal: int, prefix: str, suffix: str, singleton: bool):
        self.ordinal = ordinal
        self.prefix = prefix
        self.suffix = suffix
        self.singleton = singleton

    def format(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"
