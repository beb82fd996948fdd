import logging
from typing import Optional, Protocol

from selector_builder.categories import SelectorCategory
from selector_builder.errors import DuplicateSelectorPartError, SelectorOrderError
from utils import get_logger


class Stringifiable(Protocol):
    """Anything that can be an operand of a combination"""

    def stringify(self) -> str:
        ...


class SelectorBuilder:
    """
    Mutable builder for one compound selector.

    Every category method validates first and appends second, so a rejected
    call leaves the accumulated text untouched. Each successful call returns
    the same instance for chaining.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.text = ""
        self.highest_category = 0
        self.element_used = False
        self.id_used = False
        self.pseudo_element_used = False
        self._logger = logger or get_logger("selector_builder")

    # ==================== CATEGORY METHODS ====================

    def element(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorCategory.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorCategory.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorCategory.CLASS, value)

    def attr(self, value: str) -> "SelectorBuilder":
        """value is the raw attribute expression, e.g. 'href$=".png"'"""
        return self._append(SelectorCategory.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorCategory.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorCategory.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        return self.text

    def __str__(self):
        return self.stringify()

    def __repr__(self):
        return f"SelectorBuilder({self.text!r})"

    # ==================== VALIDATION ====================

    def _is_used(self, category: SelectorCategory) -> bool:
        if category is SelectorCategory.ELEMENT:
            return self.element_used
        if category is SelectorCategory.ID:
            return self.id_used
        if category is SelectorCategory.PSEUDO_ELEMENT:
            return self.pseudo_element_used
        return False

    def _mark_used(self, category: SelectorCategory):
        if category is SelectorCategory.ELEMENT:
            self.element_used = True
        elif category is SelectorCategory.ID:
            self.id_used = True
        elif category is SelectorCategory.PSEUDO_ELEMENT:
            self.pseudo_element_used = True

    def _validate(self, category: SelectorCategory):
        """
        Input: category (SelectorCategory) - category about to be appended
        Functionality: Reject a second singleton or a category that comes before
                       the last appended one
        Output: None, raises OrderOrDuplicateError subclasses
        """
        if category.singleton and self._is_used(category):
            self._logger.warning(f"Rejected duplicate {category.name.lower()} on '{self.text}'")
            raise DuplicateSelectorPartError()

        if self.highest_category > category.ordinal:
            self._logger.warning(f"Rejected {category.name.lower()} after '{self.text}': out of order")
            raise SelectorOrderError()

    def _append(self, category: SelectorCategory, value: str) -> "SelectorBuilder":
        self._validate(category)

        fragment = category.format(value)
        self.text += fragment
        self.highest_category = category.ordinal
        self._mark_used(category)

        self._logger.debug(f"Appended {category.name.lower()} '{fragment}' -> '{self.text}'")
        return self


class CombinedSelector:
    """Two selectors joined by a combinator; only its string form is defined"""

    def __init__(self, first: Stringifiable, combinator: str, second: Stringifiable):
        self.text = f"{first.stringify()} {combinator} {second.stringify()}"

    def stringify(self) -> str:
        return self.text

    def __str__(self):
        return self.stringify()

    def __repr__(self):
        return f"CombinedSelector({self.text!r})"
