DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class ValidationError(Exception):
    """Simple validation error with message"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class OrderOrDuplicateError(ValidationError):
    """The selector is not a valid compound selector sequence"""


class DuplicateSelectorPartError(OrderOrDuplicateError):
    def __init__(self, message: str = DUPLICATE_MESSAGE):
        super().__init__(message)


class SelectorOrderError(OrderOrDuplicateError):
    def __init__(self, message: str = ORDER_MESSAGE):
        super().__init__(message)
