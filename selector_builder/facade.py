from typing import Optional

from config.selector_config import SelectorConfig
from selector_builder.selectors import CombinedSelector, SelectorBuilder, Stringifiable
from utils import get_logger


class CssSelectorBuilder:
    """
    Entry points for building CSS selectors.

    Each category method starts a fresh SelectorBuilder at that category:

        css_selector_builder.id('main').class_('container').class_('editable').stringify()
            => '#main.container.editable'

    combine() joins two built selectors (or combinations) with a combinator:

        css_selector_builder.combine(
            css_selector_builder.element('div'), '+', css_selector_builder.element('span')
        ).stringify()
            => 'div + span'
    """

    def __init__(self, config: Optional[SelectorConfig] = None):
        self._config = config or SelectorConfig.default()
        # level is per facade
        self._logger = get_logger(f"selector_builder.{id(self)}", self._config.log_level)

    def _new_builder(self) -> SelectorBuilder:
        return SelectorBuilder(logger=self._logger)

    def element(self, value: str) -> SelectorBuilder:
        return self._new_builder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new_builder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new_builder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._new_builder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new_builder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new_builder().pseudo_element(value)

    def combine(self, first: Stringifiable, combinator: str, second: Stringifiable) -> CombinedSelector:
        if self._config.strict_combinators and combinator not in self._config.allowed_combinators:
            raise ValueError(
                f"Combinator {combinator!r} is not allowed. "
                f"Allowed combinators: {self._config.allowed_combinators}"
            )

        combined = CombinedSelector(first, combinator, second)
        self._logger.debug(f"Combined -> '{combined.stringify()}'")
        return combined


css_selector_builder = CssSelectorBuilder()
