from objtasks.selector.builder import SelectorBuilder
from objtasks.selector.errors import DuplicateSelectorError, OrderError, SelectorError
from objtasks.selector.facade import SelectorFacade, selector_builder
from objtasks.selector.model import Combinator, Stage
from objtasks.selector.parser import parse_selector

__all__ = [
    "SelectorBuilder",
    "SelectorFacade",
    "selector_builder",
    "parse_selector",
    "Stage",
    "Combinator",
    "SelectorError",
    "DuplicateSelectorError",
    "OrderError",
]
