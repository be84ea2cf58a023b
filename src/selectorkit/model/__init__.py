from selectorkit.model.category import Category, SINGLETON_CATEGORIES
from selectorkit.model.selector import Selector
from selectorkit.model.stringifiable import Stringifiable

__all__ = ["Category", "SINGLETON_CATEGORIES", "Selector", "Stringifiable"]
