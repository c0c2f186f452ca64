from .accounts import AccountDao
from .sessions import SessionDao
from .categories import CategoryDao
from .products import ProductDao
from .baskets import BasketDao

__all__ = ["AccountDao", "SessionDao", "CategoryDao", "ProductDao", "BasketDao"]
