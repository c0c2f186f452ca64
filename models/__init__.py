from .base import *
from .accounts import *
from .sessions import *
from .categories import *
from .products import *
from .baskets import *

__all__ = ["Account", "AccountRole", "Base", "BasketItem", "Category", "Product", "ProductCategory",
           "SessionLocal", "UserSession", "engine", "get_db", "save_to_db", "save_all_to_db", "update_to_db",
           "delete_from_db", "commit_to_db", "close_all_connections"]
