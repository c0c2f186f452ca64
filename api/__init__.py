from api import accounts, categories, products, purchases, server

__all__ = [
    "accounts",
    "categories",
    "products",
    "purchases",
    "server",
]
