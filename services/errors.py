"""Erreurs métier levées par les services."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NOT_LOGGED_IN = "NotLoggedIn"
    NOT_ADMIN = "NotAdmin"
    NOT_CLIENT = "NotClient"
    LOGIN_ALREADY_IN_USE = "LoginAlreadyInUse"
    USER_NOT_FOUND = "UserNotFound"
    WRONG_PASSWORD = "WrongPassword"
    CATEGORY_NOT_FOUND = "CategoryNotFound"
    SAME_CATEGORY_NAME = "SameCategoryName"
    SECOND_LEVEL_SUBCATEGORY = "SecondLevelSubcategory"
    CATEGORY_TO_SUBCATEGORY = "CategoryToSubcategory"
    EDIT_CATEGORY_EMPTY = "EditCategoryEmpty"
    PRODUCT_NOT_FOUND = "ProductNotFound"
    WRONG_PRODUCT_INFO = "WrongProductInfo"
    NOT_ENOUGH_PRODUCT = "NotEnoughProduct"
    NOT_ENOUGH_MONEY = "NotEnoughMoney"


class ServiceError(Exception):
    """Violation d'une règle métier.

    Args:
        kind: Code de l'erreur.
        field: Nom du champ de la requête en cause, s'il y en a un.
    """

    def __init__(self, kind: ErrorKind, field: Optional[str] = None):
        super().__init__(f"{kind.value}" + (f" ({field})" if field else ""))
        self.kind = kind
        self.field = field
