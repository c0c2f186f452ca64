"""Conteneur des services, injecté dans les routes."""

from sqlalchemy.orm import Session

from dao import AccountDao, BasketDao, CategoryDao, ProductDao, SessionDao


class Services:
    """Regroupe tous les services de l'application.

    Tous les services partagent la même session de base : une requête
    correspond à une seule unité de travail.

    Args:
        db: Session SQLAlchemy de la requête courante.
    """

    def __init__(self, db: Session):
        self.db = db

        # Import différé pour éviter les imports circulaires
        from services.guard import AuthorizationGuard
        from services.accounts import AccountService
        from services.categories import CategoryService
        from services.catalog import CatalogService
        from services.purchases import PurchaseService
        from services.server import ServerControlService

        account_dao = AccountDao(db)
        session_dao = SessionDao(db)
        category_dao = CategoryDao(db)
        product_dao = ProductDao(db)
        basket_dao = BasketDao(db)

        self.guard = AuthorizationGuard(session_dao)
        self.accounts = AccountService(self.guard, account_dao, session_dao)
        self.categories = CategoryService(self.guard, category_dao)
        self.catalog = CatalogService(self.guard, product_dao, category_dao)
        self.purchases = PurchaseService(self.guard, account_dao, product_dao, basket_dao)
        self.server = ServerControlService(db)
