"""Persistence des paniers."""

from typing import List, Optional

from sqlalchemy.orm import Session

from models import BasketItem, Product, save_to_db, update_to_db, delete_from_db, commit_to_db


class BasketDao:

    def __init__(self, db: Session):
        self.db = db

    def insert(self, item: BasketItem) -> None:
        save_to_db(item, self.db)

    def update(self, item: BasketItem) -> None:
        update_to_db(item, self.db)

    def delete(self, item: BasketItem) -> None:
        delete_from_db(item, self.db)

    def discard(self, item: BasketItem) -> None:
        """Supprime la ligne au prochain commit."""
        self.db.delete(item)

    def get(self, account_id: int, product_id: int) -> Optional[BasketItem]:
        return (
            self.db.query(BasketItem)
            .filter(BasketItem.account_id == account_id, BasketItem.product_id == product_id)
            .first()
        )

    def get_all(self, account_id: int) -> List[BasketItem]:
        return (
            self.db.query(BasketItem)
            .join(BasketItem.product)
            .filter(BasketItem.account_id == account_id)
            .order_by(Product.name, Product.id)
            .all()
        )

    def commit(self) -> None:
        """Valide en une seule transaction les modifications en attente (achat)."""
        commit_to_db(self.db)
