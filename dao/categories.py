"""Persistence des catégories."""

from typing import List, Optional

from sqlalchemy.orm import Session

from models import Category, save_to_db, update_to_db, delete_from_db


class CategoryDao:

    def __init__(self, db: Session):
        self.db = db

    def insert(self, category: Category) -> None:
        save_to_db(category, self.db)

    def update(self, category: Category) -> None:
        update_to_db(category, self.db)

    def delete(self, category: Category) -> None:
        delete_from_db(category, self.db)

    def get(self, category_id: int) -> Optional[Category]:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def get_by_name(self, name: str) -> Optional[Category]:
        return self.db.query(Category).filter(Category.name == name).first()

    def exists(self, name: str) -> bool:
        return self.get_by_name(name) is not None

    def get_all(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.name).all()
