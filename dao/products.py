"""Persistence des produits et de leurs catégories."""

from typing import List, Optional

from sqlalchemy.orm import Session

from models import Product, ProductCategory, save_to_db, save_all_to_db, update_to_db, delete_from_db


class ProductDao:
    """Accès aux produits et à la table d'association produit <-> catégorie."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, product: Product) -> None:
        save_to_db(product, self.db)

    def update(self, product: Product) -> None:
        update_to_db(product, self.db)

    def delete(self, product: Product) -> None:
        delete_from_db(product, self.db)

    def get(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def get_all_with_category(self) -> List[ProductCategory]:
        """Toutes les paires (produit, catégorie) existantes."""
        return self.db.query(ProductCategory).order_by(ProductCategory.id).all()

    def get_all_without_category(self) -> List[Product]:
        return (
            self.db.query(Product)
            .filter(~Product.category_links.any())
            .order_by(Product.id)
            .all()
        )

    def get_categories(self, product_id: int) -> List[ProductCategory]:
        return (
            self.db.query(ProductCategory)
            .filter(ProductCategory.product_id == product_id)
            .order_by(ProductCategory.category_id)
            .all()
        )

    def insert_categories(self, links: List[ProductCategory]) -> None:
        save_all_to_db(links, self.db)

    def delete_category(self, link: ProductCategory) -> None:
        delete_from_db(link, self.db)
