from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base

# ✅ Modèle Product
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(64), nullable=False)
    price = Column(Integer, nullable=False)
    count = Column(Integer, default=0, nullable=False)  # Quantité en stock

    category_links = relationship("ProductCategory", back_populates="product", cascade="all, delete-orphan")
    basket_items = relationship("BasketItem", back_populates="product", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Product(id={self.id}, name={self.name}, price={self.price}, count={self.count})>"

# Table d'association produit <-> catégorie
class ProductCategory(Base):
    __tablename__ = "product_categories"
    __table_args__ = (UniqueConstraint("product_id", "category_id"),)

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)

    product = relationship("Product", back_populates="category_links", lazy="joined")
    category = relationship("Category", back_populates="product_links", lazy="joined")
