from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base

# Ligne du panier d'un client
class BasketItem(Base):
    __tablename__ = "basket_items"
    __table_args__ = (UniqueConstraint("account_id", "product_id"),)

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    count = Column(Integer, nullable=False, default=1)

    account = relationship("Account", back_populates="basket")
    product = relationship("Product", back_populates="basket_items", lazy="joined")
