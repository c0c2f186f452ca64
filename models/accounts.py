from enum import Enum
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from utils.security import hash_passw, verify_passw
from .base import Base

class AccountRole(str, Enum):
    CLIENT = "client"
    ADMIN = "admin"

# ✅ Modèle Account (clients et administrateurs dans la même table)
class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    role = Column(String(16), nullable=False)  # 'client', 'admin'

    first_name = Column(String(64), nullable=False)
    last_name = Column(String(64), nullable=False)
    patronymic = Column(String(64), nullable=True)
    login = Column(String(64), unique=True, nullable=False, index=True)  # Toujours en minuscules
    password = Column(String(128), nullable=False)

    # Champs réservés aux clients
    email = Column(String(64), nullable=True)
    address = Column(String(128), nullable=True)
    phone = Column(String(20), nullable=True)
    deposit = Column(Integer, nullable=True)

    # Champ réservé aux administrateurs
    position = Column(String(64), nullable=True)

    sessions = relationship("UserSession", back_populates="account", cascade="all, delete-orphan")
    basket = relationship("BasketItem", back_populates="account", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Account(id={self.id}, login={self.login}, role={self.role})>"

    @property
    def is_admin(self) -> bool:
        return self.role == AccountRole.ADMIN.value

    @property
    def is_client(self) -> bool:
        return self.role == AccountRole.CLIENT.value

    def set_password(self, plain_password: str):
        """Stocke le mot de passe haché."""
        self.password = hash_passw(plain_password)

    def verify_password(self, plain_password: str) -> bool:
        return verify_passw(plain_password, self.password)
