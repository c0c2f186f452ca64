from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base
from utils.security import gen_token

class UserSession(Base):
    __tablename__ = "sessions"

    token = Column(String(64), primary_key=True, index=True, default=gen_token)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)

    account = relationship("Account", back_populates="sessions", lazy="joined")
