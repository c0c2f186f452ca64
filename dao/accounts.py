"""Persistence des comptes."""

from typing import List, Optional

from sqlalchemy.orm import Session

from models import Account, AccountRole, save_to_db, update_to_db


class AccountDao:
    """Accès à la table des comptes (clients et administrateurs)."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, account: Account) -> None:
        save_to_db(account, self.db)

    def update(self, account: Account) -> None:
        update_to_db(account, self.db)

    def get_by_login(self, login: str) -> Optional[Account]:
        return self.db.query(Account).filter(Account.login == login).first()

    def exists(self, login: str) -> bool:
        return self.db.query(Account.id).filter(Account.login == login).first() is not None

    def get_clients(self) -> List[Account]:
        return (
            self.db.query(Account)
            .filter(Account.role == AccountRole.CLIENT.value)
            .order_by(Account.id)
            .all()
        )
