"""Persistence des sessions."""

from typing import Optional

from sqlalchemy.orm import Session

from models import UserSession, save_to_db, delete_from_db


class SessionDao:
    """Table jeton -> compte."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, token: str) -> Optional[UserSession]:
        return self.db.query(UserSession).filter(UserSession.token == token).first()

    def insert(self, session: UserSession) -> None:
        save_to_db(session, self.db)

    def delete(self, session: UserSession) -> None:
        delete_from_db(session, self.db)
