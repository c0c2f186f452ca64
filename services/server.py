"""Paramètres publics et nettoyage de la base."""

import logging

from config import MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH
from models import Base, commit_to_db
from schemas import SettingsResponse

logger = logging.getLogger(__name__)


class ServerControlService:

    def __init__(self, db):
        self.db = db

    def settings(self) -> SettingsResponse:
        return SettingsResponse(maxNameLength=MAX_NAME_LENGTH, minPasswordLength=MIN_PASSWORD_LENGTH)

    def clear(self) -> None:
        """Vide toutes les tables, les dépendances en premier."""
        for table in reversed(Base.metadata.sorted_tables):
            self.db.execute(table.delete())
        commit_to_db(self.db)
        logger.warning("Base de données vidée")
