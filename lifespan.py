import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from models import Base, engine, close_all_connections

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Création des tables manquantes au démarrage
    Base.metadata.create_all(bind=engine)
    logger.info("Tables prêtes")

    yield  # Exécution normale de l'app

    # --- À l'arrêt ---
    close_all_connections()
