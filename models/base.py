from os import getenv
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv
import logging

# Charger les variables d'environnement
load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL: str = getenv("URL")

# Vérifie que l'URL est présente
if not DATABASE_URL:
    logger.error("La variable d'environnement 'URL' n'est pas définie.")
    raise ValueError("DATABASE_URL non défini.")

def engine_options(url: str) -> dict:
    """Options du moteur selon le type de base"""
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # Une base en mémoire n'existe que sur une seule connexion
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_size": 20,
        "max_overflow": 40,
        "pool_timeout": 90,
        "pool_recycle": 300,
        "pool_pre_ping": True,
    }

engine: Engine = create_engine(DATABASE_URL, **engine_options(DATABASE_URL))

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def close_all_connections():
    """Force la fermeture de toutes les connexions au pool"""
    engine.dispose()
    logger.info("Toutes les connexions ont été fermées")

# Sauvegarde dans la db avec gestion d'erreur
def save_to_db(self, db: Session):
    try:
        db.add(self)
        db.commit()
        db.refresh(self)
    except Exception as e:
        db.rollback()
        logger.error(f"Erreur lors de la sauvegarde : {e}")
        raise e

def save_all_to_db(objects, db: Session):
    try:
        db.add_all(objects)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Erreur lors de la sauvegarde : {e}")
        raise e

def update_to_db(self, db: Session):
    try:
        db.commit()
        db.refresh(self)
    except Exception as e:
        db.rollback()
        logger.error(f"Erreur lors de la mise à jour : {e}")
        raise e

def delete_from_db(self, db: Session):
    try:
        db.delete(self)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Erreur lors de la suppression : {e}")
        raise e

def commit_to_db(db: Session):
    try:
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Erreur lors de la validation : {e}")
        raise e
