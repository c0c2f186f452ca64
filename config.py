from json import load
from logging import basicConfig, getLevelName
from os import getenv
from os.path import abspath, dirname, join

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = dirname(abspath(__file__))

# Session
SESSION_COOKIE = getenv("SESSION_COOKIE", "SESSIONID")

# Limites des champs
MAX_NAME_LENGTH = int(getenv("MAX_NAME_LENGTH", 50))
MIN_PASSWORD_LENGTH = int(getenv("MIN_PASSWORD_LENGTH", 8))

# Normalisation des numéros de téléphone
PHONE_COUNTRY_CODE = "+7"
PHONE_TRUNK_PREFIX = "8"

# Endpoints de debug (nettoyage de la base)
DEBUG = getenv("DEBUG", "false").lower() in ("1", "true", "yes")

# Configuration du logger
LOG_LEVEL = getenv("LOG_LEVEL", "INFO").upper()
basicConfig(level=getLevelName(LOG_LEVEL))

# Chargement des messages d'erreur
with open(join(BASE_DIR, "errors.json"), "r", encoding="utf-8") as f:
    ERROR_MESSAGES = load(f)

def get_error_message(kind: str) -> str:
    """Message lisible associé à un code d'erreur"""
    return ERROR_MESSAGES.get(kind, kind)
