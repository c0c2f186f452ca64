import re
from uuid import uuid4

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from config import PHONE_COUNTRY_CODE, PHONE_TRUNK_PREFIX

ph = PasswordHasher()

# ✅ Jeton de session opaque
def gen_token() -> str:
    return str(uuid4())

#✅ Hasher le mot de passe
def hash_passw(password: str) -> str:
    return ph.hash(password)

#✅ Vérifier un mot de passe
def verify_passw(password: str, hashed_password: str) -> bool:
    try:
        return ph.verify(hashed_password, password)
    except (VerificationError, InvalidHashError):
        return False

def normalize_login(login: str) -> str:
    return login.lower()

def normalize_phone(phone: str) -> str:
    """Supprime les tirets et remplace l'indicatif pays par le préfixe national."""
    phone = phone.replace("-", "")
    return re.sub(rf"^{re.escape(PHONE_COUNTRY_CODE)}", PHONE_TRUNK_PREFIX, phone)
