from . import (BaseModel, ConfigDict, EmailStr, Field, Optional, field_validator, re,
               MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH)

NAME_PATTERN = re.compile(r"^[А-Яа-яЁё][А-Яа-яЁё \-]*$")
PHONE_PATTERN = re.compile(r"^(\+7|8)(-?\d){10}$")

def check_name(value: str) -> str:
    if len(value) > MAX_NAME_LENGTH:
        raise ValueError(f"La longueur maximale est de {MAX_NAME_LENGTH} caractères")
    if not NAME_PATTERN.match(value):
        raise ValueError("Seuls les lettres russes, l'espace et le tiret sont autorisés")
    return value

def check_login(value: str) -> str:
    if not value:
        raise ValueError("Le login est obligatoire")
    if len(value) > MAX_NAME_LENGTH:
        raise ValueError(f"La longueur maximale est de {MAX_NAME_LENGTH} caractères")
    if not value.isalnum():
        raise ValueError("Le login ne doit contenir que des lettres et des chiffres")
    return value

def check_password(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Le mot de passe doit contenir au moins {MIN_PASSWORD_LENGTH} caractères")
    if len(value) > MAX_NAME_LENGTH:
        raise ValueError(f"La longueur maximale est de {MAX_NAME_LENGTH} caractères")
    return value

# ✅ Champs communs aux clients et aux administrateurs
class AccountBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    patronymic: Optional[str] = None  # Peut être absent mais pas vide

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return check_name(value)

    @field_validator("patronymic")
    @classmethod
    def validate_patronymic(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else check_name(value)

class ClientFields(AccountBase):
    email: EmailStr
    address: str = Field(..., min_length=1)
    phone: str

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        if not PHONE_PATTERN.match(value):
            raise ValueError("Numéro de téléphone invalide")
        return value

class AdminFields(AccountBase):
    position: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)

class Credentials(BaseModel):
    login: str
    password: str

    @field_validator("login")
    @classmethod
    def validate_login(cls, value: str) -> str:
        return check_login(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password(value)

class ClientCreate(ClientFields, Credentials):
    pass

class AdminCreate(AdminFields, Credentials):
    pass

class PasswordChange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field(..., alias="oldPassword", min_length=1)
    new_password: str = Field(..., alias="newPassword")

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, value: str) -> str:
        return check_password(value)

class ClientEdit(ClientFields, PasswordChange):
    pass

class AdminEdit(AdminFields, PasswordChange):
    pass

# Connexion : pas de règles de format, un mauvais login donne simplement UserNotFound
class LoginRequest(BaseModel):
    login: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class DepositRequest(BaseModel):
    deposit: int = Field(..., ge=0)

class AccountResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    patronymic: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    deposit: Optional[int] = None
    user_type: Optional[str] = Field(None, alias="userType")
