from passlib.context import CryptContext
from jose import jwt, JWTError

from restoadmin.core.config import settings
from restoadmin.core.exceptions import SessionParseError

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS
)

def _normalize_password(password: str) -> str:
    """
    bcrypt max 72 BYTE sınırı vardır.
    UTF-8 güvenli truncate.
    """
    return password.encode("utf-8")[:72].decode("utf-8", errors="ignore")

def hash_password(password: str) -> str:
    return pwd_context.hash(_normalize_password(password))

def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(_normalize_password(password), hashed)


def sign_value(value: str) -> str:
    # cookie'ye yazılan session JSON'u imzalanır, içerik değiştirilemez
    return jwt.encode({"v": value}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def unsign_value(token: str) -> str:
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        raise SessionParseError("Invalid session signature")

    value = payload.get("v")
    if not isinstance(value, str):
        raise SessionParseError("Malformed session payload")
    return value
