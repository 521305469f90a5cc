# mercado_gaucho/core/security.py

import re
import secrets

import bcrypt

# Токены аутентификации: строка ровно из 64 непробельных символов.
# Генерируем 32 случайных байта в hex.
TOKEN_LENGTH = 64
_TOKEN_RE = re.compile(r"^\S{64}$")


def hash_password(password: str) -> str:
    """Возвращает bcrypt-хеш пароля с новой солью."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode(), password_hash.encode())


def generate_token() -> str:
    return secrets.token_hex(TOKEN_LENGTH // 2)


def is_valid_token_format(token: str) -> bool:
    return bool(_TOKEN_RE.match(token))


def mask_token(token: str) -> str:
    """Для логов: показываем только начало токена."""
    return f"{token[:6]}..."
