"""
Hachage et vérification des mots de passe (bcrypt, sel aléatoire à chaque appel).
"""

import bcrypt

# bcrypt n'utilise que les 72 premiers octets
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, *, rounds: int = 12) -> str:
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("ascii")


def verify_password(password: str, hashed_password: str) -> bool:
    """Comparaison en temps constant ; False si le hash stocké est illisible."""
    try:
        return bcrypt.checkpw(_encode(password), hashed_password.encode("ascii"))
    except (ValueError, TypeError, UnicodeEncodeError):
        return False
