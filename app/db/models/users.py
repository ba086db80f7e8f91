"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les comptes utilisateurs. L'unicité de l'email est garantie par la base
(index unique) : un doublon remonte en IntegrityError au moment de l'insertion.
"""

from sqlmodel import Field

from .base import BaseModelDB

class User(BaseModelDB, table=True):
    email: str = Field(index=True, unique=True, max_length=100)
    hashed_password: str
    name: str = Field(max_length=100)
