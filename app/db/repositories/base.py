from typing import Generic, Type, TypeVar
from sqlmodel import SQLModel, Session

# Type générique pour le modèle (User, Todo, etc.)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique (création) ; les lectures/écritures filtrées
       sont définies dans les repositories concrets.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """
        Crée et persiste (commit) un nouvel enregistrement.
        En cas de violation de contrainte (ex : index unique), la session est
        remise à zéro (rollback) puis l'IntegrityError est propagée.
        """
        entity = self.model(**fields)
        self.session.add(entity)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(entity)
        return entity
