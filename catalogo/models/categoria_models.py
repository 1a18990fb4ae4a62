from sqlalchemy import Column, Integer, String

from catalogo.core.database import Base

# --- Categoria Models ---


class Categoria(Base):
    """
    A named grouping referenced by productos.
    Owned by the categoria service and stored in its own database.
    """

    __tablename__ = "categorias"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
