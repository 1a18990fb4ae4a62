from sqlalchemy import Column, Integer, Numeric, String

from catalogo.core.database import Base

# --- Producto Models ---


class Producto(Base):
    """
    A priced, stocked item belonging to one categoria by reference.
    `categoria_id` points into the categoria service's database, so it is a
    plain column: nothing checks that the categoria exists at write time.
    """

    __tablename__ = "productos"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    precio = Column(Numeric(12, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    categoria_id = Column(Integer, nullable=True, index=True)
