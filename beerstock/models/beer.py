from enum import Enum

from sqlalchemy import CheckConstraint, Enum as SqlEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from beerstock.db.session import Base


class BeerType(str, Enum):
    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"


class Beer(Base):
    __tablename__ = "beers"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_beers_quantity_non_negative"),
        CheckConstraint("max > 0", name="ck_beers_max_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True, index=True)
    brand: Mapped[str] = mapped_column(String(200), nullable=False)
    # capacidad máxima de stock
    max: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    type: Mapped[BeerType] = mapped_column(SqlEnum(BeerType, name="beer_type"), nullable=False)

    def __repr__(self) -> str:
        return f"<Beer id={self.id} name={self.name!r} quantity={self.quantity}/{self.max}>"
