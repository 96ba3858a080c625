"""
Advocate model.

Represents a service provider listed in the directory.
Rows are created once by the seed script and only read afterwards.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import BigInteger, DateTime, Index, Integer, Text, func, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Advocate(Base):
    """
    Advocate table - one row per directory listing.

    Specialties are stored as a JSON array so the search layer can
    match against the serialized collection.
    """

    __tablename__ = "advocates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(Text, nullable=False)
    degree: Mapped[str] = mapped_column(Text, nullable=False)

    # Column keeps its historical name "payload"
    specialties: Mapped[List[str]] = mapped_column(
        "payload",
        JSONB,
        nullable=False,
        default=list,
        server_default=text("'[]'::jsonb"),
    )

    years_of_experience: Mapped[int] = mapped_column(Integer, nullable=False)

    phone_number: Mapped[int] = mapped_column(BigInteger, nullable=False)

    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        server_default=func.now(),
    )

    __table_args__ = (
        Index("advocates_first_name_idx", "first_name"),
        Index("advocates_last_name_idx", "last_name"),
        Index("advocates_city_idx", "city"),
        Index("advocates_degree_idx", "degree"),
        Index("advocates_experience_idx", "years_of_experience"),
        Index("advocates_name_idx", "last_name", "first_name"),
        Index("advocates_city_experience_idx", "city", "years_of_experience"),
        Index("advocates_degree_experience_idx", "degree", "years_of_experience"),
        Index("advocates_specialties_gin_idx", "payload", postgresql_using="gin"),
    )

    def __repr__(self) -> str:
        return f"<Advocate {self.id} {self.first_name} {self.last_name}>"
