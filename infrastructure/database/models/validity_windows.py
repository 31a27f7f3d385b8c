from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Integer, String

from infrastructure.database.database import Base
from infrastructure.database.types import TstzRangeType


class ValidityWindow(Base):
    __tablename__ = "validity_windows"

    id = Column(Integer, primary_key=True, index=True)
    label = Column(String(255), nullable=False)
    period = Column(TstzRangeType(), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_validity_windows_period", "period", postgresql_using="gist"),
    )
