from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Optional, Sequence

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models.validity_windows import ValidityWindow
from infrastructure.ranges import TstzRange, extract_from_row

logger = logging.getLogger(__name__)


class ValidityWindowRepository:
    """Repository helpers for labelled TSTZRANGE periods."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_window(self, *, label: str, period: TstzRange) -> ValidityWindow:
        window = ValidityWindow(label=label, period=period)
        self.db.add(window)
        await self.db.flush()
        logger.info("Created validity window %s (%s) for %s", window.id, label, period)
        return window

    async def get_window(self, window_id: int) -> Optional[ValidityWindow]:
        stmt = select(ValidityWindow).where(ValidityWindow.id == window_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_containing(self, instant: datetime) -> Sequence[ValidityWindow]:
        stmt = (
            select(ValidityWindow)
            .where(ValidityWindow.period.contains(instant))
            .order_by(ValidityWindow.id)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def list_overlapping(self, period: TstzRange) -> Sequence[ValidityWindow]:
        stmt = (
            select(ValidityWindow)
            .where(ValidityWindow.period.overlaps(period))
            .order_by(ValidityWindow.id)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def list_within(self, period: TstzRange) -> Sequence[ValidityWindow]:
        stmt = (
            select(ValidityWindow)
            .where(ValidityWindow.period.contained_by(period))
            .order_by(ValidityWindow.id)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def periods_for_label(self, label: str) -> Dict[int, TstzRange]:
        """Read periods through a raw SQL row rather than the mapped column type."""
        result = await self.db.execute(
            text("SELECT id, period::text AS period FROM validity_windows WHERE label = :label"),
            {"label": label},
        )
        return {row.id: extract_from_row(row, "period") for row in result}
