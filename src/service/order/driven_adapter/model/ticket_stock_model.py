from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class TicketStockModel(Base):
    __tablename__ = 'ticket_stock'
    __table_args__ = (
        CheckConstraint('acquired >= 0 AND acquired <= allocation', name='ck_ticket_stock_acquired'),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    event_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    show_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    online_for: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    tier: Mapped[str] = mapped_column(String(20), nullable=False)
    allocation: Mapped[int] = mapped_column(Integer, nullable=False)
    acquired: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    last_stock_update: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class AcquiredTicketModel(Base):
    """Written by downstream fulfillment; only counted here."""

    __tablename__ = 'acquired_ticket'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[str] = mapped_column(String(64), nullable=False)
    show_id: Mapped[str] = mapped_column(String(64), nullable=False)
    ticket_stock_id: Mapped[str] = mapped_column(String(64), nullable=False)
    order_id: Mapped[str] = mapped_column(String(64), nullable=False)
    customer_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
