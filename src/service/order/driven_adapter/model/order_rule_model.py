from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class OrderRuleRangeDateModel(Base):
    __tablename__ = 'order_rule_range_date'

    event_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class OrderRuleDayModel(Base):
    __tablename__ = 'order_rule_day'

    event_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    day: Mapped[int] = mapped_column(Integer, primary_key=True)  # ISO weekday 1..7
