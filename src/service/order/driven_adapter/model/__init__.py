"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.order.driven_adapter.model.event_model import (
    ArtistModel,
    EventModel,
    LocationModel,
    PromotorModel,
    ShowModel,
)
from src.service.order.driven_adapter.model.order_model import OrderItemModel, OrderModel
from src.service.order.driven_adapter.model.order_rule_model import (
    OrderRuleDayModel,
    OrderRuleRangeDateModel,
)
from src.service.order.driven_adapter.model.ticket_stock_model import (
    AcquiredTicketModel,
    TicketStockModel,
)

__all__ = [
    'AcquiredTicketModel',
    'ArtistModel',
    'EventModel',
    'LocationModel',
    'OrderItemModel',
    'OrderModel',
    'OrderRuleDayModel',
    'OrderRuleRangeDateModel',
    'PromotorModel',
    'ShowModel',
    'TicketStockModel',
]
