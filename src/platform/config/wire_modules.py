"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.order.app.command import (
    on_payment_notification_use_case,
    place_order_use_case,
)
from src.service.order.app.query import get_many_order_use_case
from src.service.order.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    place_order_use_case,
    on_payment_notification_use_case,
    get_many_order_use_case,
    role_auth,
]
