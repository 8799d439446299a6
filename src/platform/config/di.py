"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.order.driven_adapter.message_queue.order_event_publisher_impl import (
    OrderEventPublisherImpl,
)
from src.service.order.driven_adapter.payment.midtrans_payment_gateway_impl import (
    MidtransPaymentGatewayImpl,
)
from src.service.order.driven_adapter.repo.order_query_repo_impl import OrderQueryRepoImpl
from src.service.order.driven_adapter.scheduler.cloud_tasks_scheduler_impl import (
    CloudTasksSchedulerImpl,
)
from src.service.order.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database (session factory for repositories that open their own sessions)
    database = providers.Singleton(Database)

    # Query repositories (stateless - use session_factory per call)
    order_query_repo = providers.Singleton(
        OrderQueryRepoImpl, session_factory=database.provided.session
    )

    # External collaborators
    payment_gateway = providers.Singleton(MidtransPaymentGatewayImpl)
    task_scheduler = providers.Singleton(CloudTasksSchedulerImpl)

    # Message Queue Publishers
    order_event_publisher = providers.Singleton(OrderEventPublisherImpl)

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
