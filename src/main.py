"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.message_queue.event_publisher import close_producer
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [tm-order] Starting up...')

    tracing = TracingConfig(service_name=settings.PROJECT_NAME)
    tracing.setup()
    Logger.base.info('📊 [tm-order] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [tm-order] Dependency injection wired')

    tracing.instrument_sqlalchemy(engine=get_engine())
    Logger.base.info('🗄️  [tm-order] Database engine ready + instrumented')

    Logger.base.info('✅ [tm-order] Ready to serve requests')

    yield

    Logger.base.info('🛑 [tm-order] Shutting down...')

    try:
        await close_producer()
        Logger.base.info('📤 [tm-order] Kafka producer closed')
    except Exception as e:
        Logger.base.error(f'❌ [tm-order] Failed to close Kafka producer: {e}')

    await dispose_engine()
    Logger.base.info('🗄️  [tm-order] Database engine disposed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [tm-order] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
