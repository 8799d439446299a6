"""
Kafka Publisher

Event publishing using confluent-kafka's AsyncIO Producer.
Values are raw bytes (callers serialize, usually with orjson).

Features:
- Global async producer instance for connection reuse
- Idempotent producer with acks=all for reliability
- Batching via linger.ms and snappy compression
- Trace context carried in message headers
"""

from confluent_kafka.aio import AIOProducer
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import inject_trace_context


_global_producer: AIOProducer | None = None


async def _get_global_producer() -> AIOProducer:
    """Get global async producer instance - avoid creating new producer on every publish"""
    global _global_producer
    if _global_producer is None:
        _global_producer = AIOProducer(
            {
                'bootstrap.servers': settings.KAFKA_BOOTSTRAP_SERVERS,
                # === Reliability Settings ===
                'enable.idempotence': True,
                'acks': settings.KAFKA_ACKS,
                'retries': settings.KAFKA_RETRIES,
                # === Batching for Throughput ===
                'linger.ms': settings.KAFKA_LINGER_MS,
                'batch.size': 16384,
                # === Compression ===
                'compression.type': settings.KAFKA_COMPRESSION_TYPE,
                'max.in.flight.requests.per.connection': 5,
            }
        )
    return _global_producer


async def publish(
    *,
    topic: str,
    key: str,
    value: bytes,
    headers: dict[str, str] | None = None,
) -> None:
    """
    Publish one message (async, non-blocking for the event loop).

    Messages with the same key land on the same partition, so ordering holds per key.

    Example:
        await publish(
            topic="order-paid",
            key=order.transaction_id,
            value=orjson.dumps(payload),
        )
    """
    tracer = trace.get_tracer(__name__)

    with tracer.start_as_current_span(
        'kafka.publish',
        attributes={
            'messaging.system': 'kafka',
            'messaging.destination': topic,
            'messaging.destination_kind': 'topic',
            'messaging.kafka.message_key': key,
        },
    ):
        trace_headers = inject_trace_context(headers=dict(headers or {}))

        producer = await _get_global_producer()
        delivery = await producer.produce(
            topic=topic,
            key=key.encode(),
            value=value,
            headers=list(trace_headers.items()),
        )
        # Wait for the broker ack so delivery errors surface to the caller
        await delivery

        Logger.base.info(f'📤 [KAFKA] Published to {topic} (key={key})')


async def close_producer() -> None:
    global _global_producer
    if _global_producer is not None:
        await _global_producer.flush()
        await _global_producer.close()
        _global_producer = None
        Logger.base.info('Closed async producer')
