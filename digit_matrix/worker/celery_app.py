"""Celery application configuration for background matrix conversion."""

from celery import Celery
from celery.signals import worker_shutdown

from digit_matrix.core.config import settings
from digit_matrix.core.logging import configure_logging
from digit_matrix.processing.populator import shutdown_worker_pool

configure_logging(
    log_level=settings.log_level,
    log_format=settings.log_format,
    service_name=settings.service_name,
    environment=settings.environment,
)

celery_app: Celery = Celery(
    "digit_matrix",
    broker=settings.celery_broker_url,
    include=["digit_matrix.worker.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    worker_hijack_root_logger=False,
    worker_redirect_stdouts=False,
)


@worker_shutdown.connect
def _release_row_pool(**_kwargs: object) -> None:
    shutdown_worker_pool()
