"""EventType ORM model. Named message classification per tenant, soft-archived."""

from typing import Any

from sqlalchemy import JSON, Boolean, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from event_registry.infrastructure.persistence.database import Base
from event_registry.infrastructure.persistence.models.mixins import TenantRecordModel


class EventType(TenantRecordModel, Base):
    """Event type. Table: event_type. Unique (tenant_id, name), archived rows included."""

    __tablename__ = "event_type"

    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    schemas: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    feature_flag: Mapped[str | None] = mapped_column(String(256), nullable=True)

    __table_args__ = (
        UniqueConstraint("tenant_id", "name", name="uq_event_type_tenant_name"),
        Index("ix_event_type_tenant_archived_name", "tenant_id", "archived", "name"),
    )
