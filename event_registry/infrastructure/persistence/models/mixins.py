"""Column mixins shared by registry tables.

Plain mapped_column attributes on mixins are copied onto each mapped
subclass by SQLAlchemy, so no declared_attr is needed for these columns.
"""

from datetime import datetime

from cuid2 import cuid_wrapper
from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

generate_cuid = cuid_wrapper()

# Matches the tenant ID format accepted at the API edge.
TENANT_ID_LENGTH = 64


class CuidPrimaryKey:
    """Opaque CUID2 surrogate key; callers address rows by (tenant_id, name)."""

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_cuid)


class TenantOwned:
    """Owning tenant. Tenants live in the upstream auth service, so there is no FK."""

    tenant_id: Mapped[str] = mapped_column(
        String(TENANT_ID_LENGTH), nullable=False, index=True
    )


class Timestamped:
    """Store-assigned created_at / updated_at (timezone-aware)."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class TenantRecordModel(CuidPrimaryKey, TenantOwned, Timestamped):
    """Combined mixin for tenant-owned registry tables."""
