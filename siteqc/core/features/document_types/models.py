# (c) Copyright Datacraft, 2026
"""SQLAlchemy models for the document type catalog."""
from datetime import datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from siteqc.core.db.base import Base
from siteqc.core.utils.tz import utc_now


class DocumentTypeModel(Base):
	__tablename__ = "document_types"

	id: Mapped[str] = mapped_column(String(36), primary_key=True)
	name: Mapped[str] = mapped_column(String(255), unique=True)
	# Ordered property names documents of this type carry
	properties: Mapped[list[str]] = mapped_column(JSON, default=list)
	organization_id: Mapped[str | None] = mapped_column(String(36), index=True)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), default=utc_now, onupdate=utc_now
	)
