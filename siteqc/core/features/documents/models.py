# (c) Copyright Datacraft, 2026
"""SQLAlchemy models for Documents feature."""
from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from siteqc.core.db.base import Base, enum_column
from siteqc.core.types import DocumentStatus, FileFormat
from siteqc.core.utils.tz import utc_now


class DocumentModel(Base):
	__tablename__ = "documents"

	id: Mapped[str] = mapped_column(String(36), primary_key=True)
	event_id: Mapped[str] = mapped_column(
		String(36),
		ForeignKey("events.id", ondelete="CASCADE"),
		index=True,
	)
	document_type_id: Mapped[str] = mapped_column(
		String(36),
		ForeignKey("document_types.id", ondelete="RESTRICT"),
		index=True,
	)
	file_name: Mapped[str] = mapped_column(String(255))
	file_format: Mapped[FileFormat] = mapped_column(enum_column(FileFormat))
	file_path: Mapped[str | None] = mapped_column(String(1000))
	# Parsed values keyed by the document type's property names
	properties_values: Mapped[dict] = mapped_column(JSON, default=dict)
	status: Mapped[DocumentStatus] = mapped_column(
		enum_column(DocumentStatus),
		default=DocumentStatus.NOT_UPLOADED,
	)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), default=utc_now, onupdate=utc_now
	)
