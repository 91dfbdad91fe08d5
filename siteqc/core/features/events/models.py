# (c) Copyright Datacraft, 2026
"""SQLAlchemy models for Events feature."""
from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from siteqc.core.db.base import Base
from siteqc.core.utils.tz import utc_now


class EventModel(Base):
	__tablename__ = "events"

	id: Mapped[str] = mapped_column(String(36), primary_key=True)
	project_id: Mapped[str] = mapped_column(
		String(36),
		ForeignKey("projects.id", ondelete="CASCADE"),
		index=True,
	)
	name: Mapped[str] = mapped_column(String(255))
	start_datetime: Mapped[datetime] = mapped_column(DateTime(timezone=True))
	end_datetime: Mapped[datetime] = mapped_column(DateTime(timezone=True))
	event_types: Mapped[list[str]] = mapped_column(JSON, default=list)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), default=utc_now, onupdate=utc_now
	)
