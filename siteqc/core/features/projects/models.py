# (c) Copyright Datacraft, 2026
"""SQLAlchemy models for Projects feature."""
from datetime import date, datetime

from sqlalchemy import Date, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from siteqc.core.db.base import Base, enum_column
from siteqc.core.types import ProjectStatus
from siteqc.core.utils.tz import utc_now


class ProjectModel(Base):
	__tablename__ = "projects"

	id: Mapped[str] = mapped_column(String(36), primary_key=True)
	name: Mapped[str] = mapped_column(String(255))
	client: Mapped[str] = mapped_column(String(255))
	location: Mapped[str] = mapped_column(String(500))
	status: Mapped[ProjectStatus] = mapped_column(
		enum_column(ProjectStatus),
		default=ProjectStatus.NOT_STARTED,
		index=True,
	)
	start_date: Mapped[date] = mapped_column(Date)
	# NULL while the project is ongoing
	end_date: Mapped[date | None] = mapped_column(Date)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), default=utc_now, onupdate=utc_now
	)
