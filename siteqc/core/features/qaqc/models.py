# (c) Copyright Datacraft, 2026
"""SQLAlchemy models for QA/QC processes."""
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from siteqc.core.db.base import Base, enum_column
from siteqc.core.types import QAQCResult
from siteqc.core.utils.tz import utc_now


class QAQCProcessModel(Base):
	__tablename__ = "qaqc_processes"

	id: Mapped[str] = mapped_column(String(36), primary_key=True)
	name: Mapped[str] = mapped_column(String(255))
	description: Mapped[str] = mapped_column(Text, default="")
	# Time of the latest run
	time: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
	event_id: Mapped[str] = mapped_column(
		String(36),
		ForeignKey("events.id", ondelete="CASCADE"),
		index=True,
	)
	questionnaire_id: Mapped[str] = mapped_column(
		String(36),
		ForeignKey("questionnaires.id", ondelete="CASCADE"),
		index=True,
	)
	result: Mapped[QAQCResult] = mapped_column(enum_column(QAQCResult), index=True)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), default=utc_now, onupdate=utc_now
	)

	results: Mapped[list["ResultModel"]] = relationship(
		order_by="ResultModel.position",
		cascade="all, delete-orphan",
		passive_deletes=True,
		lazy="selectin",
	)


class ResultModel(Base):
	__tablename__ = "qaqc_results"

	id: Mapped[str] = mapped_column(String(36), primary_key=True)
	process_id: Mapped[str] = mapped_column(
		String(36),
		ForeignKey("qaqc_processes.id", ondelete="CASCADE"),
		index=True,
	)
	question_id: Mapped[str] = mapped_column(
		String(36),
		ForeignKey("questions.id", ondelete="CASCADE"),
		index=True,
	)
	position: Mapped[int] = mapped_column(Integer, default=0)
	status: Mapped[QAQCResult] = mapped_column(enum_column(QAQCResult))
	comment: Mapped[str] = mapped_column(Text, default="")
	error: Mapped[bool] = mapped_column(Boolean, default=False)
	left_value: Mapped[str | None] = mapped_column(Text)
	right_value: Mapped[str | None] = mapped_column(Text)
