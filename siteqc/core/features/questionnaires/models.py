# (c) Copyright Datacraft, 2026
"""SQLAlchemy models for Questionnaires feature."""
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from siteqc.core.db.base import Base, enum_column
from siteqc.core.types import EventType, Relation
from siteqc.core.utils.tz import utc_now


class QuestionnaireModel(Base):
	__tablename__ = "questionnaires"

	id: Mapped[str] = mapped_column(String(36), primary_key=True)
	name: Mapped[str] = mapped_column(String(255))
	description: Mapped[str] = mapped_column(Text, default="")
	event_type: Mapped[EventType | None] = mapped_column(enum_column(EventType), index=True)
	organization_id: Mapped[str | None] = mapped_column(String(36), index=True)
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), default=utc_now, onupdate=utc_now
	)

	questions: Mapped[list["QuestionModel"]] = relationship(
		order_by="QuestionModel.position",
		cascade="all, delete-orphan",
		passive_deletes=True,
		lazy="selectin",
	)


class QuestionModel(Base):
	__tablename__ = "questions"

	id: Mapped[str] = mapped_column(String(36), primary_key=True)
	questionnaire_id: Mapped[str] = mapped_column(
		String(36),
		ForeignKey("questionnaires.id", ondelete="CASCADE"),
		index=True,
	)
	position: Mapped[int] = mapped_column(Integer, default=0)

	# Left operand
	document_1_id: Mapped[str] = mapped_column(
		String(36),
		ForeignKey("document_types.id", ondelete="RESTRICT"),
	)
	property_1: Mapped[str] = mapped_column(String(255))
	relation: Mapped[Relation] = mapped_column(enum_column(Relation))

	# Right operand: either a document property or a fixed value
	document_2_id: Mapped[str | None] = mapped_column(
		String(36),
		ForeignKey("document_types.id", ondelete="RESTRICT"),
	)
	property_2: Mapped[str | None] = mapped_column(String(255))
	comparison_value: Mapped[str | None] = mapped_column(Text)

	# Last observed left operand
	system_value: Mapped[str] = mapped_column(Text, default="")
	created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), default=utc_now, onupdate=utc_now
	)
