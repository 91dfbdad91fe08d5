# (c) Copyright Datacraft, 2026
"""Declarative base and column helpers."""
from enum import Enum as PyEnum

from sqlalchemy import Enum
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
	pass


def enum_column(enum_cls: type[PyEnum]) -> Enum:
	"""Store a str enum by its value, portable across PostgreSQL and SQLite."""
	return Enum(
		enum_cls,
		native_enum=False,
		length=30,
		values_callable=lambda members: [m.value for m in members],
		validate_strings=True,
	)
