# (c) Copyright Datacraft, 2026
"""Errors raised by feature services."""


class SiteQCError(Exception):
	"""Base class for service-level errors."""
	pass


class ValidationFailed(SiteQCError):
	"""Input is well-formed but violates a domain rule."""
	pass


class Conflict(SiteQCError):
	"""Operation conflicts with existing data."""
	pass
