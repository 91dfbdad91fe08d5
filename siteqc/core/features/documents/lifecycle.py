# (c) Copyright Datacraft, 2026
"""
Document status lifecycle.

Documents move forward through Not Uploaded, Processing and Parsed.
Parsed is terminal. A parse failure may be recorded from Not Uploaded or
Processing, and a failed document may be sent back to Processing.
"""
from siteqc.core.types import DocumentStatus

_FORWARD_ORDER = {
	DocumentStatus.NOT_UPLOADED: 0,
	DocumentStatus.PROCESSING: 1,
	DocumentStatus.PARSED: 2,
}


def can_transition(current: DocumentStatus, target: DocumentStatus) -> bool:
	if current == target:
		return True
	if target == DocumentStatus.FAILED:
		return current in (DocumentStatus.NOT_UPLOADED, DocumentStatus.PROCESSING)
	if current == DocumentStatus.FAILED:
		return target == DocumentStatus.PROCESSING
	return _FORWARD_ORDER[target] > _FORWARD_ORDER[current]


def unknown_properties(values: dict, declared: list[str]) -> list[str]:
	"""Keys of ``values`` the document type does not declare."""
	return [key for key in values if key not in declared]
