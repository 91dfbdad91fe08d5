# (c) Copyright Datacraft, 2026
"""Enumerations shared across features."""
from enum import Enum


class ProjectStatus(str, Enum):
	NOT_STARTED = "Not Started"
	IN_PROGRESS = "In Progress"
	COMPLETED = "Completed"
	CANCELLED = "Cancelled"


class EventType(str, Enum):
	PVV = "PVV"
	GWMS = "GWMS"
	DRILLING = "Drilling"
	SV_SAMPLING = "SV_Sampling"
	EXCAVATION = "Excavation"
	SURVEY = "Survey"


class DocumentStatus(str, Enum):
	NOT_UPLOADED = "Not Uploaded"
	PROCESSING = "Processing"
	PARSED = "Parsed"
	# Parsing failed; the document can be sent back to processing
	FAILED = "Failed"


class FileFormat(str, Enum):
	PDF = "PDF"
	EXCEL = "Excel"
	WORD = "Word"
	CSV = "CSV"
	IMAGE = "Image"


class Relation(str, Enum):
	"""Comparison applied by a question."""
	EQUALS = "Equals"
	NOT_EQUALS = "Not Equals"
	CONTAINS = "Contains"
	GREATER_THAN = ">"
	LESS_THAN = "<"


class QAQCResult(str, Enum):
	PASSED = "Passed"
	FAILED = "Failed"


class ParseFailurePolicy(str, Enum):
	"""How a document whose parsing failed is treated during evaluation."""
	MISSING = "missing"
	ERROR = "error"
