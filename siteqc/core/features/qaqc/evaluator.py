# (c) Copyright Datacraft, 2026
"""
Question evaluation.

Compares the property of one document against either a fixed value or
the property of a second document and produces a Passed/Failed outcome.
Evaluation is pure: it never touches the database or mutates its inputs.
"""
import logging
import re
from dataclasses import dataclass
from typing import Any

from siteqc.core.types import ParseFailurePolicy, QAQCResult, Relation

logger = logging.getLogger(__name__)

Scalar = str | int | float | bool | None

# Plain decimal or scientific notation; rejects nan, inf and digit separators
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_RELATION_TEXT = {
	Relation.EQUALS: "to equal",
	Relation.NOT_EQUALS: "to differ from",
	Relation.CONTAINS: "to contain",
	Relation.GREATER_THAN: "to be greater than",
	Relation.LESS_THAN: "to be less than",
}


class OperandTypeError(ValueError):
	"""An operand cannot be used with the requested relation."""
	pass


@dataclass(frozen=True)
class DocumentOperand:
	"""A property of the document of a given type."""
	document_type_id: str
	property: str


@dataclass(frozen=True)
class FixedOperand:
	"""A literal value typed into the question."""
	value: str


RightOperand = DocumentOperand | FixedOperand


@dataclass(frozen=True)
class Rule:
	"""A question reduced to what evaluation needs."""
	id: str
	left: DocumentOperand
	relation: Relation
	right: RightOperand

	@classmethod
	def from_question(cls, question: Any) -> "Rule":
		"""
		Build a rule from a stored question.

		Raises ValueError when the question does not carry exactly one
		right operand form.
		"""
		has_document = question.document_2_id is not None and question.property_2 is not None
		has_value = question.comparison_value is not None
		if has_document == has_value:
			raise ValueError(f"Question {question.id} has no single right operand")

		if has_document:
			right: RightOperand = DocumentOperand(question.document_2_id, question.property_2)
		else:
			right = FixedOperand(question.comparison_value)

		return cls(
			id=question.id,
			left=DocumentOperand(question.document_1_id, question.property_1),
			relation=Relation(question.relation),
			right=right,
		)


@dataclass(frozen=True)
class EvaluationPolicy:
	"""Configurable comparison semantics."""
	# Compare Equals numerically when both operands are numbers ("6.80" == "6.8")
	numeric_equality: bool = True
	case_sensitive_contains: bool = True
	parse_failure: ParseFailurePolicy = ParseFailurePolicy.MISSING

	@classmethod
	def from_settings(cls, settings: Any) -> "EvaluationPolicy":
		return cls(
			numeric_equality=settings.numeric_equality,
			case_sensitive_contains=settings.case_sensitive_contains,
			parse_failure=ParseFailurePolicy(settings.parse_failure),
		)


@dataclass(frozen=True)
class Outcome:
	"""Result of evaluating one rule."""
	status: QAQCResult
	comment: str = ""
	# Failure caused by bad data or configuration rather than a QA/QC finding
	error: bool = False
	left_value: str | None = None
	right_value: str | None = None

	@property
	def passed(self) -> bool:
		return self.status == QAQCResult.PASSED

	@classmethod
	def failed(cls, comment: str, **kwargs) -> "Outcome":
		return cls(status=QAQCResult.FAILED, comment=comment, **kwargs)

	@classmethod
	def evaluation_error(cls, comment: str, **kwargs) -> "Outcome":
		return cls(status=QAQCResult.FAILED, comment=comment, error=True, **kwargs)


def normalize(value: Scalar) -> str | None:
	"""Render a property value as comparable text."""
	if value is None:
		return None
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	if isinstance(value, (int, float)):
		return str(value)
	return str(value).strip()


def parse_number(text: str) -> float | None:
	if not _NUMBER.fullmatch(text):
		return None
	return float(text)


class RuleEvaluator:
	"""Evaluates rules against resolved operand values."""

	def __init__(self, policy: EvaluationPolicy | None = None):
		self.policy = policy or EvaluationPolicy()

	def compare(self, relation: Relation, left: str, right: str) -> bool:
		"""
		Apply ``relation`` to two normalized operands.

		Raises OperandTypeError when ``>`` or ``<`` gets a non-numeric operand.
		"""
		match relation:
			case Relation.EQUALS:
				return self._equals(left, right)
			case Relation.NOT_EQUALS:
				return not self._equals(left, right)
			case Relation.CONTAINS:
				if self.policy.case_sensitive_contains:
					return right in left
				return right.casefold() in left.casefold()
			case Relation.GREATER_THAN:
				left_number, right_number = self._numbers(left, right)
				return left_number > right_number
			case Relation.LESS_THAN:
				left_number, right_number = self._numbers(left, right)
				return left_number < right_number

		raise ValueError(f"Unsupported relation: {relation}")

	def evaluate(
		self,
		rule: Rule,
		left_value: Scalar,
		right_value: Scalar = None,
	) -> Outcome:
		"""
		Evaluate ``rule`` for the given operand values.

		For a fixed right operand the rule's own value is used when
		``right_value`` is not given.
		"""
		if isinstance(rule.right, FixedOperand) and right_value is None:
			right_value = rule.right.value

		left = normalize(left_value)
		right = normalize(right_value)

		if left is None:
			return Outcome.failed(f"Property '{rule.left.property}' has no value", right_value=right)
		if right is None:
			label = rule.right.property if isinstance(rule.right, DocumentOperand) else "comparison value"
			return Outcome.failed(f"Property '{label}' has no value", left_value=left)

		try:
			passed = self.compare(rule.relation, left, right)
		except OperandTypeError as e:
			logger.warning(f"Question {rule.id}: {e}")
			return Outcome.evaluation_error(
				f"Evaluation error: non-numeric comparison ({e})",
				left_value=left,
				right_value=right,
			)

		if passed:
			return Outcome(status=QAQCResult.PASSED, left_value=left, right_value=right)
		return Outcome.failed(self.describe_failure(rule, left, right), left_value=left, right_value=right)

	def describe_failure(self, rule: Rule, left: str, right: str) -> str:
		if isinstance(rule.right, DocumentOperand):
			expected = f"{rule.right.property} ('{right}')"
		else:
			expected = f"'{right}'"
		return f"Expected {rule.left.property} {_RELATION_TEXT[rule.relation]} {expected}, got '{left}'"

	def _equals(self, left: str, right: str) -> bool:
		if self.policy.numeric_equality:
			left_number = parse_number(left)
			right_number = parse_number(right)
			if left_number is not None and right_number is not None:
				return left_number == right_number
		return left == right

	def _numbers(self, left: str, right: str) -> tuple[float, float]:
		left_number = parse_number(left)
		right_number = parse_number(right)
		bad = [f"'{text}'" for text, number in ((left, left_number), (right, right_number)) if number is None]
		if bad:
			verb = "is" if len(bad) == 1 else "are"
			raise OperandTypeError(f"{' and '.join(bad)} {verb} not a number")
		return left_number, right_number
