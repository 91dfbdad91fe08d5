# (c) Copyright Datacraft, 2026
"""
QA/QC process runner.

Runs every rule of a questionnaire against one snapshot of an event's
documents and aggregates the outcomes: a process passes only when every
rule passes. Each rule yields exactly one outcome, in questionnaire order,
and a rule that cannot be evaluated never stops the others.
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

from siteqc.core.types import DocumentStatus, ParseFailurePolicy, QAQCResult

from .evaluator import DocumentOperand, Outcome, Rule, RuleEvaluator, Scalar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentData:
	"""Values of one document as seen by a run."""
	id: str
	document_type_id: str
	file_name: str
	status: DocumentStatus
	values: Mapping[str, Scalar] = field(default_factory=dict)

	@classmethod
	def from_model(cls, document: Any) -> "DocumentData":
		return cls(
			id=document.id,
			document_type_id=document.document_type_id,
			file_name=document.file_name,
			status=DocumentStatus(document.status),
			values=MappingProxyType(dict(document.properties_values or {})),
		)


class DocumentSnapshot:
	"""
	Immutable view of an event's documents, one per document type.

	When an event holds several documents of the same type the most
	recent parsed one wins; without a parsed one the most recent wins.
	``documents`` must be given oldest first.
	"""

	def __init__(
		self,
		documents: Iterable[DocumentData] = (),
		type_names: Mapping[str, str] | None = None,
	):
		chosen: dict[str, DocumentData] = {}
		for document in documents:
			current = chosen.get(document.document_type_id)
			if (
				current is None
				or document.status == DocumentStatus.PARSED
				or current.status != DocumentStatus.PARSED
			):
				chosen[document.document_type_id] = document
		self._documents = MappingProxyType(chosen)
		self._type_names = MappingProxyType(dict(type_names or {}))

	def get(self, document_type_id: str) -> DocumentData | None:
		return self._documents.get(document_type_id)

	def type_name(self, document_type_id: str) -> str:
		return self._type_names.get(document_type_id, document_type_id)

	def __len__(self) -> int:
		return len(self._documents)


@dataclass(frozen=True)
class RuleOutcome:
	rule_id: str
	outcome: Outcome


@dataclass
class RunOutcome:
	"""Outcome of one process run."""
	result: QAQCResult
	items: list[RuleOutcome] = field(default_factory=list)

	@property
	def passed(self) -> bool:
		return self.result == QAQCResult.PASSED

	@property
	def failed_count(self) -> int:
		return sum(1 for item in self.items if not item.outcome.passed)

	@property
	def error_count(self) -> int:
		return sum(1 for item in self.items if item.outcome.error)


def aggregate(statuses: Iterable[QAQCResult]) -> QAQCResult:
	"""Passed iff every status is Passed."""
	if all(status == QAQCResult.PASSED for status in statuses):
		return QAQCResult.PASSED
	return QAQCResult.FAILED


class ProcessRunner:
	"""Evaluates a list of rules against a document snapshot."""

	def __init__(self, evaluator: RuleEvaluator | None = None):
		self.evaluator = evaluator or RuleEvaluator()

	@property
	def policy(self):
		return self.evaluator.policy

	def run(self, rules: Sequence[Rule | Any], snapshot: DocumentSnapshot) -> RunOutcome:
		"""
		Evaluate ``rules`` in order.

		Stored questions are accepted in place of rules and converted one
		by one, so a malformed question only fails its own outcome.
		"""
		items: list[RuleOutcome] = []
		for source in rules:
			items.append(RuleOutcome(rule_id=source.id, outcome=self._run_one(source, snapshot)))

		result = aggregate(item.outcome.status for item in items)
		run = RunOutcome(result=result, items=items)
		logger.info(
			f"Run finished: {result.value}, {len(items)} question(s), "
			f"{run.failed_count} failed, {run.error_count} error(s)"
		)
		return run

	def _run_one(self, source: Rule | Any, snapshot: DocumentSnapshot) -> Outcome:
		try:
			rule = source if isinstance(source, Rule) else Rule.from_question(source)
		except ValueError as e:
			logger.warning(f"Question {source.id} cannot be evaluated: {e}")
			return Outcome.evaluation_error(f"Evaluation error: malformed question ({e})")

		try:
			return self.run_rule(rule, snapshot)
		except Exception:
			logger.exception(f"Unexpected failure while evaluating question {rule.id}")
			return Outcome.evaluation_error(
				"Evaluation error: unexpected failure while evaluating this question"
			)

	def run_rule(self, rule: Rule, snapshot: DocumentSnapshot) -> Outcome:
		left_value, problem = self._resolve(rule.left, snapshot)
		if problem is not None:
			return problem

		right_value: Scalar = None
		if isinstance(rule.right, DocumentOperand):
			right_value, problem = self._resolve(rule.right, snapshot)
			if problem is not None:
				return problem

		return self.evaluator.evaluate(rule, left_value, right_value)

	def _resolve(
		self,
		operand: DocumentOperand,
		snapshot: DocumentSnapshot,
	) -> tuple[Scalar, Outcome | None]:
		"""Look up an operand value, or explain why it is unavailable."""
		name = snapshot.type_name(operand.document_type_id)
		document = snapshot.get(operand.document_type_id)

		if document is None:
			return None, Outcome.failed(f"Required document '{name}' is missing for this event")

		if document.status == DocumentStatus.FAILED and self.policy.parse_failure == ParseFailurePolicy.ERROR:
			return None, Outcome.evaluation_error(f"Document '{name}' failed to parse")

		if document.status != DocumentStatus.PARSED:
			return None, Outcome.failed(
				f"Document '{name}' has not been parsed (status: {document.status.value})"
			)

		value = document.values.get(operand.property)
		if value is None:
			return None, Outcome.failed(f"Property '{operand.property}' has no value in document '{name}'")
		return value, None
