# (c) Copyright Datacraft, 2026
"""All ORM models, imported so that metadata knows every table."""
from siteqc.core.features.document_types.models import DocumentTypeModel
from siteqc.core.features.documents.models import DocumentModel
from siteqc.core.features.events.models import EventModel
from siteqc.core.features.projects.models import ProjectModel
from siteqc.core.features.qaqc.models import QAQCProcessModel, ResultModel
from siteqc.core.features.questionnaires.models import QuestionModel, QuestionnaireModel

__all__ = [
	"DocumentModel",
	"DocumentTypeModel",
	"EventModel",
	"ProjectModel",
	"QAQCProcessModel",
	"QuestionModel",
	"QuestionnaireModel",
	"ResultModel",
]
