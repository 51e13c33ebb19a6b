from .unit_of_work import SqlAlchemyUnitOfWork
from .pdf_service import ReportLabPdfService
from .immutability import ImmutableRecordError, register_immutability_listeners

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ReportLabPdfService",
    "ImmutableRecordError",
    "register_immutability_listeners",
]
