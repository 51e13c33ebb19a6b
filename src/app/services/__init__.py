from .unit_of_work import UnitOfWork
from .pdf_service import InvoiceDocument, PdfService

__all__ = [
    "UnitOfWork",
    "InvoiceDocument",
    "PdfService",
]
