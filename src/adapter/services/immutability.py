"""ORM guard for insert-only invoice records.

Invoice lines and invoice address snapshots are written once by the
issuance transaction. Any flush that would UPDATE one of them is rejected
before SQL reaches the database.
"""

from sqlalchemy import event
from src.domain.address import InvoiceAddress
from src.domain.invoice_line import InvoiceLine

IMMUTABLE_MODELS = (InvoiceLine, InvoiceAddress)


class ImmutableRecordError(Exception):
    """Raised on an attempt to modify an insert-only record"""


def _reject_update(mapper, connection, target):
    raise ImmutableRecordError(
        f"{type(target).__name__} id={getattr(target, 'id', None)} is immutable once issued"
    )


def register_immutability_listeners() -> None:
    """Attach the guards; safe to call more than once"""
    for model in IMMUTABLE_MODELS:
        if not event.contains(model, "before_update", _reject_update):
            event.listen(model, "before_update", _reject_update)
