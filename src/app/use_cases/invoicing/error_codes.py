"""Error codes returned by the invoicing use cases"""

AUTHORIZATION_ERROR = "AUTHORIZATION_ERROR"
VALIDATION_ERROR = "VALIDATION_ERROR"
MISSING_REQUIRED_DATA = "MISSING_REQUIRED_DATA"
TRANSACTION_ERROR = "TRANSACTION_ERROR"
INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
