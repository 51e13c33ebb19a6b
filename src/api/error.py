from typing import Any, Dict
from libs.result import Error


class ClientError(Exception):
    """Raised by routes to return an error body with a given HTTP status"""

    def __init__(self, error: Error, status_code: int = 400):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"code": self.error.code, "message": self.error.message}
        if self.error.details:
            body["details"] = self.error.details
        return {"error": body}
