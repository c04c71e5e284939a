from typing import Any, Dict, Tuple

Result = Tuple[int, Any]

class ApiError:
    """An error outcome a handler returns instead of a success body."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message

    def body(self) -> Dict[str, str]:
        return {"error": self.message}

    def as_response(self) -> Result:
        return self.status_code, self.body()

    def __eq__(self, other):
        return type(self) is type(other) and self.message == other.message

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r})"

class ValidationError(ApiError):
    status_code = 400

class NotFoundError(ApiError):
    status_code = 404

class InternalError(ApiError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)

PRODUCT_NOT_FOUND = "Product not found"
