from typing import Any, Optional


GENERIC_ERROR_MESSAGE = "Request failed. Please check your internet connection."


class WikidataError(Exception):
    """Base class for every failure surfaced by the client core"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or GENERIC_ERROR_MESSAGE


class ParseError(WikidataError):
    """Malformed API payload (missing mandatory fields, invalid JSON)"""


class NetworkError(WikidataError):
    """Transport level failure: timeout, connectivity or non-2xx HTTP status"""

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ApiError(WikidataError):
    """Well-formed response carrying a server-reported error"""

    def __init__(self, code: Optional[str] = None, info: Optional[str] = None):
        super().__init__(info or code or "")
        self.code = code
        self.info = info

    @classmethod
    def from_json(cls, error_json: Any) -> "ApiError":
        if not isinstance(error_json, dict):
            return cls(info=str(error_json) if error_json else None)
        return cls(
            code=error_json.get("code"),
            info=error_json.get("info") or error_json.get("*"),
        )


class NotFoundError(WikidataError):
    """Entity id does not resolve to an existing entity"""

    def __init__(self, entity_id: str):
        super().__init__(f"Entity {entity_id} does not exist")
        self.entity_id = entity_id
