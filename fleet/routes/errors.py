# fleet/routes/errors.py
import re
from typing import Any, Dict, List, Optional, Union
from fastapi import HTTPException
from fleet.errors import ErrorKind, FleetError

STATUS_BY_KIND = {
    ErrorKind.INVALID_IDENTIFIER: 400,
    ErrorKind.VALIDATION_FAILURE: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.COLLABORATOR_FAILURE: 500,
}

# Path ids are ASCII decimal and must fit a signed 64-bit BSON integer
ID_PATTERN = re.compile(r"-?[0-9]+")
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

def create_error_response(
    message: str,
    details: Optional[Union[str, List[str]]] = None,
) -> Dict[str, Any]:
    """Create a detailed error response"""
    return {
        "message": message,
        "details": details if details else message,
    }

def http_error(error: FleetError) -> HTTPException:
    """Translate a service error into the HTTP status for its kind."""
    details = None
    if error.kind is ErrorKind.VALIDATION_FAILURE:
        details = list(error.messages)
    return HTTPException(
        status_code=STATUS_BY_KIND[error.kind],
        detail=create_error_response(message=str(error), details=details),
    )

def bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=400, detail=create_error_response(message=message))

def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=404, detail=create_error_response(message=f"{entity} not found"))

def parse_id(value: str, name: str) -> int:
    if not ID_PATTERN.fullmatch(value):
        raise bad_request(f"{name} must be a number")
    parsed = int(value)
    if not MIN_ID <= parsed <= MAX_ID:
        raise bad_request(f"{name} must be a number")
    return parsed
