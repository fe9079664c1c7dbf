"""Translation of store results into HTTP responses."""

from typing import Any

from fastapi import Response, status
from fastapi.responses import JSONResponse

from ...core.types import ResultStatus, StoreResult, Task

STATUS_CODES = {
    ResultStatus.CREATED: status.HTTP_201_CREATED,
    ResultStatus.OK: status.HTTP_200_OK,
    ResultStatus.DELETED: status.HTTP_204_NO_CONTENT,
    ResultStatus.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ResultStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _serialize(data: Any) -> Any:
    if isinstance(data, Task):
        return data.to_dict()
    if isinstance(data, list):
        return [_serialize(item) for item in data]
    return data


def result_to_response(result: StoreResult) -> Response:
    """Map a store result to its status code and body."""
    status_code = STATUS_CODES[result.status]

    if not result.ok:
        return JSONResponse(status_code=status_code, content={"message": result.message})
    if status_code == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=_serialize(result.data))
