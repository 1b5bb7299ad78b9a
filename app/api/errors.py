from fastapi import HTTPException, status

from app.core.exceptions import (
    WodBoardError,
    PreconditionError,
    WorkoutNotFound,
    WorkoutLogNotFound,
    WorkoutLogCompleted,
    PersistenceFailure,
)

STATUS_BY_ERROR = {
    PreconditionError: status.HTTP_401_UNAUTHORIZED,
    WorkoutNotFound: status.HTTP_404_NOT_FOUND,
    WorkoutLogNotFound: status.HTTP_404_NOT_FOUND,
    WorkoutLogCompleted: status.HTTP_409_CONFLICT,
    PersistenceFailure: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(error: WodBoardError) -> HTTPException:
    """Перевести доменное исключение в HTTPException."""
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.message)
