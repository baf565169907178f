from enum import Enum

from fastapi import status


class AppErrorCode(str, Enum):
    """Коды ошибок прикладного уровня"""
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_BODY = "INVALID_BODY"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


APP_ERROR_STATUS_CODES = {
    AppErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    AppErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    AppErrorCode.INVALID_BODY: status.HTTP_400_BAD_REQUEST,
    AppErrorCode.UNKNOWN_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(Exception):
    """Типизированная ошибка домена, которую API переводит в HTTP ответ"""

    def __init__(self, code: AppErrorCode, message: str = ""):
        super().__init__(message or code.value)
        self.code = code
        self.message = message or code.value

    @property
    def status_code(self) -> int:
        return APP_ERROR_STATUS_CODES[self.code]

    def __repr__(self) -> str:
        return f"AppError(code={self.code.value}, message={self.message})"
