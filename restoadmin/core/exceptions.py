from typing import Optional


class ApiError(Exception):
    """
    İstemciye { "error": message } olarak dönen hatalar.
    """
    status_code = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationFailed(ApiError):
    status_code = 400


class UserNotFound(ApiError):
    status_code = 400


class InvalidCredentials(ApiError):
    status_code = 401


class AccountInactive(ApiError):
    status_code = 403


class PersistenceError(ApiError):
    # detay loglanır, istemciye sadece genel mesaj gider
    status_code = 500


class SessionParseError(Exception):
    """Saklanan session okunamadı (bozuk JSON, şema uyumsuz, imza geçersiz)."""
