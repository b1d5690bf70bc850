"""
Admin API için ince HTTP client.
2xx olmayan her cevap, sunucunun "error" mesajıyla ApiRequestError olarak fırlatılır.
Retry yok.
"""

from typing import Any, Dict, Optional

import httpx


class ApiRequestError(Exception):
    """API 2xx dışında bir status döndüğünde fırlatılır."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class ApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return response.reason_phrase

    def request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        response = self._client.request(method.upper(), path, json=json)
        if not response.is_success:
            raise ApiRequestError(response.status_code, self._error_message(response))
        if not response.content:
            return None
        return response.json()

    def set_password(self, phone_number: str, password: str, confirm_password: str) -> Dict[str, Any]:
        return self.request(
            "POST",
            "/api/customer-auth/set-password",
            json={
                "phoneNumber": phone_number,
                "password": password,
                "confirmPassword": confirm_password,
            },
        )

    def password_login(self, phone_number: str, password: str) -> Dict[str, Any]:
        return self.request(
            "POST",
            "/api/customer-auth/password-login",
            json={"phoneNumber": phone_number, "password": password},
        )
