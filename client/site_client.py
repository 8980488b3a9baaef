"""
HTTP client for the restaurant site API.
Public reads degrade to empty results on failure; admin calls raise ApiError.
A single requests.Session keeps the admin session cookie between calls.
"""
from typing import Any, Dict, List, Optional
import requests
from utils.logger import get_logger

logger = get_logger("Site_Client")

class ApiError(Exception):
    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail

class SiteApiClient:
    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get_or_default(self, path: str, default: Any, params: Optional[dict] = None) -> Any:
        try:
            response = self.session.get(self._url(path), params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"GET {path} failed: {e}")
            return default

    def _send(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self.session.request(method, self._url(path), timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(0, str(e)) from e
        try:
            body = response.json()
        except ValueError:
            body = {"detail": response.text}
        if not response.ok:
            raise ApiError(response.status_code, body.get("detail", body) if isinstance(body, dict) else body)
        return body

    # Public reads

    def get_translations(self, locale: str) -> Dict[str, str]:
        return self._get_or_default("/api/translations", {}, params={"locale": locale})

    def get_menu(self, locale: Optional[str] = None) -> Dict[str, List[dict]]:
        params = {"locale": locale} if locale else None
        return self._get_or_default("/api/menu", {"categories": [], "items": []}, params=params)

    def get_beverages(self, locale: str, category_id: Optional[str] = None) -> Dict[str, List[dict]]:
        params = {"locale": locale}
        if category_id:
            params["categoryId"] = category_id
        body = self._get_or_default("/api/beverages", {}, params=params)
        return body.get("data") or {"categories": [], "items": []}

    def get_gallery(self, locale: str, tag: Optional[str] = None) -> List[dict]:
        params = {"locale": locale}
        if tag:
            params["tag"] = tag
        return self._get_or_default("/api/gallery", [], params=params)

    def get_settings(self, locale: str) -> Dict[str, Any]:
        return self._get_or_default("/api/settings", {}, params={"locale": locale})

    def get_page(self, slug: str, locale: str) -> Optional[dict]:
        return self._get_or_default(f"/api/pages/{slug}", None, params={"locale": locale})

    # Admin

    def login(self, username: str, password: str) -> bool:
        try:
            self._send("POST", "/api/admin/login", json={"username": username, "password": password})
        except ApiError as e:
            if e.status_code == 401:
                return False
            raise
        return True

    def logout(self) -> None:
        self._send("POST", "/api/admin/logout")

    def update_menu(self, document: dict) -> Dict[str, Any]:
        return self._send("PUT", "/api/menu", json=document)

    def update_drinks(self, document: dict) -> Dict[str, Any]:
        return self._send("PUT", "/api/drinks", json=document)

    def update_translations(self, locale: str, translations: Dict[str, str]) -> Dict[str, Any]:
        return self._send("PUT", "/api/admin/translations", json={"locale": locale, "translations": translations})
