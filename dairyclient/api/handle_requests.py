"""
HTTP request handler holding the authenticated store session.
Builds versioned API URLs, attaches the `dairycart` session cookie to every request and
exposes the exists/fetch/delete/send primitives the resource APIs are composed from.
No retries and no rate limiting: each call is a single attempt.
"""
import logging
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlencode, urljoin, urlsplit

import requests

from dairyclient.api.codec import check_destination, decode_body, encode_body
from dairyclient.api.errors import (
    DeleteFailedError,
    LoginTransportError,
    MalformedURLError,
    NoCredentialReturnedError,
    TransportError,
)
from dairyclient.data.models.users import UserLoginInput

API_VERSION = "v1"
SESSION_COOKIE_NAME = "dairycart"
DEFAULT_TIMEOUT = 5.0

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# sub-delims and ':' '@' are legal inside a path segment; '%' keeps existing escapes intact
_PATH_SAFE = "%!$&'()*+,;=:@"


@dataclass(frozen=True)
class SessionCredential:
    """The session cookie proving an authenticated store session."""

    name: str
    value: str


def _parse_store_url(store_url: str) -> str:
    try:
        parts = urlsplit(store_url)
    except ValueError as err:
        raise MalformedURLError(f"store URL is not valid: {store_url!r}") from err
    if not parts.scheme or not parts.netloc:
        raise MalformedURLError(f"store URL is not valid: {store_url!r}")
    return store_url


def _request_credential(
    session: requests.Session, login_url: str, username: str, password: str, timeout: float
) -> SessionCredential:
    body = encode_body(UserLoginInput(username=username, password=password))
    try:
        resp = session.post(
            login_url,
            data=body,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as err:
        raise LoginTransportError(f"error encountered logging into store: {err}") from err

    logging.debug(f"Login POST {login_url} -> {resp.status_code}, {len(resp.cookies)} cookie(s)")
    if len(resp.cookies) == 0:
        raise NoCredentialReturnedError("no cookies returned with login response")

    for cookie in resp.cookies:
        if cookie.name == SESSION_COOKIE_NAME:
            return SessionCredential(name=cookie.name, value=cookie.value or "")
    raise NoCredentialReturnedError(f"login response carried no {SESSION_COOKIE_NAME!r} cookie")


class RequestHandler:
    def __init__(
        self,
        base_url: str,
        credential: SessionCredential,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = _parse_store_url(base_url)
        self.credential = credential
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def login(
        cls,
        store_url: str,
        username: str,
        password: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "RequestHandler":
        """
        Log into the store (POST {scheme}://{host}/login) and keep the returned session cookie.
        Raises LoginTransportError when the login call cannot complete and
        NoCredentialReturnedError when the response lacks a `dairycart` cookie.
        """
        _parse_store_url(store_url)
        parts = urlsplit(store_url)
        login_url = f"{parts.scheme}://{parts.netloc}/login"
        owns_session = session is None
        session = session or requests.Session()

        try:
            credential = _request_credential(session, login_url, username, password, timeout)
        except (LoginTransportError, NoCredentialReturnedError):
            if owns_session:
                session.close()
            raise

        logging.debug(f"Logged into {parts.netloc} as {username}")
        return cls(store_url, credential, session=session, timeout=timeout)

    @classmethod
    def from_credential(
        cls,
        api_url: str,
        credential: SessionCredential,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "RequestHandler":
        """Reuse a session cookie obtained elsewhere, skipping the login round trip."""
        return cls(api_url, credential, session=session, timeout=timeout)

    def close(self):
        self.session.close()

    def __enter__(self) -> "RequestHandler":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def build_url(self, query_params: dict[str, Any] | None, *parts: Any) -> str:
        """
        Join the API version and path segments, attach the query string and resolve the
        result against the store URL.
        build_url({"q": "v"}, "things", "stuff") -> http://x/v1/things/stuff?q=v
        """
        segments = [API_VERSION, *(str(p) for p in parts)]
        path = "/".join(segments)
        if _CONTROL_CHARS.search(path):
            raise MalformedURLError(f"invalid control character in URL path {path!r}")
        if _BAD_ESCAPE.search(path):
            raise MalformedURLError(f"invalid URL escape in path {path!r}")
        try:
            urlsplit(path)
        except ValueError as err:
            raise MalformedURLError(f"could not parse URL path {path!r}") from err

        path = "/".join(quote(s, safe=_PATH_SAFE) for s in segments)
        if query_params:
            path = f"{path}?{urlencode(sorted((k, str(v)) for k, v in query_params.items()))}"
        return urljoin(self.base_url, path)

    def _forget_jar_credential(self):
        # the jar may hold a copy from the login response or a later Set-Cookie
        for cookie in list(self.session.cookies):
            if cookie.name == self.credential.name:
                self.session.cookies.clear(cookie.domain, cookie.path, cookie.name)

    def execute_with_credential(self, request: requests.Request, timeout: float | None = None) -> requests.Response:
        """Attach the session cookie and send the request once."""
        self._forget_jar_credential()
        request.cookies = {**(request.cookies or {}), self.credential.name: self.credential.value}
        prepared = self.session.prepare_request(request)
        try:
            resp = self.session.send(prepared, timeout=timeout if timeout is not None else self.timeout)
        except requests.RequestException as err:
            raise TransportError(f"{request.method} {request.url} failed: {err}") from err
        logging.debug(f"{request.method} {request.url} -> {resp.status_code}")
        return resp

    def exists(self, url: str, timeout: float | None = None) -> bool:
        """HEAD the URL; True only on a 200."""
        resp = self.execute_with_credential(requests.Request("HEAD", url), timeout=timeout)
        return resp.status_code == 200

    def fetch_into(self, url: str, destination: type, timeout: float | None = None) -> Any:
        """GET the URL and decode the body into a new `destination` instance."""
        check_destination(destination)
        resp = self.execute_with_credential(requests.Request("GET", url), timeout=timeout)
        return decode_body(resp, destination)

    def delete_at(self, url: str, timeout: float | None = None) -> None:
        resp = self.execute_with_credential(requests.Request("DELETE", url), timeout=timeout)
        if resp.status_code != 200:
            raise DeleteFailedError(resp.status_code)

    def send_payload(
        self,
        method: str,
        url: str,
        payload: Any,
        destination: type,
        timeout: float | None = None,
    ) -> Any:
        """
        POST or PATCH `payload` as JSON and decode the response like fetch_into.
        The destination is validated before anything is encoded or sent.
        """
        method = method.upper()
        if method not in ("POST", "PATCH"):
            raise ValueError(f"send_payload only issues POST or PATCH, not {method}")
        check_destination(destination)
        body = encode_body(payload)
        request = requests.Request(method, url, data=body, headers={"Content-Type": "application/json"})
        resp = self.execute_with_credential(request, timeout=timeout)
        return decode_body(resp, destination)

    def post(self, url: str, payload: Any, destination: type, timeout: float | None = None) -> Any:
        return self.send_payload("POST", url, payload, destination, timeout=timeout)

    def patch(self, url: str, payload: Any, destination: type, timeout: float | None = None) -> Any:
        return self.send_payload("PATCH", url, payload, destination, timeout=timeout)
