"""
API Client module providing centralized access to the Dairycart v1 store API.
Orchestrates sub-API modules for products, product roots, options, discounts and users.
"""
from typing import Any

import requests

from dairyclient.api.discounts import DiscountsAPI
from dairyclient.api.endpoints import ENDPOINTS
from dairyclient.api.handle_requests import DEFAULT_TIMEOUT, RequestHandler, SessionCredential
from dairyclient.api.options import ProductOptionsAPI
from dairyclient.api.products import ProductRootsAPI, ProductsAPI
from dairyclient.api.users import UsersAPI


class ApiClient:
    """Root client that centralizes sub-APIs and holds the shared HTTP/session state."""

    def __init__(self, http: RequestHandler):
        self.http = http
        self.products = ProductsAPI(self)
        self.product_roots = ProductRootsAPI(self)
        self.product_options = ProductOptionsAPI(self)
        self.discounts = DiscountsAPI(self)
        self.users = UsersAPI(self)

    @classmethod
    def login(
        cls,
        store_url: str,
        username: str,
        password: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "ApiClient":
        return cls(RequestHandler.login(store_url, username, password, session=session, timeout=timeout))

    @classmethod
    def from_credential(
        cls,
        api_url: str,
        credential: SessionCredential,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "ApiClient":
        return cls(RequestHandler.from_credential(api_url, credential, session=session, timeout=timeout))

    def close(self):
        self.http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def build_url(self, query_params: dict[str, Any] | None, *parts: Any) -> str:
        return self.http.build_url(query_params, *parts)

    def call(
        self,
        name: str,
        *,
        query: dict[str, Any] | None = None,
        body: Any = None,
        timeout: float | None = None,
        **path_args: Any,
    ) -> Any:
        """
        Issue the request described by ENDPOINTS[name].
        HEAD returns a bool, DELETE returns None, everything else returns the decoded output model.
        """
        endpoint = ENDPOINTS[name]
        url = self.http.build_url(query, *endpoint.render(path_args))

        if endpoint.method == "HEAD":
            return self.http.exists(url, timeout=timeout)
        if endpoint.method == "GET":
            return self.http.fetch_into(url, endpoint.output, timeout=timeout)
        if endpoint.method == "DELETE":
            return self.http.delete_at(url, timeout=timeout)

        if endpoint.input is not None and not isinstance(body, endpoint.input):
            raise TypeError(f"{name} expects {endpoint.input.__name__}, got {type(body).__name__}")
        return self.http.send_payload(endpoint.method, url, body, endpoint.output, timeout=timeout)
