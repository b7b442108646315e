from dataclasses import dataclass

import requests

from dairyclient.api.codec import JSONNumber
from dairyclient.api.handle_requests import SessionCredential

STORE_URL = "http://www.dairycart.com"
EXAMPLE_COOKIE = SessionCredential(name="dairycart", value="example-session")
EXAMPLE_BAD_JSON = '{"invalid lol}'


@dataclass
class Things:
    things: str = ""


@dataclass
class Breakable:
    thing: JSONNumber


def make_response(body: str | bytes, status_code: int = 200) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    response.url = f"{STORE_URL}/v1/whatever"
    return response
