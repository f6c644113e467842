from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union
from bbuddy.config import DEFAULT_TIMEOUT_S


class Encoding(str, Enum):
    JSON = "json"
    URL = "url"


@dataclass
class Account:
    id: int
    name: str
    balance: Union[int, float]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Account":
        return cls(id=int(data["id"]), name=data["name"], balance=data["balance"])


TOKEN_HEADERS = ("access-token", "client", "uid", "token-type")


@dataclass(frozen=True)
class AuthorizedToken:
    uid: str
    client: str
    access_token: str
    type: str

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Optional["AuthorizedToken"]:
        # devise_token_auth hands the session back in response headers
        if any(not headers.get(h) for h in TOKEN_HEADERS):
            return None
        return cls(
            uid=headers["uid"],
            client=headers["client"],
            access_token=headers["access-token"],
            type=headers["token-type"],
        )


@dataclass
class Target:
    url: str
    method: str = "GET"
    params: Optional[dict[str, Any]] = None
    encoding: Encoding = Encoding.URL
    timeout_s: float = DEFAULT_TIMEOUT_S
