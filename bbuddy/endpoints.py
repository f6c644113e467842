from __future__ import annotations
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Optional
from bbuddy.config import API_BASE_URL
from bbuddy.structures import Account, Encoding, Target


SAMPLE_ACCOUNTS: list[dict[str, Any]] = [
    {"id": 1, "name": "CMB", "balance": 10000},
    {"id": 2, "name": "Cash", "balance": 350.5},
]


def _encoded(body: Any) -> bytes:
    return json.dumps(body).encode("utf-8")


class Api(ABC):
    """One call against the bbuddy backend.

    Subclasses are the closed set in ENDPOINTS; each one pins its method,
    encoding and auth requirement and derives path and parameters from its
    own fields.
    """

    base_url: ClassVar[str] = API_BASE_URL
    method: ClassVar[str]
    encoding: ClassVar[Encoding]
    should_authorize: ClassVar[bool]

    @property
    @abstractmethod
    def path(self) -> str:
        ...

    @property
    @abstractmethod
    def parameters(self) -> Optional[dict[str, Any]]:
        ...

    @property
    @abstractmethod
    def sample_data(self) -> bytes:
        ...

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.path.lstrip('/')}"

    def target(self) -> Target:
        return Target(
            url=self.url,
            method=self.method,
            params=self.parameters,
            encoding=self.encoding,
        )


@dataclass(frozen=True)
class SignIn(Api):
    email: str
    password: str

    method = "POST"
    encoding = Encoding.JSON
    should_authorize = False

    @property
    def path(self) -> str:
        return "/auth/sign_in"

    @property
    def parameters(self) -> dict[str, Any]:
        return {"email": self.email, "password": self.password}

    @property
    def sample_data(self) -> bytes:
        return _encoded({"id": 100, "email": self.email, "token": "FAKETOKEN"})


@dataclass(frozen=True)
class ShowUser(Api):
    id: int

    method = "GET"
    encoding = Encoding.URL
    should_authorize = True

    @property
    def path(self) -> str:
        return f"/users/{self.id}"

    @property
    def parameters(self) -> None:
        return None

    @property
    def sample_data(self) -> bytes:
        return _encoded({"id": self.id, "first_name": "Harry", "last_name": "Potter"})


@dataclass(frozen=True)
class ShowAccounts(Api):
    method = "GET"
    encoding = Encoding.URL
    should_authorize = True

    @property
    def path(self) -> str:
        return "/accounts"

    @property
    def parameters(self) -> None:
        return None

    @property
    def sample_data(self) -> bytes:
        return _encoded(SAMPLE_ACCOUNTS)


@dataclass(frozen=True)
class UpdateAccount(Api):
    account: Account

    method = "PUT"
    encoding = Encoding.JSON
    should_authorize = True

    def __post_init__(self):
        # own copy; the caller keeps mutating theirs
        object.__setattr__(self, "account", replace(self.account))

    def __hash__(self):
        return hash((self.account.id, self.account.name, self.account.balance))

    @property
    def path(self) -> str:
        return f"/accounts/{self.account.id}"

    @property
    def parameters(self) -> dict[str, Any]:
        # id travels in the path only
        return {"name": self.account.name, "balance": self.account.balance}

    @property
    def sample_data(self) -> bytes:
        return _encoded({
            "id": self.account.id,
            "name": self.account.name,
            "balance": self.account.balance,
        })


ENDPOINTS: tuple[type[Api], ...] = (SignIn, ShowUser, ShowAccounts, UpdateAccount)


def resolve(api: Api) -> Target:
    if type(api) not in ENDPOINTS:
        raise TypeError(f"unsupported endpoint: {type(api).__name__}")
    return api.target()
