import logging
import time
from typing import Any, Optional, Sequence

import httpx

from bbuddy.apiHelpers import request_kwargs
from bbuddy.authPlugin import Plugin
from bbuddy.config import Settings, load_settings
from bbuddy.endpoints import Api, ShowAccounts, ShowUser, SignIn, UpdateAccount
from bbuddy.structures import Account, AuthorizedToken

logger = logging.getLogger(__name__)


class ApiClient:
    """Dispatches bbuddy endpoints over an httpx.AsyncClient.

    Plugins see every request after it is built and before it is sent, in
    the order given. Transport and status errors come from httpx untouched.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        plugins: Sequence[Plugin] = (),
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ):
        self._http = http
        self._plugins = tuple(plugins)
        self._base_url = base_url
        self._timeout_s = timeout_s

    @classmethod
    def from_settings(
        cls,
        http: httpx.AsyncClient,
        plugins: Sequence[Plugin] = (),
        settings: Optional[Settings] = None,
    ) -> "ApiClient":
        settings = settings or load_settings()
        return cls(http, plugins, base_url=settings.base_url, timeout_s=settings.timeout_s)

    def build_request(self, api: Api) -> httpx.Request:
        kwargs = request_kwargs(api, self._base_url)
        if self._timeout_s is not None:
            kwargs["timeout"] = self._timeout_s
        return self._http.build_request(**kwargs)

    async def request(self, api: Api) -> httpx.Response:
        request = self.build_request(api)
        for plugin in self._plugins:
            request = plugin.prepare(request, api)

        t0 = time.perf_counter()
        resp = await self._http.send(request)
        logger.debug(
            "%s %s -> %s in %dms",
            request.method, request.url, resp.status_code,
            int((time.perf_counter() - t0) * 1000),
        )
        return resp

    async def _fetch_json(self, api: Api) -> Any:
        resp = await self.request(api)
        resp.raise_for_status()
        return resp.json()

    async def sign_in(self, email: str, password: str) -> Optional[AuthorizedToken]:
        resp = await self.request(SignIn(email=email, password=password))
        resp.raise_for_status()
        return AuthorizedToken.from_headers(resp.headers)

    async def show_user(self, id: int) -> dict[str, Any]:
        return await self._fetch_json(ShowUser(id=id))

    async def show_accounts(self) -> list[Account]:
        data = await self._fetch_json(ShowAccounts())
        return [Account.from_json(item) for item in data]

    async def update_account(self, account: Account) -> Account:
        data = await self._fetch_json(UpdateAccount(account=account))
        return Account.from_json(data)
