from typing import Any, Optional
from bbuddy.endpoints import Api, resolve
from bbuddy.structures import Encoding

BBUDDY_ACCEPT = "application/json"


def build_request_url(api: Api, base_url: Optional[str] = None) -> str:
    if base_url:
        return f"{base_url.rstrip('/')}/{api.path.lstrip('/')}"
    return api.url


def request_kwargs(api: Api, base_url: Optional[str] = None) -> dict[str, Any]:
    target = resolve(api)
    kwargs: dict[str, Any] = {
        "method": target.method,
        "url": build_request_url(api, base_url),
        "headers": {"Accept": BBUDDY_ACCEPT},
        "timeout": target.timeout_s,
    }
    if target.params is None:
        return kwargs

    if target.encoding is Encoding.JSON:
        kwargs["json"] = target.params
    else:
        kwargs["params"] = target.params
    return kwargs
