import secrets
from typing import Optional
from fastapi import Header, HTTPException, status
from bbuddy.structures import AuthorizedToken

STUB_ACCESS_TOKEN = "FAKETOKEN"
STUB_CLIENT = "stub-client"
STUB_TOKEN_TYPE = "Bearer"


def issue_token(uid: str) -> AuthorizedToken:
    return AuthorizedToken(
        uid=uid,
        client=STUB_CLIENT,
        access_token=STUB_ACCESS_TOKEN,
        type=STUB_TOKEN_TYPE,
    )


def require_token_headers(
    uid: Optional[str] = Header(None),
    client: Optional[str] = Header(None),
    access_token: Optional[str] = Header(None),
    token_type: Optional[str] = Header(None),
) -> AuthorizedToken:
    if not (uid and client and access_token and token_type and
            secrets.compare_digest(access_token.encode(), STUB_ACCESS_TOKEN.encode()) and
            secrets.compare_digest(client.encode(), STUB_CLIENT.encode())):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Token"},
        )
    return AuthorizedToken(uid=uid, client=client, access_token=access_token, type=token_type)
