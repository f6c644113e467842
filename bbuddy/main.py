"""Stub of the bbuddy backend serving canned responses.

Run with ``uvicorn bbuddy.main:app --port 3000`` to exercise the client
without the real Rails server.
"""
from __future__ import annotations
import json
from typing import Union
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from bbuddy.auth import issue_token, require_token_headers
from bbuddy.endpoints import ShowAccounts, ShowUser, SignIn, UpdateAccount
from bbuddy.structures import Account, AuthorizedToken

app = FastAPI(title="bbuddy API stub")


class SignInBody(BaseModel):
    email: str
    password: str


class AccountBody(BaseModel):
    name: str
    balance: Union[int, float]


def _sample(endpoint) -> JSONResponse:
    return JSONResponse(json.loads(endpoint.sample_data))


@app.post("/auth/sign_in")
async def sign_in(body: SignInBody) -> JSONResponse:
    token = issue_token(body.email)
    resp = _sample(SignIn(email=body.email, password=body.password))
    resp.headers["access-token"] = token.access_token
    resp.headers["client"] = token.client
    resp.headers["uid"] = token.uid
    resp.headers["token-type"] = token.type
    return resp


@app.get("/users/{user_id}")
async def show_user(user_id: int, token: AuthorizedToken = Depends(require_token_headers)):
    return _sample(ShowUser(id=user_id))


@app.get("/accounts")
async def show_accounts(token: AuthorizedToken = Depends(require_token_headers)):
    return _sample(ShowAccounts())


@app.put("/accounts/{account_id}")
async def update_account(
    account_id: int,
    body: AccountBody,
    token: AuthorizedToken = Depends(require_token_headers),
):
    account = Account(id=account_id, name=body.name, balance=body.balance)
    return _sample(UpdateAccount(account=account))
