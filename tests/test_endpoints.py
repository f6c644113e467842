"""
Tests for the endpoint descriptors.
"""
import dataclasses
import json
import pytest
from bbuddy.endpoints import (
    ENDPOINTS, Api, ShowAccounts, ShowUser, SignIn, UpdateAccount, resolve,
)
from bbuddy.structures import Account, Encoding


@pytest.mark.parametrize(
    "api, method, path, encoding, should_authorize",
    [
        (SignIn(email="a@b.c", password="pw"), "POST", "/auth/sign_in", Encoding.JSON, False),
        (ShowUser(id=7), "GET", "/users/7", Encoding.URL, True),
        (ShowAccounts(), "GET", "/accounts", Encoding.URL, True),
        (UpdateAccount(account=Account(id=42, name="CMB", balance=1)), "PUT", "/accounts/42", Encoding.JSON, True),
    ],
)
def test_endpoint_table(api, method, path, encoding, should_authorize):
    assert api.method == method
    assert api.path == path
    assert api.encoding is encoding
    assert api.should_authorize is should_authorize
    assert api.base_url == "http://localhost:3000"


def test_sign_in_parameters():
    assert SignIn(email="joe@example.com", password="secret").parameters == {
        "email": "joe@example.com",
        "password": "secret",
    }


def test_show_user():
    api = ShowUser(id=7)
    assert api.url == "http://localhost:3000/users/7"
    assert api.method == "GET"
    assert api.parameters is None


def test_show_accounts_has_no_parameters():
    assert ShowAccounts().parameters is None


def test_update_account_keeps_id_out_of_body():
    api = UpdateAccount(account=Account(id=42, name="Savings", balance=99.5))
    assert api.path == "/accounts/42"
    assert api.parameters == {"name": "Savings", "balance": 99.5}
    assert "id" not in api.parameters


def test_resolve_builds_target():
    target = resolve(UpdateAccount(account=Account(id=3, name="Cash", balance=10)))
    assert target.url == "http://localhost:3000/accounts/3"
    assert target.method == "PUT"
    assert target.params == {"name": "Cash", "balance": 10}
    assert target.encoding is Encoding.JSON


def test_every_endpoint_defines_the_full_tuple():
    for cls in ENDPOINTS:
        assert cls.method in ("GET", "POST", "PUT")
        assert isinstance(cls.encoding, Encoding)
        assert isinstance(cls.should_authorize, bool)


def test_resolve_rejects_unknown_endpoint():
    class Delete(ShowAccounts):
        pass

    with pytest.raises(TypeError):
        resolve(Delete())


def test_api_base_is_abstract():
    with pytest.raises(TypeError):
        Api()


def test_variants_are_immutable():
    api = ShowUser(id=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        api.id = 2


def test_sample_data():
    assert json.loads(SignIn(email="x@y.z", password="p").sample_data) == {
        "id": 100, "email": "x@y.z", "token": "FAKETOKEN",
    }
    assert json.loads(ShowUser(id=5).sample_data)["id"] == 5
    assert json.loads(UpdateAccount(account=Account(id=9, name="n", balance=2)).sample_data) == {
        "id": 9, "name": "n", "balance": 2,
    }
    assert isinstance(json.loads(ShowAccounts().sample_data), list)


def test_update_account_snapshots_the_account():
    account = Account(id=42, name="CMB", balance=1)
    api = UpdateAccount(account=account)

    account.id = 99
    account.name = "changed"

    assert api.path == "/accounts/42"
    assert api.parameters == {"name": "CMB", "balance": 1}
    assert hash(api) == hash(UpdateAccount(account=Account(id=42, name="CMB", balance=1)))
