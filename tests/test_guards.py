"""Unit tests for techvision.api.guards: claim decoding and the guard pipeline."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt
from fastapi.security import HTTPAuthorizationCredentials

from techvision.api.guards import admin, authenticated, read_claims, require
from techvision.core.config import get_settings
from techvision.core.errors import AuthenticationError, AuthorizationError
from techvision.core.security import create_access_token
from techvision.schemas.auth import CurrentUser


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def _signed(payload: dict) -> str:
    settings = get_settings()
    return jwt.encode(payload, settings.JWT_SECRET.get_secret_value(), algorithm=settings.JWT_ALGORITHM)


class TestReadClaims(unittest.TestCase):
    def test_missing_credentials_is_none(self) -> None:
        self.assertIsNone(read_claims(None))

    def test_valid_token(self) -> None:
        user = read_claims(_credentials(create_access_token(sub=7, is_admin=True)))
        self.assertEqual(user, CurrentUser(id=7, isAdmin=True))

    def test_garbage_token_is_401(self) -> None:
        with self.assertRaises(AuthenticationError) as ctx:
            read_claims(_credentials("not-a-jwt"))
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.message, "Invalid or expired token")

    def test_expired_token_is_401(self) -> None:
        past = datetime.now(UTC) - timedelta(days=8)
        token = _signed({"sub": "1", "isAdmin": True, "iat": past, "exp": past + timedelta(days=7)})
        with self.assertRaises(AuthenticationError) as ctx:
            read_claims(_credentials(token))
        self.assertEqual(ctx.exception.status_code, 401)

    def test_non_numeric_subject_is_401(self) -> None:
        token = _signed({"sub": "abc", "exp": datetime.now(UTC) + timedelta(minutes=5)})
        with self.assertRaises(AuthenticationError):
            read_claims(_credentials(token))

    def test_admin_claim_must_be_true(self) -> None:
        exp = datetime.now(UTC) + timedelta(minutes=5)
        for claim in ({}, {"isAdmin": False}, {"isAdmin": "true"}, {"isAdmin": 1}):
            with self.subTest(claim=claim):
                user = read_claims(_credentials(_signed({"sub": "3", "exp": exp, **claim})))
                self.assertFalse(user.isAdmin)


class TestGuards(unittest.TestCase):
    def test_authenticated(self) -> None:
        authenticated(CurrentUser(id=1))
        with self.assertRaises(AuthenticationError) as ctx:
            authenticated(None)
        self.assertEqual(ctx.exception.status_code, 401)

    def test_admin(self) -> None:
        admin(CurrentUser(id=1, isAdmin=True))
        with self.assertRaises(AuthorizationError) as ctx:
            admin(CurrentUser(id=1, isAdmin=False))
        self.assertEqual(ctx.exception.status_code, 403)
        with self.assertRaises(AuthorizationError):
            admin(None)


class TestRequirePipeline(unittest.TestCase):
    def test_guards_run_in_order_and_short_circuit(self) -> None:
        calls: list[str] = []

        def first(user: CurrentUser | None) -> None:
            calls.append("first")

        def failing(user: CurrentUser | None) -> None:
            calls.append("failing")
            raise AuthorizationError("nope")

        def never(user: CurrentUser | None) -> None:
            calls.append("never")

        dependency = require(first, failing, never)
        with self.assertRaises(AuthorizationError):
            dependency(_credentials(create_access_token(sub=1, is_admin=False)))
        self.assertEqual(calls, ["first", "failing"])

    def test_returns_claims_when_all_pass(self) -> None:
        dependency = require(authenticated, admin)
        user = dependency(_credentials(create_access_token(sub=5, is_admin=True)))
        self.assertEqual(user.id, 5)

    def test_unauthenticated_stops_before_admin(self) -> None:
        dependency = require(authenticated, admin)
        with self.assertRaises(AuthenticationError):
            dependency(None)


if __name__ == "__main__":
    unittest.main()
