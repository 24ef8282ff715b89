"""Tests for settings, password hashing, seeding and structured logging."""

import io
import json
import logging
from uuid import uuid4

import pytest

from ims.domain.exceptions import ValidationError
from ims.infrastructure.config import DEFAULT_DATABASE_URL, Settings
from ims.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from ims.infrastructure.seed import ADMIN_EMAIL, ADMIN_PASSWORD, seed_admin
from ims.logging_config import LogContext, configure_logging, get_logger, reset_logging
from tests.fakes import FakePasswordHasher, FakeUserRepository


class TestSettings:

    def test_defaults(self):
        s = Settings.from_env({})
        assert s.database_url == DEFAULT_DATABASE_URL
        assert s.log_level == "WARNING"
        assert s.low_stock_threshold == 10
        assert s.user_email is None

    def test_from_environment(self):
        s = Settings.from_env({
            "IMS_DATABASE_URL": "sqlite://",
            "IMS_LOG_LEVEL": "debug",
            "IMS_LOW_STOCK_THRESHOLD": "3",
            "IMS_USER": "ana@example.com",
        })
        assert s.database_url == "sqlite://"
        assert s.log_level == "DEBUG"
        assert s.low_stock_threshold == 3
        assert s.user_email == "ana@example.com"

    @pytest.mark.parametrize("raw", ["ten", "-1"])
    def test_bad_threshold(self, raw):
        with pytest.raises(ValidationError, match="IMS_LOW_STOCK_THRESHOLD"):
            Settings.from_env({"IMS_LOW_STOCK_THRESHOLD": raw})


class TestBcryptPasswordHasher:

    def test_hash_and_verify(self):
        hasher = BcryptPasswordHasher(rounds=4)
        hashed = hasher.hash_password("Admin@123")
        assert hashed != "Admin@123"
        assert hasher.verify_password("Admin@123", hashed)
        assert not hasher.verify_password("admin@123", hashed)

    def test_hashes_are_salted(self):
        hasher = BcryptPasswordHasher(rounds=4)
        assert hasher.hash_password("secret1") != hasher.hash_password("secret1")

    def test_malformed_hash_does_not_verify(self):
        assert not BcryptPasswordHasher(rounds=4).verify_password("secret1", "not-a-hash")


class TestSeed:

    def test_creates_admin_once(self):
        repo = FakeUserRepository()
        hasher = FakePasswordHasher()
        assert seed_admin(repo, hasher)
        assert not seed_admin(repo, hasher)

        admin = repo.get_by_email(ADMIN_EMAIL)
        assert admin.full_name == "System Administrator"
        assert hasher.verify_password(ADMIN_PASSWORD, admin.password_hash)


class TestStructuredLogging:

    @pytest.fixture
    def stream(self):
        reset_logging()
        buf = io.StringIO()
        configure_logging(level=logging.INFO, stream=buf)
        yield buf
        reset_logging()

    def _records(self, stream):
        return [json.loads(line) for line in stream.getvalue().splitlines()]

    def test_emits_json_with_extras(self, stream):
        product_id = uuid4()
        get_logger("application.products").info(
            "product_created", extra={"product_id": product_id}
        )
        [record] = self._records(stream)
        assert record["message"] == "product_created"
        assert record["logger"] == "ims.application.products"
        assert record["level"] == "INFO"
        assert record["product_id"] == str(product_id)

    def test_context_fields_bound_inside_block(self, stream):
        log = get_logger("test")
        with LogContext.bind(actor="user-1", command="stock"):
            log.info("inside")
        log.info("outside")
        inside, outside = self._records(stream)
        assert inside["actor"] == "user-1"
        assert inside["command"] == "stock"
        assert "actor" not in outside

    def test_level_filters(self, stream):
        get_logger("test").debug("hidden")
        assert stream.getvalue() == ""
