from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from shift_payroll.core.enums import ViolationCode
from shift_payroll.workers.service import WorkerService


@pytest.fixture
def service(workers):
    return WorkerService(workers)


def register(service, **overrides):
    values = dict(first_name="John", last_name="Doe", email="john@skello.io", password="secret")
    values.update(overrides)
    return service.register(**values)


def test_register_hashes_password(service, workers):
    result = register(service)

    assert result.ok
    worker = workers.get_by_id(result.record_id)
    assert worker.password_hash != "secret"
    assert check_password_hash(worker.password_hash, "secret")


@pytest.mark.parametrize("email", [None, "", "   "])
def test_empty_email_is_allowed(service, workers, email):
    result = register(service, email=email)

    assert result.ok
    assert workers.get_by_id(result.record_id).email is None


def test_valid_email_is_stored_lowercase(service, workers):
    result = register(service, email="Test-Email@Domain.io")

    assert workers.get_by_id(result.record_id).email == "test-email@domain.io"


def test_invalid_email(service):
    result = register(service, email="wrong@format.email@domain")

    assert [(v.code, v.field) for v in result.violations] == [(ViolationCode.INVALID_EMAIL, "email")]


def test_email_taken_case_insensitive(service, workers):
    workers.add(email="ALREADY-EXISTING@DOMAIN.COM")

    result = register(service, email="already-existing@domain.com")

    assert result.codes == [ViolationCode.EMAIL_TAKEN]


def test_missing_names_and_password(service):
    result = register(service, first_name=" ", last_name=None, password="")

    assert [v.field for v in result.violations] == ["first_name", "last_name", "password"]
    assert set(result.codes) == {ViolationCode.MISSING_FIELD}
