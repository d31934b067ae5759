from concurrent.futures import ThreadPoolExecutor

import pytest

from src.backend.domain.errors import AuthenticationError, ConflictError, ValidationError
from src.backend.services.users.service import InMemoryCredentialStore


def test_seeded_store_has_three_accounts():
    store = InMemoryCredentialStore.with_seed_users()
    assert len(store) == 3

    caretaker = store.login(patient_id="caretaker1", password="caretaker1")
    assert caretaker.name == "Carol Care"
    assert caretaker.role == "caretaker"

    bob = store.get("patient2")
    assert bob is not None
    assert bob.mobile == "9990002222"


def test_empty_store_has_no_seed_accounts():
    store = InMemoryCredentialStore()
    assert store.list_users() == []
    with pytest.raises(AuthenticationError):
        store.login(patient_id="patient1", password="patient1")


def test_register_then_login():
    store = InMemoryCredentialStore()
    created = store.register(patient_id="p9", name="Pat", mobile="123", password="s3cret")
    assert created.role == "patient"
    assert "password" not in created.model_dump(by_alias=True)

    assert store.login(patient_id="p9", password="s3cret") == created


def test_register_empty_role_defaults_to_patient():
    store = InMemoryCredentialStore()
    created = store.register(patient_id="p9", name=None, mobile=None, password="x", role="")
    assert created.role == "patient"


def test_register_requires_patient_id():
    store = InMemoryCredentialStore()
    with pytest.raises(ValidationError):
        store.register(patient_id=None, name="X", mobile=None, password="x")
    with pytest.raises(ValidationError):
        store.register(patient_id="", name="X", mobile=None, password="x")
    assert len(store) == 0


def test_register_existing_id_conflicts_regardless_of_payload():
    store = InMemoryCredentialStore.with_seed_users()
    with pytest.raises(ConflictError):
        store.register(patient_id="patient1", name="Other", mobile="0", password="other", role="admin")

    # The seeded record is untouched.
    assert store.login(patient_id="patient1", password="patient1").name == "Alice Patient"


def test_login_failures_share_one_error():
    store = InMemoryCredentialStore.with_seed_users()
    with pytest.raises(AuthenticationError) as unknown:
        store.login(patient_id="ghost", password="patient1")
    with pytest.raises(AuthenticationError) as wrong:
        store.login(patient_id="patient1", password="Patient1")
    assert str(unknown.value) == str(wrong.value) == "invalid credentials"


def test_login_without_password_never_matches():
    store = InMemoryCredentialStore()
    store.register(patient_id="nopass", name=None, mobile=None, password=None)
    with pytest.raises(AuthenticationError):
        store.login(patient_id="nopass", password=None)


def test_login_requires_patient_id():
    store = InMemoryCredentialStore.with_seed_users()
    with pytest.raises(ValidationError):
        store.login(patient_id="", password="patient1")


def test_concurrent_registration_of_same_id_has_one_winner():
    store = InMemoryCredentialStore()

    def attempt(i: int) -> str:
        try:
            store.register(patient_id="shared", name=f"user-{i}", mobile=None, password=str(i))
        except ConflictError:
            return "conflict"
        return "ok"

    with ThreadPoolExecutor(max_workers=16) as pool:
        outcomes = list(pool.map(attempt, range(64)))

    assert outcomes.count("ok") == 1
    assert outcomes.count("conflict") == 63
    assert len(store) == 1


def test_concurrent_registration_of_distinct_ids_loses_nothing():
    store = InMemoryCredentialStore()

    def register(i: int) -> None:
        store.register(patient_id=f"p{i}", name=None, mobile=None, password=f"s{i}")

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(register, range(200)))

    assert len(store) == 200
    assert store.login(patient_id="p123", password="s123").patient_id == "p123"
