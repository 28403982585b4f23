from __future__ import annotations

from datetime import datetime
from typing import List, Tuple

import pytest
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from errorcode_admin.entities import ErrorCode, ErrorCodeType
from errorcode_admin.models import ErrorCodeAutoGenerateItem
from errorcode_admin.services import ErrorCodeReconciler

OLD_TIMESTAMP = datetime(2024, 1, 1)


def _declared(code: int, application_name: str, message: str) -> ErrorCodeAutoGenerateItem:
    return ErrorCodeAutoGenerateItem(code=code, application_name=application_name, message=message)


def _seed(session_factory: sessionmaker, *records: ErrorCode) -> None:
    session = session_factory()
    try:
        session.add_all(records)
        session.commit()
    finally:
        session.close()


def _snapshot(session_factory: sessionmaker) -> List[Tuple[int, str, str, ErrorCodeType]]:
    session = session_factory()
    try:
        records = session.execute(select(ErrorCode).order_by(ErrorCode.code)).scalars().all()
        return [(record.code, record.application_name, record.message, record.type) for record in records]
    finally:
        session.close()


def _load_by_code(session_factory: sessionmaker, code: int) -> ErrorCode:
    session = session_factory()
    try:
        return session.execute(select(ErrorCode).where(ErrorCode.code == code)).scalar_one()
    finally:
        session.close()


def _reconcile(session_factory: sessionmaker, batch: List[ErrorCodeAutoGenerateItem]) -> None:
    session = session_factory()
    try:
        ErrorCodeReconciler(session).reconcile(batch)
    finally:
        session.close()


def test_empty_batch_is_a_no_op(session_factory: sessionmaker, monkeypatch: pytest.MonkeyPatch) -> None:
    session = session_factory()
    reconciler = ErrorCodeReconciler(session)

    def _unexpected_query(codes):
        raise AssertionError("empty batch must not query the store")

    monkeypatch.setattr(reconciler.repository, "find_many_by_codes", _unexpected_query)

    reconciler.reconcile([])

    session.close()
    assert _snapshot(session_factory) == []


def test_new_code_is_inserted_as_auto_generated(session_factory: sessionmaker) -> None:
    _reconcile(session_factory, [_declared(1, "A", "m1")])

    assert _snapshot(session_factory) == [(1, "A", "m1", ErrorCodeType.AUTO_GENERATION)]


def test_changed_message_updates_only_the_message(session_factory: sessionmaker) -> None:
    _seed(
        session_factory,
        ErrorCode(code=1, application_name="A", message="old", type=ErrorCodeType.AUTO_GENERATION, memo="kept", updated_at=OLD_TIMESTAMP),
    )
    before = _load_by_code(session_factory, 1)

    _reconcile(session_factory, [_declared(1, "A", "new")])

    after = _load_by_code(session_factory, 1)
    assert after.id == before.id
    assert (after.code, after.application_name, after.message, after.type) == (1, "A", "new", ErrorCodeType.AUTO_GENERATION)
    assert after.memo == "kept"
    assert after.updated_at > OLD_TIMESTAMP


def test_application_mismatch_is_skipped_and_logged(session_factory: sessionmaker, log_messages: List[str]) -> None:
    _seed(
        session_factory,
        ErrorCode(code=1, application_name="A", message="m", type=ErrorCodeType.AUTO_GENERATION, updated_at=OLD_TIMESTAMP),
    )

    _reconcile(session_factory, [_declared(1, "B", "m2")])

    stored = _load_by_code(session_factory, 1)
    assert (stored.application_name, stored.message, stored.updated_at) == ("A", "m", OLD_TIMESTAMP)
    assert any("1/B" in message and "1/A" in message for message in log_messages)


def test_manual_records_are_never_touched(session_factory: sessionmaker, log_messages: List[str]) -> None:
    _seed(
        session_factory,
        ErrorCode(code=1, application_name="A", message="m", type=ErrorCodeType.MANUAL_OPERATION, updated_at=OLD_TIMESTAMP),
    )

    _reconcile(session_factory, [_declared(1, "A", "m2")])

    stored = _load_by_code(session_factory, 1)
    assert (stored.message, stored.type, stored.updated_at) == ("m", ErrorCodeType.MANUAL_OPERATION, OLD_TIMESTAMP)
    assert log_messages == []


def test_manual_record_claimed_by_another_application_is_skipped_silently(
    session_factory: sessionmaker, log_messages: List[str]
) -> None:
    _seed(session_factory, ErrorCode(code=1, application_name="A", message="m", type=ErrorCodeType.MANUAL_OPERATION))

    _reconcile(session_factory, [_declared(1, "B", "m2")])

    assert _snapshot(session_factory) == [(1, "A", "m", ErrorCodeType.MANUAL_OPERATION)]
    assert log_messages == []


def test_identical_message_is_not_rewritten(session_factory: sessionmaker) -> None:
    _seed(
        session_factory,
        ErrorCode(code=1, application_name="A", message="same", type=ErrorCodeType.AUTO_GENERATION, updated_at=OLD_TIMESTAMP),
    )

    _reconcile(session_factory, [_declared(1, "A", "same")])

    assert _load_by_code(session_factory, 1).updated_at == OLD_TIMESTAMP


def test_reconcile_is_idempotent(session_factory: sessionmaker) -> None:
    _seed(
        session_factory,
        ErrorCode(code=1, application_name="A", message="old", type=ErrorCodeType.AUTO_GENERATION),
        ErrorCode(code=2, application_name="A", message="manual", type=ErrorCodeType.MANUAL_OPERATION),
        ErrorCode(code=3, application_name="C", message="owned", type=ErrorCodeType.AUTO_GENERATION),
    )
    batch = [
        _declared(1, "A", "new"),
        _declared(2, "A", "ignored"),
        _declared(3, "A", "conflict"),
        _declared(4, "A", "inserted"),
    ]

    _reconcile(session_factory, batch)
    once = _snapshot(session_factory)
    _reconcile(session_factory, batch)

    assert _snapshot(session_factory) == once
    assert once == [
        (1, "A", "new", ErrorCodeType.AUTO_GENERATION),
        (2, "A", "manual", ErrorCodeType.MANUAL_OPERATION),
        (3, "C", "owned", ErrorCodeType.AUTO_GENERATION),
        (4, "A", "inserted", ErrorCodeType.AUTO_GENERATION),
    ]


def test_new_code_declared_twice_is_inserted_once_from_last_declaration(session_factory: sessionmaker, log_messages: List[str]) -> None:
    _reconcile(session_factory, [_declared(1, "A", "first"), _declared(2, "A", "other"), _declared(1, "A", "second")])

    assert _snapshot(session_factory) == [
        (1, "A", "second", ErrorCodeType.AUTO_GENERATION),
        (2, "A", "other", ErrorCodeType.AUTO_GENERATION),
    ]
    assert any("declared more than once" in message for message in log_messages)


def test_every_declaration_of_a_stored_code_is_checked_in_batch_order(
    session_factory: sessionmaker, log_messages: List[str]
) -> None:
    _seed(
        session_factory,
        ErrorCode(code=1, application_name="A", message="old", type=ErrorCodeType.AUTO_GENERATION),
    )

    _reconcile(session_factory, [_declared(1, "A", "new"), _declared(1, "B", "x")])

    assert _snapshot(session_factory) == [(1, "A", "new", ErrorCodeType.AUTO_GENERATION)]
    assert any("1/B" in message and "1/A" in message for message in log_messages)
    assert not any("declared more than once" in message for message in log_messages)


def test_conflicting_declaration_does_not_hide_a_later_valid_update(session_factory: sessionmaker) -> None:
    _seed(
        session_factory,
        ErrorCode(code=1, application_name="A", message="old", type=ErrorCodeType.AUTO_GENERATION),
    )

    _reconcile(session_factory, [_declared(1, "B", "x"), _declared(1, "A", "new")])

    assert _snapshot(session_factory) == [(1, "A", "new", ErrorCodeType.AUTO_GENERATION)]


def test_existing_records_are_loaded_with_one_query(session_factory: sessionmaker, monkeypatch: pytest.MonkeyPatch) -> None:
    _seed(session_factory, ErrorCode(code=1, application_name="A", message="m", type=ErrorCodeType.AUTO_GENERATION))
    session = session_factory()
    reconciler = ErrorCodeReconciler(session)
    calls = []
    original = reconciler.repository.find_many_by_codes

    def _spy(codes):
        calls.append(set(codes))
        return original(codes)

    monkeypatch.setattr(reconciler.repository, "find_many_by_codes", _spy)

    reconciler.reconcile([_declared(1, "A", "m2"), _declared(2, "A", "n"), _declared(1, "A", "m3")])
    session.close()

    assert calls == [{1, 2}]
    assert _snapshot(session_factory)[0] == (1, "A", "m3", ErrorCodeType.AUTO_GENERATION)


def test_fault_rolls_back_the_whole_batch(session_factory: sessionmaker, monkeypatch: pytest.MonkeyPatch) -> None:
    _seed(session_factory, ErrorCode(code=1, application_name="A", message="old", type=ErrorCodeType.AUTO_GENERATION))
    session = session_factory()
    reconciler = ErrorCodeReconciler(session)

    def _failing_update(identifier, updates):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(reconciler.repository, "update", _failing_update)

    with pytest.raises(RuntimeError):
        reconciler.reconcile([_declared(10, "A", "inserted first"), _declared(1, "A", "new")])
    session.close()

    assert _snapshot(session_factory) == [(1, "A", "old", ErrorCodeType.AUTO_GENERATION)]
