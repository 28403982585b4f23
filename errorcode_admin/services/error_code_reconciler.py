from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Dict, Optional, Sequence

from sqlalchemy.orm import Session

from errorcode_admin.entities import ErrorCode, ErrorCodeType
from errorcode_admin.models import ErrorCodeAutoGenerateItem
from errorcode_admin.repositories import ErrorCodeRepository, unit_of_work
from errorcode_admin.utils.logger import logger


class ReconcileOutcome(str, Enum):
    INSERTED = "inserted"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED_MANUAL = "skipped_manual"
    SKIPPED_CONFLICT = "skipped_conflict"
    SUPERSEDED = "superseded"


class ErrorCodeReconciler:
    """Merges error codes declared by applications into the catalog.

    New codes are inserted as ``AUTO_GENERATION`` records. An existing record
    only has its message refreshed, and only when it was auto-generated, is
    owned by the declaring application and the message actually differs.
    Manual records are never touched. Reconciliation never deletes.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.repository = ErrorCodeRepository(session)

    def reconcile(self, declared: Sequence[ErrorCodeAutoGenerateItem]) -> None:
        """Apply the whole batch in one unit of work."""
        if not declared:
            return

        outcomes: Counter = Counter()
        with unit_of_work(self.session):
            declared_codes = {item.code for item in declared}
            existing = {record.code: record for record in self.repository.find_many_by_codes(declared_codes)}
            latest_new = self._latest_new_per_code(declared, existing)
            for item in declared:
                if item.code not in existing and latest_new[item.code] is not item:
                    outcomes[ReconcileOutcome.SUPERSEDED] += 1
                    continue
                outcome = self._reconcile_one(item, existing.get(item.code))
                outcomes[outcome] += 1

        logger.debug(
            "Reconciled {} declared error codes: {}",
            len(declared),
            ", ".join(f"{outcome.value}={count}" for outcome, count in sorted(outcomes.items())),
        )

    def _reconcile_one(self, item: ErrorCodeAutoGenerateItem, existing: Optional[ErrorCode]) -> ReconcileOutcome:
        if existing is None:
            self.repository.create(
                {
                    "code": item.code,
                    "application_name": item.application_name,
                    "message": item.message,
                    "type": ErrorCodeType.AUTO_GENERATION,
                }
            )
            return ReconcileOutcome.INSERTED

        if existing.type != ErrorCodeType.AUTO_GENERATION:
            return ReconcileOutcome.SKIPPED_MANUAL

        if existing.application_name != item.application_name:
            logger.error(
                "Auto-generated error code {}/{} rejected: code already owned as {}/{}",
                item.code,
                item.application_name,
                existing.code,
                existing.application_name,
            )
            return ReconcileOutcome.SKIPPED_CONFLICT

        if existing.message == item.message:
            return ReconcileOutcome.UNCHANGED

        self.repository.update(existing.id, {"message": item.message})
        return ReconcileOutcome.UPDATED

    @staticmethod
    def _latest_new_per_code(
        declared: Sequence[ErrorCodeAutoGenerateItem], existing: Dict[int, ErrorCode]
    ) -> Dict[int, ErrorCodeAutoGenerateItem]:
        # A code not stored yet is inserted once, from its last declaration in the batch.
        latest: Dict[int, ErrorCodeAutoGenerateItem] = {}
        for item in declared:
            if item.code in existing:
                continue
            if item.code in latest:
                logger.warning(
                    "New error code {} declared more than once in one batch, keeping the declaration from {}",
                    item.code,
                    item.application_name,
                )
            latest[item.code] = item
        return latest
