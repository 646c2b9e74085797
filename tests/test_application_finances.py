"""
Tests for the recurring transaction processor use case.

In-memory fakes stand in for the repositories. They mimic the
database's unique occurrence key and compare-and-set date update.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from app.application.finances.dtos import ProcessRecurringCommand
from app.application.finances.process_recurring import (
    NOTIFICATION_TITLE,
    NOTIFICATION_TYPE,
    ProcessRecurringUseCase,
)
from app.domain.finances.entities import (
    Frequency,
    GeneratedTransaction,
    Notification,
    RecurringTransaction,
    TransactionType,
)
from app.domain.finances.ports import (
    LedgerRepository,
    NotificationRepository,
    RecurringTransactionRepository,
)

TODAY = date(2025, 3, 31)


class FakeRecurringRepo(RecurringTransactionRepository):
    def __init__(
        self, templates: list[RecurringTransaction], failing_ids: tuple[str, ...] = ()
    ) -> None:
        self.templates = {t.id: t for t in templates}
        self.failing_ids = failing_ids

    def get_due(self, today: date) -> list[RecurringTransaction]:
        return [
            t
            for t in self.templates.values()
            if t.is_active and t.next_execution_date <= today
        ]

    def advance(self, recurring_id: str, expected: date, next_date: date) -> bool:
        if recurring_id in self.failing_ids:
            raise RuntimeError("update failed")
        current = self.templates[recurring_id]
        if current.next_execution_date != expected:
            return False
        self.templates[recurring_id] = replace(current, next_execution_date=next_date)
        return True


class FakeLedger(LedgerRepository):
    def __init__(self, failing_ids: tuple[str, ...] = ()) -> None:
        self.rows: dict[tuple[str, date], GeneratedTransaction] = {}
        self.failing_ids = failing_ids

    def add_generated(self, transaction: GeneratedTransaction) -> bool:
        if transaction.recurring_id in self.failing_ids:
            raise RuntimeError("insert failed")
        key = (transaction.recurring_id, transaction.transaction_date)
        if key in self.rows:
            return False
        self.rows[key] = transaction
        return True


class FakeNotifications(NotificationRepository):
    def __init__(self, failing_users: tuple[str, ...] = ()) -> None:
        self.sent: list[Notification] = []
        self.failing_users = failing_users

    def add(self, notification: Notification) -> None:
        if notification.user_id in self.failing_users:
            raise RuntimeError("notification failed")
        self.sent.append(notification)


def _template(id: str, **overrides) -> RecurringTransaction:
    fields = dict(
        id=id,
        user_id=f"user-{id}",
        title=f"Template {id}",
        amount=Decimal("100.50"),
        type=TransactionType.EXPENSE,
        category="Contas",
        frequency=Frequency.MONTHLY,
        next_execution_date=TODAY,
        day_of_month=31,
    )
    fields.update(overrides)
    return RecurringTransaction(**fields)


def _use_case(templates, ledger=None):
    recurring = FakeRecurringRepo(templates)
    ledger = ledger or FakeLedger()
    notifications = FakeNotifications()
    use_case = ProcessRecurringUseCase(recurring, ledger, notifications)
    return use_case, recurring, ledger, notifications


class TestProcessRecurring:
    """Tests for ProcessRecurringUseCase."""

    def test_generates_advances_and_notifies(self) -> None:
        use_case, recurring, ledger, notifications = _use_case([_template("a")])

        result = use_case.execute(ProcessRecurringCommand(today=TODAY))

        assert result.processed == 1
        assert result.skipped == 0
        assert result.errors == []
        assert list(ledger.rows) == [("a", TODAY)]
        assert recurring.templates["a"].next_execution_date == date(2025, 4, 30)
        assert notifications.sent == [
            Notification(
                user_id="user-a",
                type=NOTIFICATION_TYPE,
                title=NOTIFICATION_TITLE,
                message="Template a - R$ 100.50",
            )
        ]

    def test_nothing_due(self) -> None:
        use_case, _, ledger, notifications = _use_case(
            [_template("a", next_execution_date=date(2025, 4, 1))]
        )
        result = use_case.execute(ProcessRecurringCommand(today=TODAY))
        assert result.processed == 0
        assert ledger.rows == {}
        assert notifications.sent == []

    def test_one_failing_insert_does_not_stop_the_others(self) -> None:
        templates = [_template(i) for i in ("a", "b", "c", "d")]
        use_case, recurring, ledger, notifications = _use_case(
            templates, ledger=FakeLedger(failing_ids=("c",))
        )

        result = use_case.execute(ProcessRecurringCommand(today=TODAY))

        assert result.processed == 3
        assert len(ledger.rows) == 3
        assert len(result.errors) == 1
        assert "transaction c:" in result.errors[0]
        assert "insert failed" in result.errors[0]
        assert recurring.templates["c"].next_execution_date == TODAY
        assert len(notifications.sent) == 3

    def test_failing_advance_is_reported_and_rerun_skips(self) -> None:
        templates = [_template(i) for i in ("a", "b", "c")]
        ledger = FakeLedger()
        recurring = FakeRecurringRepo(templates, failing_ids=("b",))
        notifications = FakeNotifications()
        use_case = ProcessRecurringUseCase(recurring, ledger, notifications)

        result = use_case.execute(ProcessRecurringCommand(today=TODAY))

        assert result.processed == 2
        assert len(result.errors) == 1
        assert "transaction b:" in result.errors[0]
        assert "update failed" in result.errors[0]
        assert recurring.templates["a"].next_execution_date == date(2025, 4, 30)
        assert recurring.templates["c"].next_execution_date == date(2025, 4, 30)
        assert recurring.templates["b"].next_execution_date == TODAY

        recurring.failing_ids = ()
        rerun = use_case.execute(ProcessRecurringCommand(today=TODAY))

        assert rerun.processed == 0
        assert rerun.skipped == 1
        assert rerun.errors == []
        assert sorted(ledger.rows) == [("a", TODAY), ("b", TODAY), ("c", TODAY)]
        assert recurring.templates["b"].next_execution_date == date(2025, 4, 30)

    def test_failing_notification_is_reported_per_template(self) -> None:
        templates = [_template(i) for i in ("a", "b", "c")]
        recurring = FakeRecurringRepo(templates)
        ledger = FakeLedger()
        notifications = FakeNotifications(failing_users=("user-a",))
        use_case = ProcessRecurringUseCase(recurring, ledger, notifications)

        result = use_case.execute(ProcessRecurringCommand(today=TODAY))

        assert result.processed == 2
        assert len(result.errors) == 1
        assert "transaction a:" in result.errors[0]
        assert "notification failed" in result.errors[0]
        assert [n.user_id for n in notifications.sent] == ["user-b", "user-c"]
        assert len(ledger.rows) == 3
        assert all(
            t.next_execution_date == date(2025, 4, 30)
            for t in recurring.templates.values()
        )

    def test_second_run_same_day_is_noop(self) -> None:
        use_case, recurring, ledger, notifications = _use_case([_template("a")])

        use_case.execute(ProcessRecurringCommand(today=TODAY))
        second = use_case.execute(ProcessRecurringCommand(today=TODAY))

        assert second.processed == 0
        assert len(ledger.rows) == 1
        assert len(notifications.sent) == 1

    def test_existing_occurrence_is_skipped_but_advanced(self) -> None:
        template = _template("a")
        ledger = FakeLedger()
        ledger.add_generated(GeneratedTransaction.from_template(template))
        use_case, recurring, _, notifications = _use_case([template], ledger=ledger)

        result = use_case.execute(ProcessRecurringCommand(today=TODAY))

        assert result.processed == 0
        assert result.skipped == 1
        assert result.errors == []
        assert notifications.sent == []
        assert recurring.templates["a"].next_execution_date == date(2025, 4, 30)

    def test_template_past_end_date_is_ignored(self) -> None:
        template = _template("a", next_execution_date=TODAY, end_date=date(2025, 3, 30))
        use_case, recurring, ledger, _ = _use_case([template])

        result = use_case.execute(ProcessRecurringCommand(today=TODAY))

        assert result.processed == 0
        assert ledger.rows == {}
        assert recurring.templates["a"].next_execution_date == TODAY

    def test_last_occurrence_then_template_ends(self) -> None:
        template = _template(
            "a",
            frequency=Frequency.DAILY,
            next_execution_date=date(2025, 3, 30),
            end_date=date(2025, 3, 30),
        )
        use_case, recurring, ledger, _ = _use_case([template])

        first = use_case.execute(ProcessRecurringCommand(today=date(2025, 3, 30)))
        later = use_case.execute(ProcessRecurringCommand(today=date(2025, 4, 5)))

        assert first.processed == 1
        assert later.processed == 0
        assert list(ledger.rows) == [("a", date(2025, 3, 30))]
        assert recurring.templates["a"].next_execution_date == date(2025, 3, 31)

    def test_overdue_template_generates_one_occurrence_per_run(self) -> None:
        template = _template(
            "a", frequency=Frequency.WEEKLY, next_execution_date=date(2025, 3, 3)
        )
        use_case, recurring, ledger, _ = _use_case([template])

        result = use_case.execute(ProcessRecurringCommand(today=TODAY))

        assert result.processed == 1
        assert list(ledger.rows) == [("a", date(2025, 3, 3))]
        assert recurring.templates["a"].next_execution_date == date(2025, 3, 10)

    def test_invalid_anchor_reported_as_error(self) -> None:
        use_case, _, ledger, _ = _use_case([_template("bad", day_of_month=40), _template("ok")])

        result = use_case.execute(ProcessRecurringCommand(today=TODAY))

        assert result.processed == 1
        assert len(result.errors) == 1
        assert "bad" in result.errors[0]
        assert list(ledger.rows) == [("ok", TODAY)]
