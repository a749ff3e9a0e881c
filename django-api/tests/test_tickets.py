"""Unit tests for TicketService.

These test inventory limits, concurrent purchases and the confirmation
side effect on the in-memory store.
Run with: pytest tests/test_tickets.py -v
"""

import threading
import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest

from factories import RecordingDispatcher, make_event
from gatherings.domain import NotificationStatus
from gatherings.domain.errors import (
    ErrorCode,
    EventNotFoundError,
    InsufficientInventoryError,
    InvalidEventIdError,
    InvalidInputError,
    PersistenceConflictError,
)
from gatherings.services import ConfirmationSender, TicketService


@pytest.fixture
def service(store, confirmations) -> TicketService:
    return TicketService(store, confirmations, signature="The Events Team")


class TestPurchase:
    """Tests for TicketService.purchase."""

    def test_purchase_over_remaining_is_rejected(self, service, store, caller):
        """limit=10, sold=8: buying 3 fails and sold stays 8."""
        event = make_event(limit=10, sold=8)
        store.put_event(event)

        with pytest.raises(InsufficientInventoryError) as excinfo:
            service.purchase(str(event.id), caller, 3)

        assert excinfo.value.code is ErrorCode.INSUFFICIENT_INVENTORY
        assert excinfo.value.available == 2
        assert store.get_event(event.id).tickets.sold == 8

    def test_purchase_to_the_limit_then_sold_out(self, service, store, caller):
        """limit=10, sold=8: buying 2 succeeds, buying 1 more fails."""
        event = make_event(limit=10, sold=8)
        store.put_event(event)

        receipt = service.purchase(str(event.id), caller, 2)

        assert receipt.event.tickets.sold == 10
        assert receipt.quantity.value == 2
        assert receipt.user_id == caller.user_id
        with pytest.raises(InsufficientInventoryError):
            service.purchase(str(event.id), caller, 1)
        assert service.tickets_sold(str(event.id)) == 10

    def test_insufficient_inventory_is_a_persistence_conflict(self, service, store, caller):
        event = make_event(limit=1, sold=1)
        store.put_event(event)
        with pytest.raises(PersistenceConflictError):
            service.purchase(str(event.id), caller, 1)

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_purchase_rejects_non_positive_quantity(self, service, store, caller, quantity):
        event = make_event()
        store.put_event(event)
        with pytest.raises(InvalidInputError) as excinfo:
            service.purchase(str(event.id), caller, quantity)
        assert excinfo.value.code is ErrorCode.INVALID_INPUT

    def test_purchase_rejects_quantity_beyond_column_range(self, service, store, caller):
        event = make_event()
        store.put_event(event)
        with pytest.raises(InvalidInputError):
            service.purchase(str(event.id), caller, 2**70)
        assert store.get_event(event.id).tickets.sold == 0

    def test_purchase_unknown_event(self, service, caller):
        with pytest.raises(EventNotFoundError):
            service.purchase(str(uuid.uuid4()), caller, 1)

    def test_purchase_invalid_event_id(self, service, caller):
        with pytest.raises(InvalidEventIdError):
            service.purchase("42", caller, 1)

    def test_tickets_sold_unknown_event(self, service):
        with pytest.raises(EventNotFoundError):
            service.tickets_sold(str(uuid.uuid4()))


class TestConcurrentPurchases:
    """The sold count never passes the limit under concurrent buyers."""

    def test_only_purchases_that_fit_are_accepted(self, service, store, caller):
        event = make_event(limit=10, sold=0)
        store.put_event(event)
        attempts = 12
        barrier = threading.Barrier(attempts)

        def buy() -> bool:
            barrier.wait()
            try:
                service.purchase(str(event.id), caller, 3)
            except InsufficientInventoryError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=attempts) as pool:
            results = list(pool.map(lambda _: buy(), range(attempts)))

        assert results.count(True) == 3
        assert store.get_event(event.id).tickets.sold == 9

    def test_single_tickets_sell_out_exactly(self, service, store, caller):
        event = make_event(limit=25, sold=0)
        store.put_event(event)
        attempts = 40
        barrier = threading.Barrier(attempts)

        def buy() -> bool:
            barrier.wait()
            try:
                service.purchase(str(event.id), caller, 1)
            except InsufficientInventoryError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=attempts) as pool:
            results = list(pool.map(lambda _: buy(), range(attempts)))

        assert results.count(True) == 25
        assert store.get_event(event.id).tickets.sold == 25


class TestPurchaseConfirmation:
    """Tests for the confirmation email side effect."""

    def test_confirmation_sent_after_purchase(self, service, store, caller, dispatcher):
        event = make_event(title="Quran Night", limit=5)
        store.put_event(event)

        receipt = service.purchase(str(event.id), caller, 2)

        assert receipt.notification is NotificationStatus.SENT
        assert receipt.warnings == ()
        [(to_address, subject, body)] = dispatcher.sent
        assert to_address == caller.email
        assert subject == "Ticket Purchase Confirmation"
        assert 'purchasing 2 ticket(s) for the event "Quran Night"' in body
        assert "The Events Team" in body

    def test_failed_confirmation_keeps_purchase(self, store, caller, caplog):
        event = make_event(limit=5)
        store.put_event(event)
        service = TicketService(store, ConfirmationSender(RecordingDispatcher(fail=True)))

        receipt = service.purchase(str(event.id), caller, 1)

        assert receipt.notification is NotificationStatus.FAILED
        assert receipt.warnings == (ErrorCode.NOTIFICATION_FAILED.value,)
        assert store.get_event(event.id).tickets.sold == 1
        assert "mail server unavailable" in caplog.text

    def test_unexpected_dispatcher_error_keeps_purchase(self, store, caller, caplog):
        class BrokenDispatcher(RecordingDispatcher):
            def send(self, to_address, subject, body):
                raise RuntimeError("template exploded")

        event = make_event(limit=5)
        store.put_event(event)
        service = TicketService(store, ConfirmationSender(BrokenDispatcher()))

        receipt = service.purchase(str(event.id), caller, 1)

        assert receipt.notification is NotificationStatus.FAILED
        assert receipt.warnings == (ErrorCode.NOTIFICATION_FAILED.value,)
        assert store.get_event(event.id).tickets.sold == 1
        assert "template exploded" in caplog.text

    def test_deferred_confirmation(self, store, caller, dispatcher):
        event = make_event(limit=5)
        store.put_event(event)
        with ThreadPoolExecutor(max_workers=1) as executor:
            service = TicketService(store, ConfirmationSender(dispatcher, executor=executor))
            receipt = service.purchase(str(event.id), caller, 1)

        assert receipt.notification is NotificationStatus.DEFERRED
        assert len(dispatcher.sent) == 1
