"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from factories import MEMBER, ORGANIZER, RecordingDispatcher
from gatherings import models
from gatherings.domain import Caller
from gatherings.services import ConfirmationSender
from gatherings.stores import InMemoryEventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore(users=[ORGANIZER, MEMBER])


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def confirmations(dispatcher: RecordingDispatcher) -> ConfirmationSender:
    return ConfirmationSender(dispatcher)


@pytest.fixture
def caller() -> Caller:
    return Caller(user_id=MEMBER.id, email="member@example.com", name=MEMBER.name)


@pytest.fixture
def member(django_user_model):
    return django_user_model.objects.create_user(
        username="member",
        email="member@example.com",
        password="secret-pass",
        first_name="Amal",
        last_name="Hassan",
    )


@pytest.fixture
def staff(django_user_model):
    return django_user_model.objects.create_user(
        username="organizer",
        email="organizer@example.com",
        password="secret-pass",
        is_staff=True,
    )


@pytest.fixture
def event_factory(staff):
    def create(**overrides) -> models.Event:
        values = {
            "title": "Community Iftar",
            "description": "Evening gathering",
            "date": timezone.now() + timedelta(days=7),
            "location": "Main Hall",
            "organizer": staff,
            "ticket_limit": 10,
        }
        values.update(overrides)
        return models.Event.objects.create(**values)

    return create
