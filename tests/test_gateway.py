"""Tests for the persistence gateway."""

import uuid
from datetime import datetime

import pytest

from squad_feedback.core.exceptions import ConstraintError, RecordNotFoundError, StorageError
from squad_feedback.models import Event, User
from squad_feedback.services.gateway import Gateway


@pytest.fixture
def gateway(db):
    return Gateway(db)


class TestGetById:
    def test_found(self, gateway, event):
        record = gateway.get_by_id("events", event.id)
        assert record.name == event.name

    def test_accepts_string_id(self, gateway, event):
        assert gateway.get_by_id("events", str(event.id)).id == event.id

    def test_missing(self, gateway):
        missing = uuid.uuid4()
        with pytest.raises(RecordNotFoundError) as exc_info:
            gateway.get_by_id("events", missing)
        assert exc_info.value.table == "events"
        assert str(missing) in exc_info.value.message

    def test_malformed_id_is_not_found(self, gateway):
        with pytest.raises(RecordNotFoundError):
            gateway.get_by_id("users", "not-a-uuid")

    def test_unknown_table(self, gateway):
        with pytest.raises(StorageError, match="Unknown table"):
            gateway.get_by_id("players", uuid.uuid4())


class TestListBy:
    def test_filter_and_order(self, gateway, db):
        for name, month in [("B", 2), ("A", 1), ("C", 3)]:
            db.add(Event(name=name, type="training", date=datetime(2026, month, 1), club="X"))
        db.add(Event(name="Other", type="match", date=datetime(2026, 4, 1), club="Y"))
        db.commit()

        rows = gateway.list_by("events", {"club": "X"}, order_by="date")
        assert [r.name for r in rows] == ["A", "B", "C"]

        rows = gateway.list_by("events", {"club": "X"}, order_by="date", descending=True)
        assert [r.name for r in rows] == ["C", "B", "A"]

    def test_no_filters(self, gateway, coach, player):
        assert len(gateway.list_by("users")) == 2

    def test_unknown_column(self, gateway):
        with pytest.raises(StorageError, match="does not exist"):
            gateway.list_by("users", {"shirt": 9})

    def test_malformed_uuid_filter(self, gateway):
        with pytest.raises(StorageError, match="invalid input syntax for type uuid"):
            gateway.list_by("forms", {"event_id": "abc"})


class TestInsert:
    def test_insert_returns_record(self, gateway):
        user = gateway.insert("users", {"name": "Jordan Lee", "role": "player", "club": "Riverside FC"})
        assert isinstance(user, User)
        assert user.id is not None
        assert user.created_at is not None

    def test_insert_unknown_column(self, gateway, db):
        with pytest.raises(StorageError):
            gateway.insert("users", {"name": "Jordan", "role": "player", "club": "X", "shirt": 4})
        assert db.query(User).count() == 0

    def test_insert_constraint_violation(self, gateway, db):
        with pytest.raises(ConstraintError):
            gateway.insert("users", {"name": None, "role": "player", "club": "X"})
        assert db.query(User).count() == 0

    def test_insert_many_is_all_or_nothing(self, gateway, db):
        rows = [
            {"name": "Ok", "role": "player", "club": "X"},
            {"name": None, "role": "player", "club": "X"},
        ]
        with pytest.raises(ConstraintError):
            gateway.insert_many("users", rows)
        assert db.query(User).count() == 0


class TestUpdateDelete:
    def test_update(self, gateway, player):
        updated = gateway.update("users", player.id, {"position": "Defender"})
        assert updated.position == "Defender"

    def test_update_missing(self, gateway):
        with pytest.raises(RecordNotFoundError):
            gateway.update("users", uuid.uuid4(), {"position": "Defender"})

    def test_delete(self, gateway, db, player):
        gateway.delete("users", player.id)
        assert db.get(User, player.id) is None

    def test_delete_missing(self, gateway):
        with pytest.raises(RecordNotFoundError):
            gateway.delete("users", uuid.uuid4())
