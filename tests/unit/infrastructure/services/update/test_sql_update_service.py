"""Unit tests for the SQL update service."""

import uuid
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum, IntEnum

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from recordpatch.core.exceptions import UpdateServiceError
from recordpatch.domain.entities import (
    ChangeSet,
    EntityReference,
    Money,
    OptionSetValue,
    Record,
    RecordIdentity,
    UpdateRequest,
)
from recordpatch.domain.services.change_tracker import ChangeTracker
from recordpatch.infrastructure.services.update.sql_update_service import SqlUpdateService

CONTACT_ID = uuid.UUID("28595D66-C790-4DD9-B06C-C6CE9BA08A6A")


class ContactStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Priority(IntEnum):
    LOW = 1
    HIGH = 3


@pytest.fixture
def engine():
    """In-memory SQLite database with a contact table."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        conn.execute(text(
            'CREATE TABLE "contact" ('
            '"id" TEXT PRIMARY KEY, "firstname" TEXT, "lastname" TEXT, '
            '"revenue" TEXT, "industrycode" INTEGER, "parentcustomerid" TEXT, '
            '"donotemail" INTEGER, "birthdate" TEXT, "statuscode" TEXT, "priority" INTEGER, '
            '"responsetime" REAL)'
        ))
        conn.execute(
            text('INSERT INTO "contact" ("id", "lastname") VALUES (:id, :lastname)'),
            {"id": str(CONTACT_ID), "lastname": "Baggins"},
        )
    yield engine
    engine.dispose()


def _fetch(engine) -> dict:
    with engine.connect() as conn:
        row = conn.execute(
            text('SELECT * FROM "contact" WHERE "id" = :id'), {"id": str(CONTACT_ID)}
        ).fetchone()
    return dict(row._mapping)


def _request(record_id, attributes: dict) -> UpdateRequest:
    return UpdateRequest(target=ChangeSet(RecordIdentity("contact", record_id), attributes))


def test_update_changed_columns_only(engine):
    """Test that only the requested columns are written."""
    service = SqlUpdateService(engine)

    service.update(_request(CONTACT_ID, {"firstname": "Frodo"}))

    row = _fetch(engine)
    assert row["firstname"] == "Frodo"
    assert row["lastname"] == "Baggins"


def test_update_flattens_wrappers(engine):
    """Test the column representation of wrapper values."""
    account_id = uuid.uuid4()
    service = SqlUpdateService(engine)

    service.update(_request(CONTACT_ID, {
        "revenue": Money(Decimal("2000")),
        "industrycode": OptionSetValue(3),
        "parentcustomerid": EntityReference("account", account_id),
        "donotemail": True,
        "birthdate": date(2968, 9, 22),
    }))

    row = _fetch(engine)
    assert row["revenue"] == "2000"
    assert row["industrycode"] == 3
    assert row["parentcustomerid"] == str(account_id)
    assert row["donotemail"] == 1
    assert row["birthdate"] == "2968-09-22"


def test_update_flattens_enums_and_timedeltas(engine):
    """Test that enum members and durations are stored as plain values."""
    service = SqlUpdateService(engine)

    service.update(_request(CONTACT_ID, {
        "statuscode": ContactStatus.INACTIVE,
        "priority": Priority.HIGH,
        "responsetime": timedelta(minutes=90),
    }))

    row = _fetch(engine)
    assert row["statuscode"] == "inactive"
    assert row["priority"] == 3
    assert row["responsetime"] == 5400.0


def test_update_clears_column(engine):
    """Test that a None value clears the column."""
    service = SqlUpdateService(engine)

    service.update(_request(CONTACT_ID, {"lastname": None}))

    assert _fetch(engine)["lastname"] is None


def test_update_missing_row_raises(engine):
    """Test that an update matching no row raises UpdateServiceError."""
    service = SqlUpdateService(engine)

    with pytest.raises(UpdateServiceError):
        service.update(_request(uuid.uuid4(), {"firstname": "Frodo"}))


def test_update_requires_record_id(engine):
    """Test that a record without an id is rejected."""
    service = SqlUpdateService(engine)

    with pytest.raises(UpdateServiceError):
        service.update(_request(None, {"firstname": "Frodo"}))


def test_tracker_submit_over_sql(engine):
    """Test a full tracker round trip through the SQL service."""
    contact = Record("contact", CONTACT_ID, {"lastname": "Baggins"})
    service = SqlUpdateService(engine)

    with ChangeTracker(contact) as tracker:
        contact["firstname"] = "Frodo"
        contact["lastname"] = None

        assert tracker.submit(service) is True

    row = _fetch(engine)
    assert row["firstname"] == "Frodo"
    assert row["lastname"] is None
