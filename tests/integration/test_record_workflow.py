"""End-to-end workflows across record flavours."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest
from pydantic import BaseModel, ConfigDict, ValidationError

from recordkit import (
    ChangeSet,
    ConstraintViolationError,
    FieldNotFoundError,
    TypeMismatchError,
    fields,
    record,
    start_change_set,
    with_changes,
)


@record
class Shipment(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference: str
    weight_kg: float = 0.0
    dispatched_at: datetime | None = None

    def validate(self, candidate: "Shipment") -> None:
        if candidate.weight_kg < 0:
            raise ConstraintViolationError("weight_kg must not be negative")


@record
@dataclass(slots=True)
class Draft:
    body: str = ""
    revisions: list[str] = field(default_factory=list)


def test_frozen_pydantic_model_round_trip():
    original = Shipment(reference="S-1")
    dispatched = datetime(2024, 5, 1, 12, 0)

    result = with_changes(
        original,
        lambda c: c.assign("weight_kg", 12.0).assign("dispatched_at", dispatched),
    )

    assert result.weight_kg == 12.0
    assert isinstance(result.weight_kg, float)
    assert result.dispatched_at == dispatched
    assert result.reference == "S-1"
    assert original.weight_kg == 0.0
    assert original.dispatched_at is None


def test_frozen_pydantic_model_still_rejects_direct_assignment():
    result = with_changes(Shipment(reference="S-1"), lambda c: c.assign("reference", "S-2"))

    with pytest.raises(ValidationError):
        result.reference = "S-3"  # type: ignore[misc]
    assert result.reference == "S-2"


def test_pydantic_validator_rejects_candidate():
    original = Shipment(reference="S-1", weight_kg=3)

    with pytest.raises(ConstraintViolationError, match="weight_kg"):
        with_changes(original, lambda c: c.transform("weight_kg", lambda s: s.weight_kg - 10))
    assert original.weight_kg == 3


def test_pydantic_build_time_errors():
    changes = start_change_set(Shipment(reference="S-1"))

    with pytest.raises(TypeMismatchError):
        changes.assign("dispatched_at", "yesterday")
    with pytest.raises(FieldNotFoundError):
        changes.assign("carrier", "acme")
    assert changes.is_empty()


def test_shallow_copy_shares_nested_values():
    original = Draft(body="v1", revisions=["v0"])
    changes = ChangeSet(Draft).transform(fields(Draft).body, lambda d: d.body + "!")

    result = changes.to_new_record(original)

    assert result.body == "v1!"
    assert result.revisions is original.revisions
    assert original.body == "v1"


def test_mutable_dataclass_written_through_setattr():
    descriptor = fields(Draft).body

    assert descriptor.externally_writable
    assert with_changes(Draft(), lambda c: c.assign(descriptor, "text")).body == "text"


def test_one_change_set_many_records():
    bump = ChangeSet(Shipment).transform("weight_kg", lambda s: s.weight_kg + 1.5)
    shipments = [Shipment(reference=f"S-{i}", weight_kg=i) for i in range(3)]

    results = [bump.to_new_record(s) for s in shipments]

    assert [r.weight_kg for r in results] == [1.5, 2.5, 3.5]
    assert [s.weight_kg for s in shipments] == [0, 1, 2]
    assert len({id(r) for r in results}) == 3


def test_frozen_pydantic_write_marks_field_as_set():
    original = Shipment(reference="S-1")

    result = with_changes(original, lambda c: c.assign("weight_kg", 12.0))

    assert result.model_fields_set == {"reference", "weight_kg"}
    assert result.model_dump(exclude_unset=True) == {"reference": "S-1", "weight_kg": 12.0}
    assert original.model_fields_set == {"reference"}
