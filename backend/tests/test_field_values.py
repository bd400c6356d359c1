import numpy as np
import pytest
from sqlalchemy import delete, func, select

from catalog.field_values import (
    FieldProjection,
    FieldValuesManager,
    should_have_field_values,
    summarize_distinct_values,
)
from catalog.models import BaseType, Field, FieldType, FieldValues, SpecialType


def _projection(base_type=BaseType.TextField, special_type=None, field_type=FieldType.info, field_id=1):
    return FieldProjection(field_id, 1, base_type, special_type, field_type)


@pytest.mark.parametrize("projection, expected", [
    (_projection(special_type=SpecialType.category), True),
    (_projection(special_type=SpecialType.city), True),
    (_projection(special_type=SpecialType.state), True),
    (_projection(special_type=SpecialType.country), True),
    (_projection(base_type=BaseType.BooleanField), True),
    (_projection(special_type=SpecialType.name), False),
    (_projection(base_type=BaseType.IntegerField), False),
    (_projection(special_type=SpecialType.category, field_type=FieldType.sensitive), False),
])
def test_should_have_field_values(projection, expected):
    assert should_have_field_values(projection) is expected


def test_summarize_distinct_values_drops_nulls_and_duplicates():
    assert summarize_distinct_values(["b", None, "a", "b"], limit=10) == ["b", "a"]


def test_summarize_distinct_values_caps_and_unwraps_numpy_scalars():
    values = summarize_distinct_values([np.int64(3), np.int64(1), np.int64(3), np.int64(2)], limit=2)

    assert values == [3, 1]
    assert all(type(v) is int for v in values)


def test_create_field_values_if_needed_is_idempotent(make_field, values_manager, db):
    field = make_field("category", special_type="category")
    projection = FieldProjection.from_field(field)

    first = values_manager.create_field_values_if_needed(projection)
    second = values_manager.create_field_values_if_needed(projection)

    assert first.id == second.id
    assert db.scalar(select(func.count()).select_from(FieldValues)) == 1


def test_create_field_values_if_needed_skips_fields_without_values(make_field, values_manager, db):
    field = make_field("price", "IntegerField")

    assert values_manager.create_field_values_if_needed(FieldProjection.from_field(field)) is None
    assert db.scalar(select(func.count()).select_from(FieldValues)) == 0


def test_create_field_values_for_a_field_deleted_meanwhile(make_field, values_manager, db):
    field = make_field("category", special_type="category")
    projection = FieldProjection.from_field(field)
    db.execute(delete(Field).where(Field.id == field.id))
    db.commit()

    assert values_manager.create_field_values(projection) is None
    assert db.scalar(select(func.count()).select_from(FieldValues)) == 0


def test_create_field_values_refreshes_existing_record(make_field, values_manager, db):
    field = make_field("category", special_type="category")
    db.add(FieldValues(field_id=field.id, values=["stale"]))
    db.commit()

    values_manager.create_field_values(FieldProjection.from_field(field))

    db.expire_all()
    stored = db.scalar(select(FieldValues).where(FieldValues.field_id == field.id))
    assert stored.values == ["Bar", "Cafe", "Diner"]


def test_without_a_values_source_nothing_is_stored(make_field, session_factory, values_manager, db):
    field = make_field("category", special_type="category")
    projection = FieldProjection.from_field(field)
    unwired = FieldValuesManager(session_factory=session_factory, max_distinct=100)

    assert unwired.create_field_values_if_needed(projection) is None
    assert db.scalar(select(func.count()).select_from(FieldValues)) == 0

    stored = values_manager.create_field_values_if_needed(projection)
    assert stored.values == ["Bar", "Cafe", "Diner"]
