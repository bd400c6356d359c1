import pytest
from sqlalchemy import delete, event

from catalog.core.exceptions import DetachedRecordError, NotFound
from catalog.crud import foreign_key as fk_crud
from catalog.models import Field, Table


@pytest.fixture
def statement_counter(engine):
    statements = []

    def _count(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", _count)
    yield statements
    event.remove(engine, "before_cursor_execute", _count)


def test_table_and_db_resolve_through_the_owning_table(make_field, table, database):
    field = make_field("name")

    assert field.table.id == table.id
    assert field.db.id == database.id
    assert field.db.name == "Sample Dataset"


def test_derived_attributes_are_memoized_per_instance(make_field, statement_counter):
    field = make_field("name")
    _ = field.name  # load expired columns first

    statement_counter.clear()
    first = field.table
    after_first = len(statement_counter)
    second = field.table

    assert first is second
    assert len(statement_counter) == after_first
    assert "table" in field.__dict__


def test_fresh_instance_recomputes(make_field, session_factory, table):
    field = make_field("name")

    with session_factory() as other:
        fresh = other.get(Field, field.id)
        assert fresh is not field
        assert fresh.table.id == table.id
        assert fresh.table is not field.table


def test_table_raises_not_found_after_schema_drift(make_field, db, session_factory, table):
    field = make_field("name")
    db.execute(delete(Table).where(Table.id == table.id))
    db.commit()

    with session_factory() as other:
        fresh = other.get(Field, field.id)
        with pytest.raises(NotFound) as exc_info:
            fresh.table
        assert exc_info.value.entity == "Table"
        with pytest.raises(NotFound):
            fresh.qualified_name


def test_qualified_name_of_top_level_field(make_field):
    field = make_field("price", "IntegerField")
    assert field.qualified_name == "venues.price"


def test_qualified_name_walks_the_parent_chain(make_field):
    address = make_field("address", "DictionaryField")
    city = make_field("city", parent_id=address.id)
    geo = make_field("geo", "DictionaryField", parent_id=address.id)
    lat = make_field("lat", "FloatField", parent_id=geo.id)

    assert city.qualified_name == "venues.address.city"
    assert lat.qualified_name == f"{geo.qualified_name}.lat"
    assert lat.qualified_name == "venues.address.geo.lat"
    assert lat.parent.id == geo.id
    assert address.parent is None


def test_missing_parent_raises_not_found(make_field, db, session_factory):
    address = make_field("address", "DictionaryField")
    city = make_field("city", parent_id=address.id)
    db.execute(delete(Field).where(Field.id == address.id))
    db.commit()

    with session_factory() as other:
        with pytest.raises(NotFound):
            other.get(Field, city.id).parent


def test_target_follows_the_foreign_key(make_field, db):
    category = make_field("id", "IntegerField", special_type="id")
    category_id = make_field("category_id", "IntegerField", special_type="fk")
    fk_crud.create(db, category_id.id, category.id)

    assert category_id.target.id == category.id


def test_target_is_none_without_fk_special_type(make_field, db):
    category = make_field("id", "IntegerField", special_type="id")
    category_id = make_field("category_id", "IntegerField")
    fk_crud.create(db, category_id.id, category.id)

    assert category_id.target is None


def test_target_is_none_without_foreign_key_row(make_field):
    field = make_field("category_id", "IntegerField", special_type="fk")
    assert field.target is None


def test_permissions_come_from_the_table(make_field, db, table):
    table.can_write = False
    db.commit()
    field = make_field("name")

    assert field.can_read is True
    assert field.can_write is False


def test_human_readable_name(make_field):
    assert make_field("category_id", "IntegerField").human_readable_name == "Category"
    assert make_field("createdAt", "DateTimeField").human_readable_name == "Created At"


def test_detached_field_cannot_resolve(make_field, db):
    field = make_field("name")
    _ = field.table_id
    db.expunge(field)

    with pytest.raises(DetachedRecordError):
        field.table
