import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.crud import FieldCRUD
from catalog.field_values import FieldValuesManager
from catalog.models import Base, Database, Table


class RecordingDispatcher:
    """Collects submitted tasks instead of running them, so tests decide when they run."""

    def __init__(self):
        self.tasks = []

    def submit(self, fn, *args, description=None, **kwargs):
        self.tasks.append((fn, args, kwargs, description))

    @property
    def task_names(self):
        return [fn.__name__ for fn, _, _, _ in self.tasks]

    def run_all(self):
        tasks, self.tasks = self.tasks, []
        return [fn(*args, **kwargs) for fn, args, kwargs, _ in tasks]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()


@pytest.fixture
def values_manager(session_factory):
    return FieldValuesManager(
        session_factory=session_factory,
        values_source=lambda field, limit: ["Bar", "Cafe", None, "Bar", "Diner"],
        max_distinct=100,
    )


@pytest.fixture
def crud(dispatcher, values_manager):
    return FieldCRUD(dispatcher=dispatcher, values_manager=values_manager)


@pytest.fixture
def database(db):
    database = Database(name="Sample Dataset", engine="h2")
    db.add(database)
    db.commit()
    return database


@pytest.fixture
def table(db, database):
    table = Table(db_id=database.id, name="venues")
    db.add(table)
    db.commit()
    return table


@pytest.fixture
def make_field(crud, db, table):
    def _make_field(name, base_type="TextField", **values):
        values.setdefault("table_id", table.id)
        return crud.create(db, {"name": name, "base_type": base_type, **values})
    return _make_field
