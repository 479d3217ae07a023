"""Shared fixtures: a fresh SQLite database per test and a TestClient bound to it."""

import os

# Must be set before store_admin is imported: settings are read once
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENV", "test")
os.environ.setdefault("LOG_FORMAT", "text")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from store_admin.database import Base, get_db, make_engine
from store_admin.db.models import Store, Billboard, Category, Subcategory, Size, Color, Product, Image
from store_admin.main import app

from tests.helpers import OWNER_ID, OTHER_USER_ID


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def catalog(db):
    """store1 (owned by user_1) with one row of every entity; store2 belongs to user_2."""
    db.add_all([
        Store(id="store1", name="Main Store", user_id=OWNER_ID),
        Store(id="store2", name="Other Store", user_id=OTHER_USER_ID),
    ])
    db.flush()
    db.add(Billboard(id="bb1", store_id="store1", label="Summer", image_url="https://img.test/summer.jpg"))
    db.add(Size(id="size1", store_id="store1", name="Large", value="L"))
    db.add(Color(id="color1", store_id="store1", name="Blue", value="#00F"))
    db.flush()
    db.add(Category(id="cat1", store_id="store1", billboard_id="bb1", name="Shirts"))
    db.flush()
    db.add(Subcategory(id="sub1", store_id="store1", category_id="cat1", name="Polo"))
    db.flush()
    db.add(Product(
        id="prod1",
        store_id="store1",
        category_id="cat1",
        subcategory_id="sub1",
        name="Polo shirt",
        price=Decimal("19.99"),
        images=[Image(url="https://img.test/polo-front.jpg"), Image(url="https://img.test/polo-back.jpg")],
    ))
    db.commit()
    return db

