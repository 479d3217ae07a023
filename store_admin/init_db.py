# init_db.py
import logging

from store_admin.database import engine, SessionLocal, Base
from store_admin.db.models import Store, Billboard, Size, Color

logger = logging.getLogger(__name__)

DEMO_USER_ID = "demo-user"


def seed(user_id: str = DEMO_USER_ID) -> Store:
    """Create a demo store with a billboard, sizes and colors if the user has none."""
    db = SessionLocal()
    try:
        store = db.query(Store).filter(Store.user_id == user_id).first()
        if store:
            return store

        store = Store(name="Demo Store", user_id=user_id)
        db.add(store)
        db.flush()
        db.add(Billboard(
            store_id=store.id,
            label="Summer collection",
            image_url="https://example.com/images/summer.jpg",
            is_featured=True,
        ))
        db.add_all([
            Size(store_id=store.id, name="Small", value="S"),
            Size(store_id=store.id, name="Medium", value="M"),
            Size(store_id=store.id, name="Large", value="L"),
            Color(store_id=store.id, name="Black", value="#000000"),
            Color(store_id=store.id, name="White", value="#FFFFFF"),
        ])
        db.commit()
        db.refresh(store)
        return store
    finally:
        db.close()


def init():
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created")
    store = seed()
    logger.info(f"Seed data added (store {store.id})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init()
