# models/store.py
import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from store_admin.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


class Store(Base):
    __tablename__ = "stores"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    user_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Deleting a store that still has catalog rows fails on the foreign keys
    billboards = relationship("Billboard", back_populates="store", passive_deletes="all")
    categories = relationship("Category", back_populates="store", passive_deletes="all")
    subcategories = relationship("Subcategory", back_populates="store", passive_deletes="all")
    sizes = relationship("Size", back_populates="store", passive_deletes="all")
    colors = relationship("Color", back_populates="store", passive_deletes="all")
    products = relationship("Product", back_populates="store", passive_deletes="all")

    def __repr__(self):
        return f"<Store(id={self.id}, name='{self.name}', user_id='{self.user_id}')>"
