from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from store_admin.database import Base
from .store import new_id

class Category(Base):
    __tablename__ = "categories"

    id = Column(String, primary_key=True, default=new_id)
    store_id = Column(String, ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True)
    billboard_id = Column(String, ForeignKey("billboards.id", ondelete="RESTRICT"), nullable=False, index=True)
    name = Column(String, nullable=False)
    is_locked = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    store = relationship("Store", back_populates="categories")
    billboard = relationship("Billboard", back_populates="categories")
    subcategories = relationship("Subcategory", back_populates="category", passive_deletes="all")
    products = relationship("Product", back_populates="category", passive_deletes="all")
