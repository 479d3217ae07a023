from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from store_admin.database import Base
from .store import new_id

class Subcategory(Base):
    __tablename__ = "subcategories"

    id = Column(String, primary_key=True, default=new_id)
    store_id = Column(String, ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True)
    category_id = Column(String, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True)
    name = Column(String, nullable=False)
    is_locked = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    store = relationship("Store", back_populates="subcategories")
    category = relationship("Category", back_populates="subcategories")
    products = relationship("Product", back_populates="subcategory", passive_deletes="all")
