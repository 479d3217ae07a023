from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Numeric, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from store_admin.database import Base
from .store import new_id

class Product(Base):
    __tablename__ = "products"

    id = Column(String, primary_key=True, default=new_id)
    store_id = Column(String, ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True)
    category_id = Column(String, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True)
    subcategory_id = Column(String, ForeignKey("subcategories.id", ondelete="RESTRICT"), nullable=False, index=True)
    size_id = Column(String, ForeignKey("sizes.id", ondelete="RESTRICT"), nullable=True, index=True)
    color_id = Column(String, ForeignKey("colors.id", ondelete="RESTRICT"), nullable=True, index=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_archived = Column(Boolean, nullable=False, default=False)
    is_locked = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    store = relationship("Store", back_populates="products")
    category = relationship("Category", back_populates="products")
    subcategory = relationship("Subcategory", back_populates="products")
    size = relationship("Size", back_populates="products")
    color = relationship("Color", back_populates="products")
    images = relationship(
        "Image",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Image.created_at",
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', is_locked={self.is_locked})>"
