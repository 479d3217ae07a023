from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from store_admin.database import Base
from .store import new_id

class Billboard(Base):
    __tablename__ = "billboards"

    id = Column(String, primary_key=True, default=new_id)
    store_id = Column(String, ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True)
    label = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_locked = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    store = relationship("Store", back_populates="billboards")
    categories = relationship("Category", back_populates="billboard", passive_deletes="all")

    def __repr__(self):
        return f"<Billboard(id={self.id}, label='{self.label}', is_locked={self.is_locked})>"
