import uuid
from sqlalchemy import Column, String, Numeric, Date, DateTime, ForeignKey
from rieno.db import Base
from datetime import datetime
from sqlalchemy.orm import relationship

class Entry(Base):
    __tablename__ = "entries"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), index=True)
    category_id = Column(String, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)

    date = Column(Date, nullable=False)
    product_or_service = Column(String, nullable=False)
    revenue = Column(Numeric(12, 2), default=0)
    cost = Column(Numeric(12, 2), default=0) # profit is derived, never stored
    notes = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", backref="entries")
