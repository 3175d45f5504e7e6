import uuid
from sqlalchemy import Column, String, ForeignKey, DateTime
from rieno.db import Base
from datetime import datetime

class Category(Base):
    __tablename__ = "categories"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), index=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False) # income | expense
    color = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
