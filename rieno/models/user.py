from sqlalchemy import Column, String, DateTime
from datetime import datetime
from rieno.db import Base
from sqlalchemy.orm import relationship

# Mirrors the remote auth service's users for the demo store

class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, index=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    categories = relationship("Category", backref="user", passive_deletes=True)
