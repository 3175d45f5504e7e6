import uuid
from sqlalchemy import Column, String, Numeric, Date, DateTime, ForeignKey
from rieno.db import Base
from datetime import datetime
from sqlalchemy.orm import relationship

class DebtCredit(Base):
    __tablename__ = "debts_credits"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), index=True)

    name = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    reason = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(String, default="unpaid") # paid | unpaid
    type = Column(String, nullable=False) # receivable (owed to the user) | payable

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", backref="debts_credits")
