from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, Float, DateTime, Text
from exercise_tracker.db import Base

class Exercise(Base):
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # No ondelete: users are never deleted by this service
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[float] = mapped_column(Float, nullable=False)
    # Naive UTC
    date: Mapped[datetime] = mapped_column(DateTime(timezone=False), index=True, nullable=False)

    user = relationship("User", back_populates="exercises")
