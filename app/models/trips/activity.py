from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.core.database import Base
import uuid

class Activity(Base):
    __tablename__ = "activities"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    trip_id = Column(Uuid, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    occurs_at = Column(DateTime, nullable=False)

    trip = relationship("Trip", back_populates="activities")
