from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, JSON
from sqlalchemy.orm import relationship
from app.db.base import Base

class FormRecord(Base):
    __tablename__ = "forms"
    id = Column(String(36), primary_key=True)
    title = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    questions = Column(JSON, nullable=False)  # list of question dicts
    position = Column(Integer, nullable=False, index=True)  # listing order, last saved is last

    responses = relationship(
        "FormResponseRecord",
        back_populates="form",
        cascade="all, delete-orphan",
        order_by="FormResponseRecord.seq",
    )

class FormResponseRecord(Base):
    __tablename__ = "form_responses"
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    form_id = Column(String(36), ForeignKey("forms.id", ondelete="CASCADE"), nullable=False, index=True)
    answers = Column(JSON, nullable=False)  # list of answer dicts
    submitted_at = Column(DateTime(timezone=True), nullable=False)

    form = relationship("FormRecord", back_populates="responses")
