"""
Job database model
"""

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base


class Job(Base):
    """Job posted by a company"""
    __tablename__ = "jobs"
    
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    salary = Column(Integer)
    equity = Column(Numeric(4, 3))
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    
    # Relationships
    company = relationship("Company", back_populates="jobs")
