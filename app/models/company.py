"""
Company database model
"""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.core.database import Base


class Company(Base):
    """Company model"""
    __tablename__ = "companies"
    
    handle = Column(String(25), primary_key=True)
    name = Column(String(255), unique=True, nullable=False, index=True)
    description = Column(Text)
    num_employees = Column(Integer)
    logo_url = Column(Text)
    
    # Relationships
    jobs = relationship(
        "Job",
        back_populates="company",
        order_by="Job.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Company(handle={self.handle}, name={self.name})>"
