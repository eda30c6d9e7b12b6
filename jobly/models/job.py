"""
Job model - a position posted by a company.
"""
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobly.core.database import Base

if TYPE_CHECKING:
    from jobly.models.company import Company


class Job(Base):
    """
    Job posting entity.

    A company cannot post two jobs with the same title. Equity is stored as
    NUMERIC so values like 0.375 survive the round trip exactly.
    """

    __tablename__ = "jobs"

    __table_args__ = (
        UniqueConstraint("title", "company_handle", name="uq_job_title_company"),
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity >= 0 AND equity <= 1.0", name="ck_jobs_equity"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    equity: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    company_handle: Mapped[str] = mapped_column(
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    company: Mapped["Company"] = relationship("Company", back_populates="jobs")

    def __repr__(self) -> str:
        return f"<Job {self.title} at {self.company_handle}>"
