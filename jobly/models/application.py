"""
Application model - a user applying to a job (many-to-many link).
"""
from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from jobly.core.database import Base


class Application(Base):
    __tablename__ = "applications"

    username: Mapped[str] = mapped_column(
        ForeignKey("users.username", ondelete="CASCADE"),
        primary_key=True,
    )
    job_id: Mapped[int] = mapped_column(
        ForeignKey("jobs.id", ondelete="CASCADE"),
        primary_key=True,
    )

    def __repr__(self) -> str:
        return f"<Application {self.username} -> {self.job_id}>"
