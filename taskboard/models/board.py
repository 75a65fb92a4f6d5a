"""Board model."""

from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskboard.extensions import db
from taskboard.models.task import Task, utcnow


class Board(db.Model):
    """Named container grouping related tasks."""

    __tablename__ = "boards"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    # Relationships
    tasks: Mapped[list["Task"]] = relationship(
        "Task",
        back_populates="board",
        cascade="all, delete-orphan",
        order_by=lambda: [Task.created_at.desc(), Task.id.desc()],
    )

    def __repr__(self) -> str:
        return f"<Board {self.id} {self.name!r}>"
