"""Task model."""

from datetime import datetime, timezone

from sqlalchemy import Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskboard.extensions import db
from taskboard.models.enums import Priority, Status


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every timestamp column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Task(db.Model):
    """Unit of work belonging to exactly one board."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(primary_key=True)
    board_id: Mapped[int] = mapped_column(
        ForeignKey("boards.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[Status] = mapped_column(
        Enum(Status, name="task_status", values_callable=lambda cls: cls.values(), validate_strings=True),
        default=Status.TODO,
        nullable=False,
    )
    priority: Mapped[Priority | None] = mapped_column(
        Enum(Priority, name="task_priority", values_callable=lambda cls: cls.values(), validate_strings=True),
        nullable=True,
    )
    assigned_to: Mapped[str | None] = mapped_column(String(255), nullable=True)
    due_date: Mapped[datetime | None] = mapped_column(nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    # Relationships
    board: Mapped["Board"] = relationship("Board", back_populates="tasks")  # noqa: F821

    def __repr__(self) -> str:
        return f"<Task {self.id} board={self.board_id} status={self.status}>"
