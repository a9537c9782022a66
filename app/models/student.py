import enum
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base


class Section(str, enum.Enum):
    A = "A"
    B = "B"
    C = "C"


class Student(Base):
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Roll number, the business identifier shown to people; not the primary key
    student_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    section: Mapped[Section | None] = mapped_column(
        SAEnum(Section, values_callable=lambda e: [x.value for x in e]),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    allocation: Mapped["Allocation | None"] = relationship(
        back_populates="student",
        cascade="all, delete-orphan",
        passive_deletes=True,
        uselist=False,
    )
