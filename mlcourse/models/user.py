"""User model: account fields plus per-level progress percentages."""
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, event

from mlcourse.db.session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    # Store-internal key; the public identifier is `public_id` (serialized as "id")
    pk = Column(Integer, primary_key=True, autoincrement=True)
    public_id = Column("id", String(36), unique=True, nullable=False, index=True)

    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    phone = Column(String(64), nullable=False)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash

    # Each category is 0 or 25 in practice; total is derived, never set directly
    progress_foundation = Column(Integer, nullable=False, default=0)
    progress_beginner = Column(Integer, nullable=False, default=0)
    progress_intermediate = Column(Integer, nullable=False, default=0)
    progress_advance = Column(Integer, nullable=False, default=0)
    progress_total = Column(Integer, nullable=False, default=0)

    admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    def recompute_progress_total(self) -> int:
        self.progress_total = sum(
            value or 0
            for value in (
                self.progress_foundation,
                self.progress_beginner,
                self.progress_intermediate,
                self.progress_advance,
            )
        )
        return self.progress_total

    def __repr__(self):
        return f"User('{self.public_id}', '{self.username}', total={self.progress_total})"


@event.listens_for(User, "before_insert")
@event.listens_for(User, "before_update")
def _sync_progress_total(mapper, connection, target: User) -> None:
    target.recompute_progress_total()
