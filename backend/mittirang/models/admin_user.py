from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from mittirang.db import Base


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(256), unique=True, index=True, nullable=False)
    password = Column(String(128), nullable=False)  # bcrypt hash
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        return f"<AdminUser email={self.email}>"
