from typing import Optional

from sqlalchemy.orm import Session

from mittirang.models.admin_user import AdminUser


class AdminRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> Optional[AdminUser]:
        return self.db.query(AdminUser).filter(AdminUser.email == email).first()

    def ensure_admin(self, email: str, password_hash: str) -> AdminUser:
        """Create the admin account if it does not exist yet; never overwrites."""
        user = self.get_by_email(email)
        if user:
            return user
        user = AdminUser(email=email, password=password_hash)
        self.db.add(user)
        self.db.flush()
        return user
