from sqlalchemy import Column, Integer, String, Boolean, JSON
from database.models.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    username = Column(String, unique=True, index=True)
    hashed_password = Column(String)
    balance = Column(Integer, default=0)
    role = Column(String, default="admin")
    two_factor_enabled = Column(Boolean, default=False)

    # Lists of catalog ids, reassigned (never mutated in place) so SQLAlchemy sees the change
    purchased_addons = Column(JSON, default=list)
    purchased_themes = Column(JSON, default=list)
