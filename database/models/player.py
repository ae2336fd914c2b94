from sqlalchemy import Column, Integer, String
from database.models.base import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True)
    status = Column(String, default="Offline")
    # No floor: economy actions may drive this negative
    balance = Column(Integer, default=0)
