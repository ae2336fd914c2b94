from sqlalchemy import Column, String, DateTime, Text
from database.models.base import Base


class Bitacora(Base):
    __tablename__ = "bitacora"

    id = Column(String, primary_key=True, index=True)
    timestamp = Column(DateTime)
    username = Column(String)
    action = Column(String)
    message = Column(Text)
