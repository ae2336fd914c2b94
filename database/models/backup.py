from sqlalchemy import Column, String, DateTime
from database.models.base import Base


class Backup(Base):
    __tablename__ = "backups"

    id = Column(String, primary_key=True, index=True)
    server_id = Column(String, index=True)
    name = Column(String)
    date = Column(DateTime)
