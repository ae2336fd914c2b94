from sqlalchemy import Column, Integer, String, Text
from database.models.base import Base


class Addon(Base):
    __tablename__ = "addons"

    id = Column(String, primary_key=True, index=True)
    name = Column(String)
    price = Column(Integer, default=0)
    description = Column(Text)


class Theme(Base):
    __tablename__ = "themes"

    id = Column(String, primary_key=True, index=True)
    name = Column(String)
    price = Column(Integer, default=0)
    description = Column(Text)
