from sqlalchemy import Column, Integer, String
from database.models.base import Base

ONLINE = "Online"
OFFLINE = "Offline"


class Server(Base):
    __tablename__ = "servers"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True)
    type = Column(String)
    version = Column(String)
    status = Column(String, default=OFFLINE)  # Online, Offline

    # Resource allocation
    cpu = Column(Integer, default=0)  # percentage
    ram = Column(Integer, default=0)  # megabytes

    @property
    def resources(self):
        return {"cpu": self.cpu, "ram": self.ram}

    @resources.setter
    def resources(self, value):
        self.cpu = value["cpu"]
        self.ram = value["ram"]
