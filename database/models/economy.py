from sqlalchemy import Column, Integer, String, DateTime
from database.models.base import Base


class EconomyTransaction(Base):
    __tablename__ = "economy"

    id = Column(String, primary_key=True, index=True)
    account_kind = Column(String)  # player, user
    account_id = Column(String, index=True)
    transaction_type = Column(String)  # add, remove, purchase_addon, purchase_theme
    amount = Column(Integer)
    date = Column(DateTime)
