from sqlalchemy import Column, Integer, String
from core.database import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(30))
    address = Column(String(255))
    locality = Column(String(120), index=True)  # Pocitos, Carrasco, Solymar/La Tahona
