from sqlalchemy import Column, String
from todo_app.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    name = Column(String(256), nullable=False)
