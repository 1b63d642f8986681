from sqlalchemy import Column, Uuid

from streams_api.db.base import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Uuid(as_uuid=True), primary_key=True)
