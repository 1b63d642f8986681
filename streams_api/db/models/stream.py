from sqlalchemy import Column, DateTime, String, Text, Uuid

from streams_api.db.base import Base


class Stream(Base):
    __tablename__ = "streams"

    stream_id = Column(Uuid(as_uuid=True), primary_key=True)
    user_id = Column(Uuid(as_uuid=True), index=True, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), index=True, nullable=False)
