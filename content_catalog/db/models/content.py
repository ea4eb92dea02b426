from sqlalchemy import ARRAY, JSON, Column, DateTime, Integer, String, Text, Uuid
import uuid

from content_catalog.db.base import Base

# В PostgreSQL жанры хранятся массивом, в SQLite массивов нет
GenreArray = ARRAY(String(255)).with_variant(JSON(), "sqlite")


class Content(Base):
    __tablename__ = "contents"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(512), nullable=True)
    subtitle = Column(String(512), nullable=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(2048), nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    start_time = Column(DateTime(timezone=True), nullable=True)
    end_time = Column(DateTime(timezone=True), nullable=True)
    genres = Column(GenreArray, nullable=False, default=list)
