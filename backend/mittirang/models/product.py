import json
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Integer, String, Text
from sqlalchemy.types import TypeDecorator

from mittirang.db import Base
from mittirang.services.normalization import decode_stored_list


class JSONList(TypeDecorator):
    """
    List stored as JSON text. Reads never fail: blank or non-JSON values left
    by older writers come back as [].
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None or isinstance(value, str):
            return value
        return json.dumps(list(value))

    def process_result_value(self, value, dialect):
        return decode_stored_list(value)


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(256), nullable=False)
    short_description = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    images = Column(JSONList, nullable=False, default=list)  # first entry is the primary image
    flipkart_link = Column(String(1024), nullable=True)
    amazon_link = Column(String(1024), nullable=True)
    price = Column(Float, nullable=False)  # MRP
    sellingprice = Column(Float, nullable=True)
    sizes = Column(JSONList, nullable=False, default=list)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self):
        return f"<Product id={self.id} name={self.name}>"
