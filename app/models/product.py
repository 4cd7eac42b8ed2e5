import uuid

from sqlalchemy import Column, Integer, String, Text, JSON
from app.core.database import Base


def generate_product_id() -> str:
    return uuid.uuid4().hex


class Product(Base):
    __tablename__ = "products"

    # Insertion order for listing; the public identifier is `id`
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, index=True, nullable=False, default=generate_product_id)

    title = Column(String)
    subtitle = Column(String)
    description = Column(Text)
    category = Column(String, index=True)

    images = Column(JSON, default=list, nullable=False)
    features = Column(JSON(none_as_null=True))
    specifications = Column(JSON(none_as_null=True))

    def __repr__(self):
        return f"<Product(id={self.id}, title={self.title}, category={self.category})>"
