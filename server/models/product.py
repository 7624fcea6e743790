# server/models/product.py

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from . import Base


# -------------------------------
# Product Model
# -------------------------------

class Product(Base):
    """
    Database model for catalog products.
    Column names keep the camelCase used on the wire.
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column("productName", String(255), nullable=False)
    price = Column("productPrice", Integer, nullable=False)
    category = Column("productCategory", String(255), nullable=False)
    description = Column("productDescription", String(255), nullable=False)
    # Not populated by any handler yet
    user_id = Column("userId", Integer, ForeignKey("users.id"), nullable=True)
    is_admin = Column("isAdmin", Boolean, nullable=True)
