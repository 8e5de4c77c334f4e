"""SQLAlchemy ORM models for the invoices and customers tables"""

import uuid
from sqlalchemy import Column, BigInteger, Date, ForeignKey, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class CustomerRecord(Base):
    """Customer an invoice is billed to"""

    __tablename__ = "customers"

    id = Column(Text, primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    image_url = Column(Text, nullable=True)

    invoices = relationship("InvoiceRecord", back_populates="customer")


class InvoiceRecord(Base):
    """Invoice row; amount is stored in cents"""

    __tablename__ = "invoices"

    id = Column(Text, primary_key=True, default=_new_id)
    customer_id = Column(Text, ForeignKey("customers.id"), nullable=False, index=True)
    amount = Column(BigInteger, nullable=False)
    status = Column(Text, nullable=False)
    date = Column(Date, nullable=False)

    customer = relationship("CustomerRecord", back_populates="invoices")
