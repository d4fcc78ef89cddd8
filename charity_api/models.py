from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, JSON, Numeric, String, Text
from charity_api.database import Base


def _now():
    return datetime.now(timezone.utc)


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(120), nullable=False)
    last_name = Column(String(120), nullable=False)
    email = Column(String(254), nullable=False)
    phone = Column(String(32))
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_now)


class Volunteer(Base):
    __tablename__ = "volunteers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(254), nullable=False)
    phone = Column(String(32))
    preferred_area = Column(String(255), nullable=False)
    skills = Column(Text)
    availability = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), default=_now)


class Donation(Base):
    __tablename__ = "donations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(254), nullable=False)
    phone = Column(String(32))
    country = Column(String(120))
    amount = Column(Numeric(12, 2), nullable=False)
    type = Column(String(16), nullable=False)      # one-time | monthly
    method = Column(String(16), nullable=False)    # gateway | paypal | bank
    status = Column(String(16), nullable=False, default="pending")  # pending | intent | initiated | created | completed
    tx_ref = Column(String(64), index=True)        # gateway tx_ref or PayPal order id
    created_at = Column(DateTime(timezone=True), default=_now)


class Subscriber(Base):
    __tablename__ = "subscribers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(254), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_now)
