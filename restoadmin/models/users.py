import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Uuid
from sqlalchemy.sql import func
from restoadmin.db.base import Base


# =====================================================
# ADMIN USERS
# =====================================================

class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(
    Uuid(as_uuid=True),
    primary_key=True,
    default=uuid.uuid4
    )
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default="admin")  # super_admin, admin, support, chef, delivery_boy

    is_active = Column(Boolean, default=True)
    last_login_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


# =====================================================
# RESTAURANTS
# =====================================================

class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(
    Uuid(as_uuid=True),
    primary_key=True,
    default=uuid.uuid4
    )
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, nullable=False)

    owner_name = Column(String, nullable=False)
    owner_email = Column(String, unique=True, nullable=False)
    owner_phone = Column(String)
    password_hash = Column(String, nullable=False)

    address = Column(String)
    city = Column(String)
    status = Column(String, default="pending")  # pending, active, suspended
    created_at = Column(DateTime(timezone=True), server_default=func.now())


# =====================================================
# CUSTOMER USERS
# =====================================================

class CustomerUser(Base):
    __tablename__ = "customer_users"

    id = Column(
    Uuid(as_uuid=True),
    primary_key=True,
    default=uuid.uuid4
    )
    phone_number = Column(String, unique=True, nullable=False)  # +92xxxxxxxxxx
    name = Column(String)
    email = Column(String)
    password = Column(String, nullable=True)  # bcrypt hash, OTP ile kayıt olanlarda boş

    is_phone_verified = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
