# restoadmin/models/__init__.py

from .users import (
    AdminUser,
    Restaurant,
    CustomerUser
)
