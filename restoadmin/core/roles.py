from typing import Iterable, Optional, Union

from restoadmin.core.session import Session

SUPER_ADMIN = "super_admin"
ADMIN = "admin"
SUPPORT = "support"
CHEF = "chef"
DELIVERY_BOY = "delivery_boy"
RESTAURANT = "restaurant"

ALL_ROLES = (SUPER_ADMIN, ADMIN, SUPPORT, CHEF, DELIVERY_BOY, RESTAURANT)

ROLE_PERMISSIONS = {
    SUPER_ADMIN: ("all",),
    ADMIN: ("restaurants", "orders", "analytics", "subscriptions", "support"),
    SUPPORT: ("support", "orders"),
    CHEF: ("kitchen",),
    DELIVERY_BOY: ("delivery",),
    RESTAURANT: ("vendor_dashboard", "menu", "orders", "analytics"),
}

ROUTE_PERMISSIONS = {
    "/dashboard": (SUPER_ADMIN, ADMIN),
    "/restaurants": (SUPER_ADMIN, ADMIN),
    "/subscriptions": (SUPER_ADMIN, ADMIN),
    "/analytics": (SUPER_ADMIN, ADMIN),
    "/support": (SUPER_ADMIN, ADMIN, SUPPORT),
    "/kitchen": (CHEF, SUPER_ADMIN, ADMIN),
    "/delivery": (DELIVERY_BOY, SUPER_ADMIN, ADMIN),
    "/orders": (SUPER_ADMIN, ADMIN, SUPPORT),
}


def has_role(session: Optional[Session], roles: Union[str, Iterable[str]]) -> bool:
    if session is None:
        return False
    if isinstance(roles, str):
        roles = (roles,)
    return session.role in tuple(roles)


def has_permission(session: Optional[Session], route: str) -> bool:
    if session is None:
        return False

    # super admin her yere erişir
    if session.role == SUPER_ADMIN:
        return True

    allowed = ROUTE_PERMISSIONS.get(route)
    if not allowed:
        return False
    return session.role in allowed
