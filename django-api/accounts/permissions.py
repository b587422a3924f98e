from rest_framework.permissions import BasePermission

from accounts.roles import can_manage_events, can_purchase, role_of


class IsBuyer(BasePermission):
    """Allows access only to authenticated buyers."""

    message = "Only buyers can purchase tickets"

    def has_permission(self, request, view) -> bool:
        user = request.user
        return bool(user and user.is_authenticated and can_purchase(role_of(user)))


class IsPromoter(BasePermission):
    """Allows access only to authenticated promoters."""

    message = "Only promoters can manage events"

    def has_permission(self, request, view) -> bool:
        user = request.user
        return bool(user and user.is_authenticated and can_manage_events(role_of(user)))
