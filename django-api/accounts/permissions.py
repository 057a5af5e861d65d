from rest_framework.permissions import BasePermission


class HasRole(BasePermission):
    """Allow authenticated users whose role is in ``roles``."""

    roles: tuple[str, ...] = ()

    def has_permission(self, request, view) -> bool:
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if user.role in self.roles:
            return True
        self.message = f"User role {user.role} is not authorized to access this route"
        return False


class IsOrganizerOrAdmin(HasRole):
    roles = ("organizer", "admin")


class IsAdmin(HasRole):
    roles = ("admin",)
