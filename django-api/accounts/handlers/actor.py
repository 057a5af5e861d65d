from common.domain.models import Actor, Role


def actor_for(request) -> Actor:
    """Describe the authenticated user of ``request`` to the services."""
    user = request.user
    return Actor(
        id=user.pk,
        role=Role(user.role),
        email=user.email,
        phone=user.phone,
        name=user.full_name,
    )
