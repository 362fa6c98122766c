"""Role lookups for the user making the current request"""

from wagtail_umami.conf import get_config

BOT = "bot"
SYSOP = "sysop"
EDITOR = "editor"

ROLES = (BOT, SYSOP, EDITOR)

# Page permission actions that grant each role
SYSOP_ACTIONS = {"lock"}
EDITOR_ACTIONS = {"add", "change", "publish"}


def has_role(user, role_name, config=None):
    """
    Check whether ``user`` holds the given role.

    Args:
        user: Django user instance (may be ``AnonymousUser``)
        role_name: One of ``"bot"``, ``"sysop"`` or ``"editor"``
        config: UmamiConfig used to resolve the bot group (defaults to settings)

    Returns:
        bool: True if the user holds the role, False otherwise
    """
    if role_name not in ROLES:
        raise ValueError(f"Unknown role: {role_name!r}")

    if user is None or not user.is_authenticated or not user.is_active:
        return False

    if role_name == BOT:
        config = config or get_config()
        return user.groups.filter(name=config.bot_group).exists()

    from wagtail.permission_policies.pages import PagePermissionPolicy

    policy = PagePermissionPolicy()
    if role_name == SYSOP:
        return policy.user_has_any_permission(user, SYSOP_ACTIONS)

    return policy.user_has_any_permission(user, EDITOR_ACTIONS)


def display_name(user):
    """Name to report for ``user``, or None for anonymous visitors."""
    if user is None or not user.is_authenticated:
        return None
    return user.get_username()
