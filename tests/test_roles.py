"""
Tests for role lookups
"""
import pytest
from django.contrib.auth.models import AnonymousUser, Group, Permission, User
from wagtail.models import GroupPagePermission, Page

from wagtail_umami.conf import UmamiConfig
from wagtail_umami.roles import display_name, has_role


def grant_page_permission(group, codename):
    """Give ``group`` a page permission on the whole page tree"""
    GroupPagePermission.objects.create(
        group=group,
        page=Page.objects.get(depth=1),
        permission=Permission.objects.get(
            content_type__app_label='wagtailcore', codename=codename
        ),
    )


@pytest.mark.django_db
class TestHasRole:
    """Test has_role for bots, sysops and editors"""

    @pytest.fixture
    def user(self):
        return User.objects.create_user(username='reader', password='password')

    @pytest.fixture
    def bot(self):
        user = User.objects.create_user(username='crawler', password='password')
        user.groups.add(Group.objects.create(name='Bots'))
        return user

    @pytest.fixture
    def editor(self):
        group = Group.objects.create(name='Page editors')
        grant_page_permission(group, 'change_page')
        user = User.objects.create_user(username='editor', password='password')
        user.groups.add(group)
        return user

    @pytest.fixture
    def moderator(self):
        group = Group.objects.create(name='Page moderators')
        grant_page_permission(group, 'change_page')
        grant_page_permission(group, 'lock_page')
        user = User.objects.create_user(username='moderator', password='password')
        user.groups.add(group)
        return user

    def test_anonymous_user_has_no_roles(self):
        user = AnonymousUser()

        assert has_role(user, 'bot') is False
        assert has_role(user, 'sysop') is False
        assert has_role(user, 'editor') is False

    def test_plain_user_has_no_roles(self, user):
        assert has_role(user, 'bot') is False
        assert has_role(user, 'sysop') is False
        assert has_role(user, 'editor') is False

    def test_bot_group_membership(self, bot):
        assert has_role(bot, 'bot') is True
        assert has_role(bot, 'editor') is False

    def test_custom_bot_group(self, bot):
        """Test that the bot group name comes from the config"""
        config = UmamiConfig(bot_group='Crawlers')

        assert has_role(bot, 'bot', config) is False

    def test_editor(self, editor):
        assert has_role(editor, 'editor') is True
        assert has_role(editor, 'sysop') is False

    def test_moderator_is_sysop(self, moderator):
        assert has_role(moderator, 'sysop') is True
        assert has_role(moderator, 'editor') is True

    def test_superuser(self):
        admin = User.objects.create_superuser(
            username='admin', email='admin@example.com', password='password'
        )

        assert has_role(admin, 'sysop') is True
        assert has_role(admin, 'editor') is True
        assert has_role(admin, 'bot') is False

    def test_inactive_user_has_no_roles(self, bot):
        bot.is_active = False
        bot.save()

        assert has_role(bot, 'bot') is False

    def test_unknown_role(self, user):
        with pytest.raises(ValueError):
            has_role(user, 'steward')


@pytest.mark.django_db
class TestDisplayName:
    """Test the name reported for tracked users"""

    def test_authenticated_user(self):
        user = User.objects.create_user(username='alice', password='password')

        assert display_name(user) == 'alice'

    def test_anonymous_user(self):
        assert display_name(AnonymousUser()) is None
