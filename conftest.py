"""
Pytest configuration for wagtail-umami tests
"""
import pytest
from django.conf import settings


def pytest_configure(config):
    """Configure a minimal Wagtail project for the tests"""
    settings.configure(
        SECRET_KEY='wagtail-umami-tests',
        DATABASES={
            'default': {
                'ENGINE': 'django.db.backends.sqlite3',
                'NAME': ':memory:',
            },
        },
        INSTALLED_APPS=[
            'django.contrib.auth',
            'django.contrib.contenttypes',
            'django.contrib.sessions',
            'taggit',
            'modelcluster',
            'wagtail',
            'wagtail.search',
            'wagtail_umami',
        ],
        TEMPLATES=[
            {
                'BACKEND': 'django.template.backends.django.DjangoTemplates',
                'APP_DIRS': True,
                'OPTIONS': {
                    'context_processors': [
                        'django.template.context_processors.request',
                        'django.contrib.auth.context_processors.auth',
                    ],
                },
            },
        ],
        DEFAULT_AUTO_FIELD='django.db.models.AutoField',
        USE_TZ=True,
        STATIC_URL='/static/',
        WAGTAIL_SITE_NAME='Test site',
        WAGTAILADMIN_BASE_URL='http://localhost',
    )


@pytest.fixture(scope='session')
def django_db_setup(django_db_setup, django_db_blocker):
    """Set up database for tests"""
    from django.core.management import call_command

    with django_db_blocker.unblock():
        call_command('migrate', verbosity=0)
