import django
from django.conf import settings
from django.core.files.uploadedfile import SimpleUploadedFile
import pytest


def pytest_configure():
    settings.configure(
        DEBUG=True,
        INSTALLED_APPS=[
            "sendgrid_inbound",
        ],
        ROOT_URLCONF="sendgrid_inbound.urls",
        SENDGRID_INBOUND={
            "INBOUND_EMAIL_ENABLED": True,
            "SENDGRID_INBOUND_TOKEN": "test-inbound-token",
        },
        MIDDLEWARE=[
            "django.middleware.common.CommonMiddleware",
        ],
        SECRET_KEY="test-secret-key-not-for-production",
    )
    django.setup()


@pytest.fixture
def upload_1():
    return SimpleUploadedFile("photo1.jpg", b"\xff\xd8first-image", content_type="image/jpeg")


@pytest.fixture
def upload_2():
    return SimpleUploadedFile("photo2.jpg", b"\xff\xd8second-image", content_type="image/jpeg")
