import pytest

from alert_webhook.core.config import settings
from alert_webhook.schemas.schemas_alerts import AlertGroup, AlertRecord


@pytest.fixture(autouse=True)
def fixed_settings(monkeypatch):
    """ Garante valores fixos de identidade independentes do .env """
    monkeypatch.setattr(settings, "PRODUCT_NAME", "Grafana")
    monkeypatch.setattr(settings, "BUILD_VERSION", "")
    monkeypatch.setattr(settings, "FOOTER_ICON_URL", "https://grafana.com/assets/img/fav32.png")
    monkeypatch.setattr(settings, "ALERTING_LIST_PATH", "/alerting/list")
    return settings


@pytest.fixture
def firing_group():
    """ Grupo com um único alerta disparando """
    return AlertGroup(
        alerts=[
            AlertRecord(
                labels={"alertname": "alert1", "lbl1": "val1"},
                annotations={"ann1": "annv1"}
            )
        ],
        group_key="alertname",
        group_labels={"alertname": ""},
        external_url="http://localhost"
    )


@pytest.fixture
def two_firing_group():
    return AlertGroup(
        alerts=[
            AlertRecord(labels={"alertname": "alert1", "lbl1": "val1"}, annotations={"ann1": "annv1"}),
            AlertRecord(labels={"alertname": "alert1", "lbl1": "val2"}, annotations={"ann1": "annv2"}),
        ],
        group_key="alertname",
        group_labels={"alertname": ""},
        external_url="http://localhost"
    )
