import pytest

from alert_webhook.exceptions import ConfigError
from alert_webhook.schemas.schemas_channels import DiscordConfig, NotificationChannelConfig
from alert_webhook.schemas.schemas_discord import DiscordEmbed, DiscordFooter, DiscordPayload
from alert_webhook.utils.constants import DEFAULT_MESSAGE_TEMPLATE


def test_discord_config_requires_settings():
    with pytest.raises(ConfigError) as exc:
        DiscordConfig.from_channel_config(NotificationChannelConfig(settings=None))

    assert str(exc.value) == "No Settings Supplied"


@pytest.mark.parametrize("settings", [{}, {"url": ""}, {"url": "   "}, {"url": 42}])
def test_discord_config_requires_webhook_url(settings):
    with pytest.raises(ConfigError) as exc:
        DiscordConfig.from_channel_config(NotificationChannelConfig(settings=settings))

    assert exc.value.reason == "Could not find webhook url property in settings"


def test_discord_config_defaults():
    config = DiscordConfig.from_channel_config(
        NotificationChannelConfig(settings={"url": "http://hook", "message": ""}, disable_resolve_message=True)
    )

    assert config.webhook_url == "http://hook"
    assert config.avatar_url == ""
    assert config.message_template == DEFAULT_MESSAGE_TEMPLATE
    assert config.disable_resolve_message is True


def test_discord_payload_omits_empty_fields():
    payload = DiscordPayload(
        username="Grafana",
        embeds=[DiscordEmbed(
            title="t",
            color=1,
            footer=DiscordFooter(text="Grafana v", icon_url="http://icon"),
            url="http://localhost/alerting/list"
        )]
    )

    assert payload.to_json_bytes() == (
        b'{"username":"Grafana","embeds":[{"title":"t","color":1,'
        b'"footer":{"text":"Grafana v","icon_url":"http://icon"},'
        b'"url":"http://localhost/alerting/list","type":"rich"}]}'
    )
