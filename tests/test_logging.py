import structlog

from moviejournal.config.settings import settings
from moviejournal.shared.core.logging import add_app_info, build_processors, signed_in_as, signed_out


def test_app_info_is_stamped_on_events():
    event = add_app_info(None, "info", {"event": "Review added", "review_id": 3})

    assert event == {
        "event": "Review added",
        "review_id": 3,
        "app": settings.APP_NAME,
        "env": settings.APP_ENV,
    }


def test_app_info_keeps_explicit_fields():
    event = add_app_info(None, "info", {"event": "x", "env": "import-job"})

    assert event["env"] == "import-job"


def test_json_and_console_pipelines():
    json_chain = build_processors(json_output=True)
    console_chain = build_processors(json_output=False)

    assert isinstance(json_chain[-1], structlog.processors.JSONRenderer)
    assert isinstance(console_chain[-1], structlog.dev.ConsoleRenderer)
    assert add_app_info in json_chain and add_app_info in console_chain


def test_signed_in_user_is_bound_until_sign_out():
    signed_in_as(7)
    try:
        assert structlog.contextvars.get_contextvars()["user_id"] == 7
    finally:
        signed_out()

    assert "user_id" not in structlog.contextvars.get_contextvars()
