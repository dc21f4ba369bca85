import json

import httpx
import pytest

from preview_api.schemas import FeedbackRequest
from preview_api.services.errors import FeedbackError
from preview_api.services.feedback import FeedbackService, build_issue


def make_feedback_service(handler) -> FeedbackService:
    return FeedbackService(
        api_url="https://api.github.com/",
        repo="Querbox/tally-app",
        token="secret-token",
        transport=httpx.MockTransport(handler),
    )


def test_build_issue_labels_and_body():
    issue = build_issue(
        FeedbackRequest(
            feedback_type="bug",
            title="  Crash on start  ",
            description=" It crashes. ",
            app_version="1.4.0",
        )
    )

    assert issue.title == "Crash on start"
    assert issue.labels == ["bug", "from-app"]
    assert issue.body == (
        "It crashes.\n\n---\n*Gesendet aus Tally v1.4.0 via In-App Feedback*"
    )


@pytest.mark.parametrize(
    ("feedback_type", "labels"),
    [
        ("feature", ["enhancement", "from-app"]),
        ("feedback", ["feedback", "from-app"]),
        ("question", ["from-app"]),
    ],
)
def test_build_issue_label_mapping(feedback_type, labels):
    request = FeedbackRequest(feedback_type=feedback_type, title="t")
    assert build_issue(request).labels == labels


def test_request_accepts_camel_case_fields():
    request = FeedbackRequest.model_validate(
        {"feedbackType": "feature", "title": "t", "appVersion": "2.0"}
    )
    assert request.feedback_type == "feature"
    assert request.app_version == "2.0"


@pytest.mark.asyncio
async def test_empty_title_is_rejected_without_request():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    result = await make_feedback_service(handler).submit(
        FeedbackRequest(title="   ", description="text")
    )

    assert result.success is False
    assert result.error == "Titel darf nicht leer sein"


@pytest.mark.asyncio
async def test_submit_opens_issue():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            201,
            json={"number": 42, "html_url": "https://github.com/Querbox/tally-app/issues/42"},
        )

    result = await make_feedback_service(handler).submit(
        FeedbackRequest(feedback_type="feature", title="Dark mode", app_version="1.0.0")
    )

    assert result.success is True
    assert result.issue_number == 42
    assert result.issue_url == "https://github.com/Querbox/tally-app/issues/42"
    assert result.error is None

    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.github.com/repos/Querbox/tally-app/issues"
    assert request.headers["authorization"] == "Bearer secret-token"
    assert request.headers["user-agent"] == "Tally-App"
    assert request.headers["x-github-api-version"] == "2022-11-28"
    payload = json.loads(request.content)
    assert payload["title"] == "Dark mode"
    assert payload["labels"] == ["enhancement", "from-app"]


@pytest.mark.asyncio
async def test_rejected_submission_reports_status():
    service = make_feedback_service(
        lambda request: httpx.Response(401, text="Bad credentials")
    )

    result = await service.submit(FeedbackRequest(title="Hello"))

    assert result.success is False
    assert result.error == "GitHub API Fehler (401 Unauthorized): Bad credentials"


@pytest.mark.asyncio
async def test_network_failure_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline")

    with pytest.raises(FeedbackError, match="^Netzwerkfehler: offline$"):
        await make_feedback_service(handler).submit(FeedbackRequest(title="Hello"))


@pytest.mark.asyncio
async def test_unparseable_response_raises():
    service = make_feedback_service(lambda request: httpx.Response(201, text="<html>"))

    with pytest.raises(FeedbackError, match="^Fehler beim Parsen"):
        await service.submit(FeedbackRequest(title="Hello"))
