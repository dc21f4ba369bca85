import logging

import httpx
from pydantic import ValidationError

from preview_api.config import Settings
from preview_api.schemas.feedback import (
    FeedbackRequest,
    FeedbackResult,
    IssueCreate,
    IssueCreated,
)
from preview_api.services.errors import FeedbackError

logger = logging.getLogger(__name__)

LABELS: dict[str, list[str]] = {
    "feature": ["enhancement", "from-app"],
    "bug": ["bug", "from-app"],
    "feedback": ["feedback", "from-app"],
}
DEFAULT_LABELS = ["from-app"]


def build_issue(request: FeedbackRequest) -> IssueCreate:
    body = (
        f"{request.description.strip()}\n\n---\n"
        f"*Gesendet aus Tally v{request.app_version} via In-App Feedback*"
    )
    return IssueCreate(
        title=request.title.strip(),
        body=body,
        labels=list(LABELS.get(request.feedback_type, DEFAULT_LABELS)),
    )


class FeedbackService:
    """Open an issue in the project's tracker for in-app feedback."""

    def __init__(
        self,
        api_url: str,
        repo: str,
        token: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.repo = repo
        self.token = token
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeedbackService":
        return cls(
            api_url=str(settings.feedback_api_url),
            repo=settings.feedback_repo,
            token=settings.feedback_token,
        )

    async def submit(self, request: FeedbackRequest) -> FeedbackResult:
        issue = build_issue(request)
        if not issue.title:
            return FeedbackResult(success=False, error="Titel darf nicht leer sein")

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.post(
                    f"{self.api_url}/repos/{self.repo}/issues",
                    headers={
                        "Authorization": f"Bearer {self.token}",
                        "User-Agent": "Tally-App",
                        "Accept": "application/vnd.github+json",
                        "X-GitHub-Api-Version": "2022-11-28",
                    },
                    json=issue.model_dump(),
                )
            except httpx.RequestError as exc:
                logger.warning("Feedback submission failed: %s", exc)
                raise FeedbackError(f"Netzwerkfehler: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "Issue tracker rejected feedback with status %s", response.status_code
            )
            return FeedbackResult(
                success=False,
                error=(
                    f"GitHub API Fehler ({response.status_code} {response.reason_phrase}): "
                    f"{response.text}"
                ),
            )

        try:
            created = IssueCreated.model_validate_json(response.content)
        except ValidationError as exc:
            raise FeedbackError(f"Fehler beim Parsen: {exc}") from exc

        logger.info("Opened feedback issue #%s", created.number)
        return FeedbackResult(
            success=True,
            issue_number=created.number,
            issue_url=created.html_url,
        )
