"""
runner.py - Challenge Orchestration
====================================
Runs the two-step challenge flow in strict order:

1. Register the configured identity and receive a webhook URL + access token
2. Pick the SQL answer from the registration number
3. Submit the answer to the webhook, authenticated with the token

Any failure in step 1 or step 3 ends the run. Nothing is retried.
"""

import json
import logging
from dataclasses import dataclass

from .config import Settings
from .http_client import HttpClient
from .selector import select_query


WEBHOOK_PATH = "/generateWebhook/JAVA"

# Only this many characters of the access token ever reach the logs
TOKEN_SNIPPET_LEN = 15

# First N characters of a failed response body kept in error messages
BODY_SNIPPET_LEN = 200

logger = logging.getLogger(__name__)


# =============================================================================
# ERRORS
# =============================================================================

class ChallengeError(RuntimeError):
    """Base class for errors that end a challenge run."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class WebhookAcquisitionError(ChallengeError):
    """The webhook registration call failed or returned an unusable body."""


class SubmissionError(ChallengeError):
    """The solution submission call failed."""


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class WebhookCredential:
    webhook_url: str
    access_token: str

    @property
    def token_snippet(self) -> str:
        return self.access_token[:TOKEN_SNIPPET_LEN] + "..."


@dataclass
class RunOutcome:
    """Terminal state of a run: succeeded with a response body, or failed."""

    ok: bool
    response_body: str | None = None
    error: ChallengeError | None = None


def _is_success(status: int) -> bool:
    return 200 <= status < 300


def _snippet(body: str) -> str:
    return body[:BODY_SNIPPET_LEN].strip()


# =============================================================================
# RUNNER
# =============================================================================

class ChallengeRunner:
    """
    Orchestrates one challenge run.

    Args:
        settings: Identity, base URL and timeout
        client: HTTP client used for both calls
        log: Logger that receives the step lines (defaults to this module's)
    """

    def __init__(self, settings: Settings, client: HttpClient, log: logging.Logger | None = None):
        self.settings = settings
        self.client = client
        self.log = log or logger

    def request_webhook(self) -> WebhookCredential:
        """
        Register the identity and return the webhook credential.

        Raises:
            WebhookAcquisitionError: On a network error, a non-2xx status,
                a non-JSON body, or a body without webhookUrl/accessToken
        """
        identity = self.settings.identity

        # ---------------------------------------------------------------------
        # STEP 1: Register the identity
        # ---------------------------------------------------------------------
        # The access token is not known yet, so this call goes out unauthenticated
        self.log.info(
            "Step 1: Generating webhook with details: name=%s, regNo=%s, email=%s",
            identity.name, identity.reg_no, identity.email,
        )
        status, _content_type, body = self.client.post_json(
            self.client.url_for(WEBHOOK_PATH),
            identity.to_payload(),          # {"name", "regNo", "email"}
            accept="application/json",      # We expect {"webhookUrl", "accessToken"}
        )

        # Network errors come back as status 0 and land here too
        if not _is_success(status):
            raise WebhookAcquisitionError(
                f"Webhook generation failed with status {status}: {_snippet(body)}",
                status_code=status,
            )

        # ---------------------------------------------------------------------
        # STEP 2: Parse the response body
        # ---------------------------------------------------------------------
        # The body holds the token, so it is never logged
        try:
            data = json.loads(body)
        except ValueError as e:
            raise WebhookAcquisitionError(
                f"Webhook response is not valid JSON: {e}", status_code=status
            ) from e

        if not isinstance(data, dict):
            raise WebhookAcquisitionError(
                f"Webhook response must be a JSON object, got {type(data).__name__}",
                status_code=status,
            )

        # ---------------------------------------------------------------------
        # STEP 3: Extract the credential
        # ---------------------------------------------------------------------
        webhook_url = data.get("webhookUrl")
        access_token = data.get("accessToken")
        missing = [
            key for key, value in (("webhookUrl", webhook_url), ("accessToken", access_token))
            if not isinstance(value, str) or not value
        ]
        if missing:
            raise WebhookAcquisitionError(
                f"Webhook response is missing {', '.join(missing)}. "
                f"Response keys: {sorted(data.keys())}",
                status_code=status,
            )

        self.log.info("Webhook and accessToken received successfully.")
        return WebhookCredential(webhook_url=webhook_url, access_token=access_token)

    def submit_solution(self, credential: WebhookCredential, query: str) -> str:
        """
        Post the final query to the webhook and return the raw response body.

        Raises:
            SubmissionError: On a network error or a non-2xx status
        """
        # The dynamic URL from step 1 is the submission target
        self.log.info("Step 2: Submitting solution to webhook URL: %s", credential.webhook_url)
        self.log.info("Authorization Token: Bearer %s", credential.token_snippet)
        self.log.info("Final SQL Query: %s", query)

        status, _content_type, body = self.client.post_json(
            credential.webhook_url,
            {"finalQuery": query},
            token=credential.access_token,
        )
        if not _is_success(status):
            raise SubmissionError(
                f"Solution submission failed with status {status}: {_snippet(body)}",
                status_code=status,
            )
        return body

    def run(self) -> RunOutcome:
        """Run steps A, B and C once and log a single terminal line."""
        self.log.info("Starting challenge run...")
        try:
            credential = self.request_webhook()
            query = select_query(self.settings.identity.reg_no, self.log)
            response_body = self.submit_solution(credential, query)
        except ChallengeError as e:
            self.log.error("Challenge Failed: %s", e)
            return RunOutcome(ok=False, error=e)

        self.log.info("Challenge Completed Successfully! Final Response: %s", response_body)
        return RunOutcome(ok=True, response_body=response_body)
