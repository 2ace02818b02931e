"""Subscribe form submission.

The handler works on a parsed page (BeautifulSoup) that contains the
header's subscribe form. A submission reads the ``name`` and ``email``
inputs, clears them before the response arrives, posts them as JSON and
then either swaps the form container for a thank-you message or leaves
the form in place.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable

import httpx
from bs4 import BeautifulSoup, Tag

from .models import LeadCaptureSettings

logger = logging.getLogger(__name__)

ErrorReporter = Callable[[BaseException], None]


class SubmissionState(str, enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    # Request went through but the payload did not confirm creation.
    UNCONFIRMED = "unconfirmed"
    FAILED = "failed"


@dataclass
class SubmitEvent:
    """Stand-in for the DOM submit event."""

    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


def log_error(error: BaseException) -> None:
    logger.error("Lead submission failed", exc_info=error)


class LeadCaptureHandler:
    """State machine bound to one subscribe form."""

    def __init__(
        self,
        document: BeautifulSoup,
        client: httpx.AsyncClient,
        settings: LeadCaptureSettings | None = None,
        *,
        report_error: ErrorReporter | None = None,
    ) -> None:
        self.settings = settings or LeadCaptureSettings()
        self.document = document
        self.client = client
        self.report_error = report_error or log_error
        self.state = SubmissionState.IDLE
        self.container = self._require(document.find(id=self.settings.container_id), "container")
        self.form = self._require(self.container.find("form", id=self.settings.form_id), "form")
        self.name_input = self._require(self.form.find("input", attrs={"name": "name"}), "name input")
        self.email_input = self._require(self.form.find("input", attrs={"name": "email"}), "email input")

    def _require(self, element: Any, what: str) -> Tag:
        if not isinstance(element, Tag):
            raise LookupError(
                f"subscribe {what} not found (form '#{self.settings.form_id}', "
                f"container '#{self.settings.container_id}')"
            )
        return element

    @property
    def form_present(self) -> bool:
        return self.form.parent is not None

    def fill(self, name: str, email: str) -> None:
        """Set the input values, as a user typing into the form would."""

        self.name_input["value"] = name
        self.email_input["value"] = email

    async def handle_submit(self, event: SubmitEvent | None = None) -> SubmissionState:
        """Run one submission and return the state it ends in."""

        if event is not None:
            event.prevent_default()
        if self.state is SubmissionState.SUBMITTING:
            logger.info("Ignoring submit while a submission is in flight")
            return self.state

        payload = {
            "name": str(self.name_input.get("value", "")),
            "email": str(self.email_input.get("value", "")),
        }
        self.state = SubmissionState.SUBMITTING
        request = self.client.post(
            self.settings.endpoint,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        # Optimistic: fields are emptied before the response is awaited.
        self.name_input["value"] = ""
        self.email_input["value"] = ""

        try:
            response = await request
            body = response.json()
        except asyncio.CancelledError:
            self.state = SubmissionState.FAILED
            raise
        except Exception as exc:
            # Contained: the form stays usable and may be submitted again.
            self.state = SubmissionState.FAILED
            self.report_error(exc)
            return self.state

        if isinstance(body, dict) and body.get("msg") == self.settings.success_message:
            self._show_thank_you()
            self.state = SubmissionState.SUCCEEDED
        else:
            logger.warning(
                "Lead submission returned %s without confirmation: %r",
                response.status_code,
                body,
            )
            self.state = SubmissionState.UNCONFIRMED
        return self.state

    def _show_thank_you(self) -> None:
        message = self.document.new_tag("p", attrs={"class": "thank-you"})
        message.string = self.settings.thank_you
        self.container.clear()
        self.container.append(message)


__all__ = [
    "ErrorReporter",
    "LeadCaptureHandler",
    "SubmissionState",
    "SubmitEvent",
    "log_error",
]
