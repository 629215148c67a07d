"""
Gmail mailbox backend over the Gmail REST API (v1).

Uses a synchronous httpx Client with a bearer access token. Obtaining and
refreshing the OAuth token is outside this service; pass a valid token in
GMAIL_ACCESS_TOKEN.

Endpoints used:
- GET  /users/me/threads?labelIds=INBOX      list inbox threads
- GET  /users/me/threads/{id}?format=full    thread messages with bodies
- POST /users/me/threads/{id}/modify         add/remove labels
- GET  /users/me/labels, POST /users/me/labels
- POST /users/me/messages/send               raw RFC 822 message
- GET  /users/me/profile                     active user address
"""

import base64
from email.message import EmailMessage
from email.utils import formataddr
from typing import Any, Iterable, Optional

import httpx
import structlog

from inbox_sentiment.mailbox.base import MailboxPort, MailThread
from inbox_sentiment.mailbox.exceptions import MailboxError
from inbox_sentiment.models.mail_models import Label, Message

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://gmail.googleapis.com/gmail/v1"


def _decode_body(data: str) -> str:
    """Decode a base64url body part (Gmail omits padding)."""
    padded = data + "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(padded).decode("utf-8", errors="replace")


def _find_part(payload: dict[str, Any], mime_type: str) -> Optional[str]:
    """Depth-first search for the first part of the given MIME type."""
    if payload.get("mimeType") == mime_type:
        data = payload.get("body", {}).get("data")
        if data:
            return _decode_body(data)
    for part in payload.get("parts", []) or []:
        found = _find_part(part, mime_type)
        if found is not None:
            return found
    return None


def parse_message(raw: dict[str, Any]) -> Message:
    """
    Build a Message from a Gmail API message resource (format=full).

    plain_body comes from the first text/plain part; body is the first
    text/html part, falling back to the plain text when there is no HTML.
    """
    payload = raw.get("payload", {})
    plain = _find_part(payload, "text/plain") or ""
    html = _find_part(payload, "text/html")
    return Message(id=raw["id"], plain_body=plain, body=html if html is not None else plain)


class GmailThread(MailThread):
    """Thread handle; the full thread is fetched on first access."""

    def __init__(self, mailbox: "GmailMailbox", thread_id: str):
        self._mailbox = mailbox
        self._id = thread_id
        self._raw: Optional[dict[str, Any]] = None

    @property
    def id(self) -> str:
        return self._id

    def _load(self) -> dict[str, Any]:
        if self._raw is None:
            self._raw = self._mailbox._request(
                "GET", f"/users/me/threads/{self._id}", params={"format": "full"}
            )
        return self._raw

    def get_messages(self) -> list[Message]:
        return [parse_message(m) for m in self._load().get("messages", [])]

    def get_labels(self) -> list[Label]:
        label_ids: set[str] = set()
        for raw_message in self._load().get("messages", []):
            label_ids.update(raw_message.get("labelIds", []))
        return [label for label in self._mailbox.list_labels() if label.id in label_ids]

    def add_label(self, label: Label) -> None:
        self._modify({"addLabelIds": [label.id]})

    def remove_label(self, label: Label) -> None:
        self._modify({"removeLabelIds": [label.id]})

    def replace_labels(self, remove: Iterable[Label], add: Label) -> None:
        # Gmail rejects a label id that is both added and removed
        remove_ids = [label.id for label in remove if label.id != add.id]
        self._modify({"addLabelIds": [add.id], "removeLabelIds": remove_ids})

    def _modify(self, body: dict[str, list[str]]) -> None:
        self._mailbox._request("POST", f"/users/me/threads/{self._id}/modify", json=body)
        # Cached label ids are stale now
        self._raw = None


class GmailMailbox(MailboxPort):
    """MailboxPort implementation backed by the Gmail REST API."""

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize Gmail mailbox.

        Args:
            access_token: OAuth2 access token with gmail.modify + gmail.send scope
            base_url: API root
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {access_token}"},
            transport=transport,
        )
        logger.info("Gmail mailbox initialized", base_url=self.base_url)

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise MailboxError(
                f"Gmail request failed: {e}",
                details={"method": method, "path": path, "error_type": type(e).__name__},
            ) from e

        if response.is_error:
            logger.error(
                "Gmail HTTP error",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise MailboxError(
                f"Gmail HTTP error {response.status_code}",
                details={"status": response.status_code, "body": response.text[:500]},
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise MailboxError(
                "Gmail returned a non-JSON body",
                details={"method": method, "path": path, "body": response.text[:500]},
            ) from e

    def get_inbox_threads(self, offset: int, count: int) -> list[MailThread]:
        data = self._request(
            "GET",
            "/users/me/threads",
            params={"labelIds": "INBOX", "maxResults": offset + count},
        )
        thread_ids = [t["id"] for t in data.get("threads", [])][offset:offset + count]
        logger.debug("Fetched inbox threads", count=len(thread_ids), offset=offset)
        return [GmailThread(self, thread_id) for thread_id in thread_ids]

    def list_labels(self) -> list[Label]:
        data = self._request("GET", "/users/me/labels")
        return [Label(id=raw["id"], name=raw["name"]) for raw in data.get("labels", [])]

    def get_label_by_name(self, name: str) -> Optional[Label]:
        return next((label for label in self.list_labels() if label.name == name), None)

    def create_label(self, name: str) -> Label:
        raw = self._request(
            "POST",
            "/users/me/labels",
            json={
                "name": name,
                "labelListVisibility": "labelShow",
                "messageListVisibility": "show",
            },
        )
        logger.info("Label created", label_id=raw["id"], name=name)
        return Label(id=raw["id"], name=raw["name"])

    def get_active_user_email(self) -> str:
        return self._request("GET", "/users/me/profile")["emailAddress"]

    def send_email(
        self,
        recipient: str,
        subject: str,
        body: str,
        *,
        name: Optional[str] = None,
        html_body: Optional[str] = None,
    ) -> None:
        message = EmailMessage()
        message["To"] = recipient
        message["Subject"] = subject
        if name:
            # Gmail rewrites the address but keeps the display name
            message["From"] = formataddr((name, self.get_active_user_email()))
        message.set_content(body)
        if html_body:
            message.add_alternative(html_body, subtype="html")

        raw = base64.urlsafe_b64encode(message.as_bytes()).decode("ascii")
        self._request("POST", "/users/me/messages/send", json={"raw": raw})
        logger.debug("Message sent", recipient=recipient, subject=subject)

    def close(self) -> None:
        self._client.close()
