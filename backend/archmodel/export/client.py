import base64
import hashlib
import hmac
import logging
import time
from datetime import datetime, timezone

import requests

from archmodel.export.serializers import workspace_to_json
from archmodel.model.errors import ExportError
from archmodel.model.workspace import Workspace

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json; charset=UTF-8"
USER_AGENT = "archmodel/0.1.0"


def _md5_hex(content: str) -> str:
    return hashlib.md5(content.encode("utf-8")).hexdigest()


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class StructurizrClient:
    """
    Uploads a built workspace to the diagramming service.

    One PUT per call. No retry, no merge with the remote layout; any
    failure surfaces as ExportError.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        api_url: str = "https://api.structurizr.com",
        timeout: float = 60,
    ):
        self.api_key = api_key
        self.api_secret = api_secret
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def signed_headers(self, method: str, path: str, content: str, nonce: str) -> dict:
        """HMAC headers the service expects on every authenticated request."""
        content_md5 = _md5_hex(content)
        message = f"{method}\n{path}\n{content_md5}\n{CONTENT_TYPE}\n{nonce}\n"
        digest = hmac.new(
            self.api_secret.encode("utf-8"),
            message.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

        return {
            "User-Agent": USER_AGENT,
            "Content-Type": CONTENT_TYPE,
            "Content-MD5": _b64(content_md5),
            "Nonce": nonce,
            "X-Authorization": f"{self.api_key}:{_b64(digest)}",
        }

    def put_workspace(self, workspace_id: int, workspace: Workspace) -> None:
        if not self.api_key or not self.api_secret:
            raise ExportError("API key and secret must be configured")

        path = f"/workspace/{workspace_id}"
        content = workspace_to_json(
            workspace,
            workspace_id=workspace_id,
            last_modified_date=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            last_modified_agent=USER_AGENT,
        )
        nonce = str(int(time.time() * 1000))
        headers = self.signed_headers("PUT", path, content, nonce)

        logger.info("uploading workspace '%s' to %s%s", workspace.name, self.api_url, path)
        try:
            response = requests.put(
                f"{self.api_url}{path}",
                data=content.encode("utf-8"),
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            body = e.response.text if e.response is not None else ""
            raise ExportError(
                f"upload of workspace {workspace_id} rejected ({status}): {body}",
                status_code=status,
            ) from e
        except requests.RequestException as e:
            raise ExportError(f"upload of workspace {workspace_id} failed: {e}") from e

        logger.info("workspace %s uploaded", workspace_id)
