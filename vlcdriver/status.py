"""
vlcdriver.status
~~~~~~~~~~~~~~~~
Reads progress from a running VLC through its HTTP interface.

HttpStatusSource fetches /requests/status.xml; VlcStatusParser turns
that document into a completion fraction. Both raise subclasses of
StatusUnavailableError so a failed poll can never be mistaken for 0%.
"""

from __future__ import annotations

import base64
import http.client
import logging
import urllib.error
import urllib.request
import xml.etree.ElementTree as ET

from vlcdriver.errors import StatusFetchError, StatusParseError

log = logging.getLogger(__name__)


class HttpStatusSource:
    """
    Fetches the raw status document from one VLC instance.

    VLC's web interface uses basic auth with an empty user name and the
    password given by --http-password.
    """

    def __init__(self, password: str = "", timeout: float = 2.0):
        self.url: str | None = None
        self.password = password
        self.timeout = timeout

    def get_document(self) -> str:
        if not self.url:
            raise StatusFetchError("<unset>", "no status URL configured")

        request = urllib.request.Request(self.url)
        token = base64.b64encode(f":{self.password}".encode()).decode("ascii")
        request.add_header("Authorization", f"Basic {token}")

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                return response.read().decode("utf-8", errors="replace")
        except urllib.error.HTTPError as exc:
            raise StatusFetchError(self.url, f"HTTP {exc.code}") from exc
        except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
            # timeouts surface as socket.timeout, an OSError subclass;
            # garbled responses as BadStatusLine / IncompleteRead
            raise StatusFetchError(self.url, str(exc)) from exc


class VlcStatusParser:
    """Extracts the <position> field (0.0 – 1.0) from status.xml."""

    def parse(self, document: str) -> float:
        try:
            root = ET.fromstring(document)
        except ET.ParseError as exc:
            raise StatusParseError(f"Malformed status document: {exc}") from exc

        node = root.find("position")
        if node is None or not (node.text or "").strip():
            raise StatusParseError("Status document has no position")

        try:
            position = float(node.text)
        except ValueError as exc:
            raise StatusParseError(f"Position is not a number: {node.text!r}") from exc

        return min(max(position, 0.0), 1.0)
