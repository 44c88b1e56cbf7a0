"""Digest lookup against the Maven Central search service."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

from jarhunt.core.models import Resolved, Unresolved


if TYPE_CHECKING:
    from jarhunt.core.models import DigestResult, LookupOutcome
    from jarhunt.core.ports import SearchPort


logger = logging.getLogger(__name__)

# Solr field 1 is the SHA-1 index; the digest is matched as a quoted phrase
PARAM_TEMPLATE = ':"{}"'
QUERY_TEMPLATE = "/solrsearch/select?q=1{}&rows=20&wt=json"

# Characters encodeURIComponent leaves alone beyond quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"


def build_request_path(sha1: str) -> str:
    """Build the search request path for a digest.

    Args:
        sha1: Lowercase hex digest.

    Returns:
        Request path with an encoded query string.

    Example:
        >>> build_request_path("abc")
        '/solrsearch/select?q=1%3A%22abc%22&rows=20&wt=json'
    """
    param = quote(PARAM_TEMPLATE.format(sha1), safe=_URI_COMPONENT_SAFE)
    return QUERY_TEMPLATE.format(param)


def parse_search_response(
    body: bytes | str,
    file_path: str,
    host: str,
    request_path: str,
) -> LookupOutcome:
    """Classify a search response body.

    Only the first document is considered. Anything short of a document
    carrying all of ``g``, ``a`` and ``v`` is Unresolved.

    Args:
        body: Raw response body.
        file_path: File whose digest was searched.
        host: Search host, recorded on Unresolved outcomes.
        request_path: Request path, recorded on Unresolved outcomes.

    Returns:
        Resolved with the first hit's coordinates, or Unresolved.
    """
    try:
        payload = json.loads(body)
        first = payload["response"]["docs"][0]
        coordinates = (first["g"], first["a"], first["v"])
    except (ValueError, KeyError, IndexError, TypeError):
        return Unresolved(file_path=file_path, host=host, request_path=request_path)

    # JSON null counts as a missing field
    if any(value is None for value in coordinates):
        return Unresolved(file_path=file_path, host=host, request_path=request_path)

    group_id, artifact_id, version = (str(value) for value in coordinates)
    return Resolved(group_id, artifact_id, version, file_path=file_path)


class LookupClient:
    """Resolves digests to Maven coordinates through a SearchPort."""

    def __init__(self, search: SearchPort, host: str) -> None:
        """Initialize the client.

        Args:
            search: Transport used to issue requests.
            host: Host name recorded in Unresolved outcomes.
        """
        self._search = search
        self._host = host

    async def lookup(self, result: DigestResult) -> LookupOutcome:
        """Look up one digest.

        Raises:
            LookupTransportError: If the search service is unreachable.
        """
        request_path = build_request_path(result.sha1)
        logger.debug("GET %s%s for %s", self._host, request_path, result.file_path)

        body = await self._search.get(request_path)
        outcome = parse_search_response(
            body, result.file_path, self._host, request_path
        )

        if isinstance(outcome, Resolved):
            logger.info(
                "Resolved %s as %s:%s:%s",
                result.file_path,
                outcome.group_id,
                outcome.artifact_id,
                outcome.version,
            )
        else:
            logger.info("No match for %s (%s)", result.file_path, result.sha1)
        return outcome
