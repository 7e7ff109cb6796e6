"""
Caption acquisition: query the player endpoint, pick a caption track,
download it and parse it into timed transcript lines.
"""

import json
import xml.etree.ElementTree as ET
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import urljoin

from .config import config
from .exceptions import (
    AgeRestrictedError,
    CaptionFetchError,
    CaptionParseError,
    HttpRequestError,
    NoMatchingTrackError,
    PageFetchError,
    TranscriptsDisabledError,
    VideoUnavailableError
)
from .http_client import HttpClient
from ..models import CaptionResult, CaptionTrack, TranscriptLine, VideoMetadata
from ..utils.logging import get_logger
from ..utils.text_utils import decode_entities, seconds_to_ms

logger = get_logger("caption_acquirer")

LOGIN_REQUIRED_STATUS = "LOGIN_REQUIRED"
ERROR_STATUSES = ("ERROR", "UNPLAYABLE")

TrackPredicate = Callable[[CaptionTrack, str], bool]

# Track preference rules, tried in order; the first rule with a match wins
# and within a rule the first track in source order wins.
PREFERENCE_RULES: Tuple[Tuple[str, TrackPredicate], ...] = (
    ("exact_manual", lambda track, lang: bool(lang) and track.language_code == lang and not track.is_auto_generated),
    ("exact_any", lambda track, lang: bool(lang) and track.language_code == lang),
    ("prefix", lambda track, lang: bool(lang) and track.language_code.lower().startswith(lang.lower())),
    ("first_available", lambda track, lang: True),
)


def select_track(tracks: List[CaptionTrack], lang_code: str) -> CaptionTrack:
    """
    Select the caption track that best matches *lang_code*.

    Raises:
        NoMatchingTrackError: If *tracks* is empty
    """
    for rule_name, predicate in PREFERENCE_RULES:
        for track in tracks:
            if predicate(track, lang_code):
                logger.debug(
                    f"Selected track {track.language_code} "
                    f"({'asr' if track.is_auto_generated else 'manual'}) by rule {rule_name}"
                )
                return track
    raise NoMatchingTrackError(f"No caption track available for language '{lang_code}'")


def parse_player_response(body: str) -> Dict[str, Any]:
    """
    Decode the player endpoint body, which must be a JSON object.

    Raises:
        PageFetchError: If the body is not a JSON object
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        raise PageFetchError(f"Player response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PageFetchError("Player response is not a JSON object")
    return data


def check_playability(player: Dict[str, Any]) -> None:
    """
    Fail fast on restricted or unavailable videos.

    Raises:
        AgeRestrictedError: On a login-required status
        VideoUnavailableError: On an explicit error status
    """
    playability = player.get("playabilityStatus")
    if not isinstance(playability, dict):
        return

    status = playability.get("status")
    reason = playability.get("reason") or ""
    if status == LOGIN_REQUIRED_STATUS:
        raise AgeRestrictedError(f"Video requires sign-in{': ' + reason if reason else ''}")
    if status in ERROR_STATUSES:
        raise VideoUnavailableError(f"Video is unavailable{': ' + reason if reason else ''}")


def extract_caption_tracks(player: Dict[str, Any]) -> List[CaptionTrack]:
    """
    Collect the caption tracks listed in a player response.

    Raises:
        TranscriptsDisabledError: If the video exposes no usable track
    """
    captions = player.get("captions")
    renderer = captions.get("playerCaptionsTracklistRenderer") if isinstance(captions, dict) else None
    raw_tracks = renderer.get("captionTracks") if isinstance(renderer, dict) else None
    if not isinstance(raw_tracks, list) or not raw_tracks:
        raise TranscriptsDisabledError("Transcripts are disabled for this video")

    tracks = [track for track in (CaptionTrack.from_dict(raw) for raw in raw_tracks) if track]
    if not tracks:
        raise TranscriptsDisabledError("Transcripts are disabled for this video")
    return tracks


def extract_video_metadata(player: Dict[str, Any]) -> VideoMetadata:
    """Title, author and channel ID from the ``videoDetails`` block."""
    details = player.get("videoDetails")
    if not isinstance(details, dict):
        return VideoMetadata()

    def _text(key: str) -> str:
        value = details.get(key)
        return value if isinstance(value, str) else ""

    return VideoMetadata(
        title=_text("title"),
        author=_text("author"),
        channel_id=_text("channelId") or None
    )


def parse_caption_document(document: str) -> List[TranscriptLine]:
    """
    Parse a timedtext XML document into transcript lines.

    Each ``<text start="..." dur="...">`` node yields one line, in document
    order. Cue text arrives entity-encoded inside the XML, so it is decoded
    once more after the XML parser has done its own unescaping.

    Raises:
        CaptionParseError: If the document is malformed or has no cues
    """
    try:
        root = ET.fromstring(document)
    except (ET.ParseError, TypeError, ValueError) as e:
        raise CaptionParseError(f"Caption document is not well-formed: {e}") from e

    lines = []
    for cue in root.iter("text"):
        start = cue.get("start")
        if start is None:
            raise CaptionParseError("Caption cue is missing its start attribute")
        try:
            offset_ms = seconds_to_ms(start)
            duration_ms = seconds_to_ms(cue.get("dur") or "0")
        except ValueError as e:
            raise CaptionParseError(f"Caption cue has an invalid time: {e}") from e

        lines.append(TranscriptLine(
            text=decode_entities("".join(cue.itertext())),
            offset_ms=offset_ms,
            duration_ms=duration_ms
        ))

    if not lines:
        raise CaptionParseError("Caption document contains no cues")
    return lines


class CaptionAcquirer:
    """Fetches and parses the captions of one video."""

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    async def fetch_player(
        self,
        video_id: str,
        api_key: str,
        client_version: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Query the player endpoint for *video_id*.

        Raises:
            PageFetchError: On transport failure or a malformed response
        """
        client_version = client_version or config.youtube.client_version
        payload = {
            "context": {
                "client": {
                    "clientName": config.youtube.client_name,
                    "clientVersion": client_version,
                }
            },
            "videoId": video_id,
        }
        headers = {
            "Content-Type": "application/json",
            "X-YouTube-Client-Name": "1",
            "X-YouTube-Client-Version": client_version,
        }
        try:
            body = await self.http_client.post(
                config.youtube.player_url,
                params={"key": api_key, "prettyPrint": "false"},
                json=payload,
                headers=headers
            )
        except HttpRequestError as e:
            raise PageFetchError(f"Failed to fetch video metadata: {e.message}") from e
        return parse_player_response(body)

    async def fetch_caption_document(self, track: CaptionTrack) -> str:
        """
        Download the caption document of *track*.

        Raises:
            CaptionFetchError: On transport failure or a non-2xx response
        """
        url = track.source_url
        if not url.startswith(("https://", "http://")):
            url = urljoin(config.youtube.base_url, url)
        try:
            return await self.http_client.get(url)
        except HttpRequestError as e:
            raise CaptionFetchError(f"Failed to fetch captions: {e.message}") from e

    async def fetch_captions(
        self,
        video_id: str,
        api_key: str,
        lang_code: str,
        client_version: Optional[str] = None
    ) -> CaptionResult:
        """
        Run metadata lookup, track selection, download and parsing.

        Args:
            video_id: The YouTube video ID
            api_key: Page-embedded API key
            lang_code: Requested caption language, e.g. "en"
            client_version: Client version to report to the player endpoint

        Returns:
            CaptionResult with metadata, the chosen track and its lines
        """
        player = await self.fetch_player(video_id, api_key, client_version)
        check_playability(player)

        tracks = extract_caption_tracks(player)
        logger.debug(
            "Available tracks: "
            + ", ".join(f"{t.language_code}{'-asr' if t.is_auto_generated else ''}" for t in tracks)
        )
        track = select_track(tracks, lang_code)

        document = await self.fetch_caption_document(track)
        lines = parse_caption_document(document)

        return CaptionResult(
            video_id=video_id,
            metadata=extract_video_metadata(player),
            track=track,
            lines=lines
        )
