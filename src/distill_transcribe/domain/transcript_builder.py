"""Core business logic for transcript building."""

import json
from collections.abc import Iterable, Iterator
from typing import Any

from distill_transcribe.domain.models import EventKind, TranscriptEvent, TranscriptLine
from distill_transcribe.exceptions import TranscriptParseError


class TranscriptBuilder:
    """Builds speaker-grouped transcripts from a Transcribe result payload."""

    def build(self, payload: bytes | str) -> str:
        """
        Reconstructs the transcript text from a result payload.

        Args:
            payload: The raw JSON document of a completed transcription job.

        Returns:
            One ``"speaker: text"`` line per same-speaker run, each ending in a
            newline. An empty item list yields an empty string.

        Raises:
            TranscriptParseError: If the payload is malformed or a token is
                missing a mandatory field.
        """
        return self.render(self.merge(self.parse_events(payload)))

    def parse_events(self, payload: bytes | str) -> Iterator[TranscriptEvent]:
        """Yields word and punctuation events in document order."""
        items = self._load_items(payload)
        for index, item in enumerate(items):
            event = self._to_event(item, index)
            if event is not None:
                yield event

    def merge(self, events: Iterable[TranscriptEvent]) -> list[TranscriptLine]:
        """
        Merges token events into speaker runs in a single left-to-right pass.

        Punctuation attaches to the currently open run without a separator.
        Punctuation seen before any speaker is established is discarded when
        the first word seeds the run.
        """
        lines: list[TranscriptLine] = []
        current_speaker: str | None = None
        current_text = ""

        for event in events:
            if event.kind is EventKind.PUNCTUATION:
                current_text += event.text
                continue

            speaker = event.speaker_label
            if current_speaker is None:
                current_speaker = speaker
                current_text = event.text
            elif speaker == current_speaker:
                current_text += " " + event.text
            else:
                if current_text:
                    lines.append(self._line(current_speaker, current_text))
                current_speaker = speaker
                current_text = event.text

        if current_speaker is not None and current_text:
            lines.append(self._line(current_speaker, current_text))

        return lines

    def render(self, lines: Iterable[TranscriptLine]) -> str:
        """Formats lines into the final transcript text."""
        return "".join(line.render() for line in lines)

    def _line(self, speaker: str, text: str) -> TranscriptLine:
        return TranscriptLine(speaker_label=speaker, text=text.strip())

    def _load_items(self, payload: bytes | str) -> list[Any]:
        """Parses the payload and returns the ``results.items`` list."""
        try:
            document = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TranscriptParseError(
                f"Result payload is not valid JSON: {e}", cause=e
            ) from e

        results = document.get("results") if isinstance(document, dict) else None
        if not isinstance(results, dict):
            raise TranscriptParseError("Missing results object", field="results")

        items = results.get("items")
        if not isinstance(items, list):
            raise TranscriptParseError("Missing items list", field="results.items")

        return items

    def _to_event(self, item: Any, index: int) -> TranscriptEvent | None:
        """Converts one payload item, or returns None for unrelated item types."""
        if not isinstance(item, dict):
            raise TranscriptParseError("Item is not an object", index=index)

        item_type = item.get("type")
        if not isinstance(item_type, str):
            raise TranscriptParseError("Missing item type", field="type", index=index)

        try:
            kind = EventKind(item_type)
        except ValueError:
            return None

        content = self._content(item, index)

        if kind is EventKind.PUNCTUATION:
            return TranscriptEvent(kind=kind, text=content)

        speaker_label = item.get("speaker_label")
        if not isinstance(speaker_label, str) or not speaker_label:
            raise TranscriptParseError(
                "Missing speaker label on word", field="speaker_label", index=index
            )
        return TranscriptEvent(kind=kind, text=content, speaker_label=speaker_label)

    def _content(self, item: dict[str, Any], index: int) -> str:
        alternatives = item.get("alternatives")
        first = None
        if isinstance(alternatives, list) and alternatives:
            first = alternatives[0]
        content = first.get("content") if isinstance(first, dict) else None
        if not isinstance(content, str):
            raise TranscriptParseError(
                "Missing token content", field="alternatives[0].content", index=index
            )
        return content
