"""Speech synthesis through the audio API and local MP3 playback."""

from __future__ import annotations

import io
import json
import os
import time
from pathlib import Path

import requests

from .config import Config

TTS_MODEL = "tts-1"
TTS_VOICE = "alloy"
TTS_FORMAT = "mp3"
_POLL_INTERVAL = 0.1


class TTSError(Exception):
    """Raised when speech cannot be synthesized, played or saved."""


def play_audio(audio_data: bytes) -> None:
    """Play MP3 data on the default audio device and wait until it finishes."""
    # pygame is only needed for playback, so it is loaded on first use.
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    try:
        pygame.mixer.init()
    except pygame.error as exc:
        raise TTSError(f"failed to create audio context: {exc}") from exc

    try:
        try:
            pygame.mixer.music.load(io.BytesIO(audio_data), "mp3")
        except pygame.error as exc:
            raise TTSError(f"failed to create MP3 decoder: {exc}") from exc
        pygame.mixer.music.play()
        while pygame.mixer.music.get_busy():
            time.sleep(_POLL_INTERVAL)
    finally:
        pygame.mixer.quit()


class TTSClient:
    """Turns text into speech with the audio API."""

    def __init__(
        self,
        config: Config,
        session: requests.Session | None = None,
        timeout: float = 120.0,
    ) -> None:
        self.config = config
        self._session = session or requests.Session()
        self._timeout = timeout

    def synthesize(self, text: str) -> bytes:
        """Return MP3 audio of ``text`` spoken aloud."""
        payload = {
            "model": TTS_MODEL,
            "input": text,
            "voice": TTS_VOICE,
            "response_format": TTS_FORMAT,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.openai_api_key}",
        }
        try:
            response = self._session.post(
                f"{self.config.base_url}/audio/speech",
                data=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TTSError(f"failed to send request: {exc}") from exc

        with response:
            if response.status_code != 200:
                body = response.content.decode("utf-8", errors="replace")
                raise TTSError(
                    f"API request failed with status {response.status_code}: {body}"
                )
            return response.content

    def synthesize_and_play(self, text: str) -> None:
        """Synthesize ``text`` and play it."""
        print("🎵 音声を生成中...")
        try:
            audio_data = self.synthesize(text)
        except TTSError as exc:
            raise TTSError(f"音声生成に失敗しました: {exc}") from exc

        print("🔊 音声を再生中...")
        try:
            play_audio(audio_data)
        except TTSError as exc:
            raise TTSError(f"音声再生に失敗しました: {exc}") from exc

    def save_to_file(self, text: str, filename: str | os.PathLike[str]) -> None:
        """Synthesize ``text`` and write the MP3 data to ``filename``."""
        print(f"🎵 音声ファイルを生成中: {filename}")
        try:
            audio_data = self.synthesize(text)
        except TTSError as exc:
            raise TTSError(f"音声生成に失敗しました: {exc}") from exc

        try:
            Path(filename).write_bytes(audio_data)
        except OSError as exc:
            raise TTSError(f"ファイル保存に失敗しました: {exc}") from exc

        print(f"✅ 音声ファイルを保存しました: {filename}")