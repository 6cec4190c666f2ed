"""Search workflows: run a search, show it, speak or save its summary."""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import datetime

from .client import APIError, OpenAIClient
from .models import SearchResult
from .tts import TTSClient, TTSError

DISPLAY_WIDTH = 80


class HandlerError(Exception):
    """Raised when a search workflow cannot complete."""


def _width(text: str) -> int:
    """Width of ``text`` measured in UTF-8 bytes."""
    return len(text.encode("utf-8"))


def format_snippet(snippet: str, max_width: int) -> str:
    """Shorten ``snippet`` at a word boundary, ending with "..." when cut."""
    if _width(snippet) <= max_width:
        return snippet

    parts: list[str] = []
    length = 0
    for word in snippet.split():
        if length + _width(word) + 1 > max_width - 3:
            parts.append("...")
            break
        if length > 0:
            parts.append(" ")
            length += 1
        parts.append(word)
        length += _width(word)
    return "".join(parts)


def format_text(text: str, max_width: int) -> str:
    """Wrap lines of ``text`` longer than ``max_width`` at word boundaries."""
    if _width(text) <= max_width:
        return text

    out: list[str] = []
    for line in text.split("\n"):
        if _width(line) <= max_width:
            out.append(line)
            continue

        current: list[str] = []
        length = 0
        for word in line.split():
            if length + _width(word) + 1 > max_width and length > 0:
                out.append(" ".join(current))
                current = []
                length = 0
            if length > 0:
                length += 1
            current.append(word)
            length += _width(word)
        if current:
            out.append(" ".join(current))

    return "\n".join(out)


def _read_answer() -> str:
    try:
        line = input()
    except EOFError:
        return ""
    words = line.split()
    return words[0] if words else ""


class SearchHandler:
    """Runs searches and presents their results."""

    def __init__(
        self,
        openai_client: OpenAIClient,
        tts_client: TTSClient,
        ask: Callable[[], str] | None = None,
    ) -> None:
        self.openai_client = openai_client
        self.tts_client = tts_client
        self._ask = ask or _read_answer

    def _search(self, query: str, failure: str) -> SearchResult:
        try:
            return self.openai_client.search(query)
        except APIError as exc:
            raise HandlerError(f"{failure}: {exc}") from exc

    def handle_search(self, query: str) -> None:
        """Search for ``query`` and print the results."""
        now = datetime.now()
        stamp = f"{now.year}年{now.month}月{now.day}日 {now:%H:%M}"
        print(f"🔍 最新情報を検索中: {query} ({stamp}時点)")
        print("-" * 50)

        result = self._search(query, "検索に失敗しました")
        self.display_result(result)

    def handle_search_with_audio(self, query: str) -> None:
        """Search, print the results, then offer to read the summary aloud."""
        self.handle_search(query)
        result = self._search(query, "音声用検索に失敗しました")

        print("\n🎵 音声で要約を再生しますか？ (y/N): ")
        answer = self._ask().strip().lower()
        if answer not in ("y", "yes"):
            return

        if not result.summary:
            print("⚠️  再生可能な要約がありません")
            return

        try:
            self.tts_client.synthesize_and_play(result.summary)
        except TTSError as exc:
            # Playback problems are reported but do not fail the search.
            print(f"⚠️  音声再生エラー: {exc}")
            return
        print("✅ 音声再生が完了しました！")

    def save_audio_summary(self, query: str, filename: str | os.PathLike[str]) -> None:
        """Search and save the spoken summary to ``filename``."""
        result = self._search(query, "検索に失敗しました")
        if not result.summary:
            raise HandlerError("保存可能な要約がありません")
        self.tts_client.save_to_file(result.summary, filename)

    def display_result(self, result: SearchResult) -> None:
        """Print cited pages and the summary of ``result``."""
        print(f"📊 最新検索結果 ({result.timestamp:%Y-%m-%d %H:%M:%S}取得)")
        print("=" * 50)

        if result.results:
            print(f"\n🌐 最新Web検索結果 ({len(result.results)}件):")
            print("-" * 30)
            for number, hit in enumerate(result.results, start=1):
                print(f"\n{number}. {hit.title}")
                print(f"   🔗 {hit.url}")
                if hit.snippet:
                    print(f"   📄 {format_snippet(hit.snippet, DISPLAY_WIDTH)}")
        else:
            print("\n⚠️  最新のWeb検索結果が見つかりませんでした")

        if result.summary:
            print("\n🤖 最新情報AI要約:")
            print("-" * 30)
            print(format_text(result.summary, DISPLAY_WIDTH))

        print("=" * 50)