"""Client for the Responses API with streaming web search."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from datetime import datetime
from typing import Any

import requests

from .config import Config
from .models import InputItem, ResponseRequest, SearchResult, Tool, WebSearchResult

SEARCH_MODEL = "gpt-4o-mini"
CITATION_SNIPPET = "Web検索結果から引用"

_SYSTEM_TEMPLATE = """あなたは最新のニュースと情報を検索するアシスタントです。
現在の日付: {date}

以下の指示に従ってください：
1. 必ずweb_search_previewツールを使用して、最新の情報を検索してください
2. 検索結果から、今日（{date}）またはできるだけ最近の情報を優先してください
3. 古い情報（1週間以上前）は避け、最新のニュースに焦点を当ててください
4. 検索結果を日本語で要約し、情報源のURLも含めてください
5. 情報の日付が明確でない場合は、その旨を明記してください"""


class APIError(Exception):
    """Raised when the API request fails or its stream cannot be read."""


def _japanese_date(moment: datetime) -> str:
    return f"{moment.year}年{moment.month}月{moment.day}日"


def build_search_request(query: str, now: datetime) -> ResponseRequest:
    """Build the streaming web-search request for ``query`` as of ``now``."""
    date = _japanese_date(now)
    system_message = _SYSTEM_TEMPLATE.format(date=date)
    enhanced_query = f"【{date}時点】{query}（最新情報・今日のニュース）"
    return ResponseRequest(
        model=SEARCH_MODEL,
        input=[
            InputItem(type="message", role="system", content=system_message),
            InputItem(type="message", role="user", content=enhanced_query),
        ],
        tools=[Tool(type="web_search_preview")],
        tool_choice="required",
        stream=True,
        temperature=0.3,
    )


def apply_annotation(event: dict[str, Any], result: SearchResult) -> bool:
    """Add a URL citation from an annotation event to ``result``.

    Returns True if a new result was added. Raises ValueError when the
    event carries no annotation object.
    """
    annotation = event.get("annotation")
    if not isinstance(annotation, dict):
        raise ValueError("invalid annotation data")

    if annotation.get("type") != "url_citation":
        return False

    title = annotation.get("title")
    url = annotation.get("url")
    hit = WebSearchResult(
        title=title if isinstance(title, str) else "",
        url=url if isinstance(url, str) else "",
    )
    if hit.title:
        hit.snippet = CITATION_SNIPPET

    if any(existing.url == hit.url for existing in result.results):
        return False

    result.results.append(hit)
    return True


def parse_stream(lines: Iterable[str], query: str) -> SearchResult:
    """Collect summary text and citations from server-sent event lines."""
    result = SearchResult(query=query)
    parts: list[str] = []

    for line in lines:
        line = line.removesuffix("\r")
        if not line.startswith("data: "):
            continue
        data = line[len("data: "):]
        if data == "[DONE]":
            break

        try:
            event = json.loads(data)
        except json.JSONDecodeError:
            continue
        if not isinstance(event, dict):
            continue

        event_type = event.get("type")
        if event_type == "response.output_text.delta":
            delta = event.get("delta")
            if isinstance(delta, str):
                parts.append(delta)
        elif event_type == "response.output_text.annotation.added":
            try:
                apply_annotation(event, result)
            except ValueError as exc:
                print(f"Warning: failed to process annotation: {exc}")

    result.summary = "".join(parts)
    return result


def _decoded_lines(response: requests.Response) -> Iterator[str]:
    for raw in response.iter_lines():
        yield raw.decode("utf-8", errors="replace")


class OpenAIClient:
    """Runs web searches through the Responses API."""

    def __init__(
        self,
        config: Config,
        session: requests.Session | None = None,
        timeout: float = 60.0,
    ) -> None:
        self.config = config
        self._session = session or requests.Session()
        self._timeout = timeout

    def search(self, query: str) -> SearchResult:
        """Search the web for ``query`` and return the cited pages and summary."""
        request = build_search_request(query, datetime.now())
        body = json.dumps(request.to_dict(), ensure_ascii=False).encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.openai_api_key}",
            "Accept": "text/event-stream",
        }

        try:
            response = self._session.post(
                f"{self.config.base_url}/responses",
                data=body,
                headers=headers,
                timeout=self._timeout,
                stream=True,
            )
        except requests.RequestException as exc:
            raise APIError(f"failed to send request: {exc}") from exc

        with response:
            if response.status_code != 200:
                text = response.content.decode("utf-8", errors="replace")
                raise APIError(
                    f"API request failed with status {response.status_code}: {text}"
                )
            try:
                return parse_stream(_decoded_lines(response), query)
            except requests.RequestException as exc:
                raise APIError(f"error reading stream: {exc}") from exc