"""Data structures for Responses API requests, replies and search results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class InputItem:
    """One message in the input list of a Responses API request."""

    type: str
    content: str
    role: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type}
        if self.role:
            data["role"] = self.role
        data["content"] = self.content
        return data


@dataclass
class Tool:
    """A tool made available to the model."""

    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type}


@dataclass
class ResponseRequest:
    """Request body for the Responses API; empty optional fields are omitted."""

    model: str
    input: list[InputItem] = field(default_factory=list)
    tools: list[Tool] = field(default_factory=list)
    tool_choice: str = ""
    stream: bool = False
    temperature: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "model": self.model,
            "input": [item.to_dict() for item in self.input],
        }
        if self.tools:
            data["tools"] = [tool.to_dict() for tool in self.tools]
        if self.tool_choice:
            data["tool_choice"] = self.tool_choice
        if self.stream:
            data["stream"] = True
        if self.temperature:
            data["temperature"] = self.temperature
        return data


@dataclass
class FunctionTool:
    """Definition of a function tool."""

    name: str = ""
    description: str = ""
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass
class WebSearchOptions:
    """Options for the web search tool (currently none)."""


@dataclass
class Usage:
    """Token usage information."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class FunctionCallDetail:
    """Details of a function call made by the model."""

    name: str = ""
    arguments: str = ""


@dataclass
class WebSearchResult:
    """A single web search hit."""

    title: str = ""
    url: str = ""
    snippet: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "url": self.url, "snippet": self.snippet}


@dataclass
class WebSearchCallDetail:
    """Details of a web search call made by the model."""

    query: str = ""
    results: list[WebSearchResult] = field(default_factory=list)


@dataclass
class ToolCall:
    """A tool invocation inside a message."""

    id: str = ""
    type: str = ""
    function: FunctionCallDetail | None = None
    web_search: WebSearchCallDetail | None = None


@dataclass
class Message:
    """A chat message."""

    role: str = ""
    content: str = ""
    tool_calls: list[ToolCall] = field(default_factory=list)


@dataclass
class Choice:
    """One choice of a model reply."""

    index: int = 0
    message: Message | None = None
    delta: Message | None = None
    finish_reason: str | None = None
    logprobs: Any = None


@dataclass
class ResponseData:
    """A complete model reply."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[Choice] = field(default_factory=list)
    usage: Usage | None = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class StreamEvent:
    """A generic streaming event."""

    type: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime | None = None


@dataclass
class SearchResult:
    """The combined outcome of one search: cited pages and a summary."""

    query: str
    results: list[WebSearchResult] = field(default_factory=list)
    summary: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "query": self.query,
            "results": [result.to_dict() for result in self.results],
        }
        if self.summary:
            data["summary"] = self.summary
        data["timestamp"] = self.timestamp.isoformat()
        return data