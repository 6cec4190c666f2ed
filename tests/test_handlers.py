from datetime import datetime

import pytest

from news_reporter.client import APIError
from news_reporter.handlers import (
    HandlerError,
    SearchHandler,
    format_snippet,
    format_text,
)
from news_reporter.models import SearchResult, WebSearchResult
from news_reporter.tts import TTSError


class FakeSearch:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.queries = []

    def search(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.result


class FakeTTS:
    def __init__(self, error=None):
        self.error = error
        self.played = []
        self.saved = []

    def synthesize_and_play(self, text):
        if self.error is not None:
            raise self.error
        self.played.append(text)

    def save_to_file(self, text, filename):
        self.saved.append((text, filename))


def make_result(summary="今日の要約", hits=None):
    return SearchResult(
        query="ニュース",
        results=list(hits or []),
        summary=summary,
        timestamp=datetime(2024, 5, 6, 7, 8, 9),
    )


def test_format_snippet_keeps_short_text():
    assert format_snippet("Web検索結果から引用", 80) == "Web検索結果から引用"


def test_format_snippet_pinned_example():
    assert format_snippet("aaa bbb ccc ddd", 10) == "aaa bbb..."


@pytest.mark.parametrize(
    "snippet,width",
    [
        ("alpha beta gamma delta epsilon", 12),
        ("one two three four five six seven eight nine ten", 20),
        ("日本語 の 長い スニペット です よ", 20),
    ],
)
def test_format_snippet_truncates_within_width(snippet, width):
    out = format_snippet(snippet, width)
    assert out.endswith("...")
    assert len(out.encode("utf-8")) <= width
    assert " ".join(snippet.split()).startswith(out[:-3])


def test_format_text_keeps_short_text():
    assert format_text("short line", 80) == "short line"


def test_format_text_wraps_and_keeps_words():
    text = "the quick brown fox jumps over the lazy dog " * 10
    out = format_text(text, 30)
    assert out.split() == text.split()
    assert all(len(line.encode("utf-8")) <= 30 for line in out.split("\n"))
    assert "\n" in out


def test_format_text_keeps_short_lines_of_long_text():
    text = "見出し\n" + "word " * 40
    out = format_text(text, 80)
    assert out.split("\n")[0] == "見出し"
    assert out.split() == text.split()


def test_format_text_leaves_single_long_word():
    text = "x" * 100
    assert format_text(text, 80) == text


def test_format_text_measures_bytes():
    text = "あい " * 20
    out = format_text(text, 80)
    assert "\n" in out
    assert out.split() == text.split()


def test_format_text_drops_blank_overlong_line():
    assert format_text(" " * 100 + "\nend", 80) == "end"


def test_display_result_lists_hits_and_summary(capsys):
    hits = [
        WebSearchResult(title="First", url="https://news.example.com/1", snippet="s"),
        WebSearchResult(title="Second", url="https://news.example.com/2"),
    ]
    SearchHandler(FakeSearch(), FakeTTS()).display_result(make_result(hits=hits))
    out = capsys.readouterr().out
    assert "2024-05-06 07:08:09" in out
    assert f"({len(hits)}件)" in out
    assert "1. First" in out
    assert "https://news.example.com/2" in out
    assert "今日の要約" in out


def test_display_result_without_hits(capsys):
    SearchHandler(FakeSearch(), FakeTTS()).display_result(make_result(summary=""))
    out = capsys.readouterr().out
    assert "最新のWeb検索結果が見つかりませんでした" in out
    assert "最新情報AI要約" not in out


def test_handle_search_prints_query_and_result(capsys):
    search = FakeSearch(result=make_result())
    SearchHandler(search, FakeTTS()).handle_search("経済")
    out = capsys.readouterr().out
    assert search.queries == ["経済"]
    assert "経済" in out
    assert "今日の要約" in out


def test_handle_search_wraps_api_error():
    handler = SearchHandler(FakeSearch(error=APIError("down")), FakeTTS())
    with pytest.raises(HandlerError, match="検索に失敗しました: down"):
        handler.handle_search("経済")


def test_handle_search_with_audio_plays_on_yes(capsys):
    search = FakeSearch(result=make_result())
    tts = FakeTTS()
    SearchHandler(search, tts, ask=lambda: "Yes").handle_search_with_audio("q")
    assert search.queries == ["q", "q"]
    assert tts.played == ["今日の要約"]
    assert "音声再生が完了しました" in capsys.readouterr().out


def test_handle_search_with_audio_skips_on_no():
    tts = FakeTTS()
    SearchHandler(FakeSearch(result=make_result()), tts, ask=lambda: "n").handle_search_with_audio("q")
    assert tts.played == []


def test_handle_search_with_audio_without_summary(capsys):
    tts = FakeTTS()
    handler = SearchHandler(FakeSearch(result=make_result(summary="")), tts, ask=lambda: "y")
    handler.handle_search_with_audio("q")
    assert tts.played == []
    assert "再生可能な要約がありません" in capsys.readouterr().out


def test_handle_search_with_audio_tolerates_playback_error(capsys):
    tts = FakeTTS(error=TTSError("no speaker"))
    handler = SearchHandler(FakeSearch(result=make_result()), tts, ask=lambda: "y")
    handler.handle_search_with_audio("q")
    out = capsys.readouterr().out
    assert "音声再生エラー: no speaker" in out
    assert "音声再生が完了しました" not in out


def test_save_audio_summary_saves_summary():
    tts = FakeTTS()
    SearchHandler(FakeSearch(result=make_result()), tts).save_audio_summary("q", "out.mp3")
    assert tts.saved == [("今日の要約", "out.mp3")]


def test_save_audio_summary_requires_summary():
    tts = FakeTTS()
    handler = SearchHandler(FakeSearch(result=make_result(summary="")), tts)
    with pytest.raises(HandlerError, match="保存可能な要約がありません"):
        handler.save_audio_summary("q", "out.mp3")
    assert tts.saved == []


def test_save_audio_summary_wraps_api_error():
    handler = SearchHandler(FakeSearch(error=APIError("down")), FakeTTS())
    with pytest.raises(HandlerError, match="検索に失敗しました"):
        handler.save_audio_summary("q", "out.mp3")