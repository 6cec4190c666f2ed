"""Command line entry point for the news search tool."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .client import OpenAIClient
from .config import ConfigError, load_config
from .handlers import HandlerError, SearchHandler
from .tts import TTSClient, TTSError

_HELP = """📰 News Reporter - 最新ニュース検索アプリ
{rule}
OpenAI Responses API と web_search_preview を使用して
リアルタイムで最新のニュースや情報を検索します。

使用方法:
  news-reporter "検索クエリ"
  news-reporter [オプション] "検索クエリ"

例:
  news-reporter "今日の経済ニュース"
  news-reporter "最新のAI技術動向"
  news-reporter "円安ドル高の最新状況"
  news-reporter --audio "今日のニュース"
  news-reporter --save summary.mp3 "AIニュース"

オプション:
  -h, --help                このヘルプメッセージを表示
  -a, --audio               音声再生機能付きで実行
  -s, --save <filename>     要約を音声ファイルに保存

機能:
  ✅ リアルタイムWeb検索
  ✅ 最新情報の自動取得
  ✅ 日本語での要約表示
  ✅ 情報源URL付きの結果
  🎵 音声読み上げ機能
  💾 音声ファイル保存機能

音声機能について:
  • OpenAI TTSを使用した高品質な音声合成
  • 日本語要約の自動読み上げ
  • MP3形式での音声ファイル保存

注意: OPENAI_API_KEY環境変数の設定が必要です"""


@dataclass(frozen=True)
class _Options:
    query: str = ""
    audio: bool = False
    save_filename: str | None = None
    show_help: bool = False


def show_help() -> None:
    """Print usage information."""
    print(_HELP.format(rule="=" * 50))


def parse_args(argv: Sequence[str]) -> _Options:
    """Parse options and query words; raises ValueError on a missing file name."""
    audio = False
    save_filename: str | None = None
    words: list[str] = []

    args = iter(argv)
    for arg in args:
        if arg in ("--help", "-h"):
            return _Options(show_help=True)
        if arg in ("--audio", "-a"):
            audio = True
        elif arg in ("--save", "-s"):
            try:
                save_filename = next(args)
            except StopIteration:
                raise ValueError("--save オプションにはファイル名が必要です") from None
        else:
            words.append(arg)

    return _Options(query=" ".join(words), audio=audio, save_filename=save_filename)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        show_help()
        print("❌ エラー: 検索クエリが指定されていません")
        return 1

    try:
        options = parse_args(argv)
    except ValueError as exc:
        print(f"❌ エラー: {exc}")
        return 1

    if options.show_help:
        show_help()
        return 0

    if not options.query.strip():
        show_help()
        print("❌ エラー: 空の検索クエリです")
        return 1

    try:
        config = load_config()
    except ConfigError as exc:
        print(f"❌ 設定エラー: {exc}")
        print()
        print("💡 ヒント: OPENAI_API_KEY環境変数を設定してください")
        print('   export OPENAI_API_KEY="your-api-key-here"')
        return 1

    handler = SearchHandler(OpenAIClient(config), TTSClient(config))

    try:
        if options.save_filename is not None:
            handler.save_audio_summary(options.query, options.save_filename)
        elif options.audio:
            handler.handle_search_with_audio(options.query)
        else:
            handler.handle_search(options.query)
    except (HandlerError, TTSError) as exc:
        print(f"❌ {exc}")
        return 1

    print("\n✅ 処理が完了しました！")
    return 0


if __name__ == "__main__":
    sys.exit(main())