# news_reporter

A command-line tool that searches the web for the latest news. It sends the
query to the OpenAI Responses API with the `web_search_preview` tool and
streams back a summary in Japanese. The pages the model cites are listed with
their URLs. The summary can also be read aloud or saved as an MP3 file using
OpenAI text-to-speech.

## Installation

```
pip install .
```

Audio playback (`--audio`) uses `pygame` and needs a working sound device.
Saving to a file (`--save`) does not need one.

## Configuration

Settings come from the environment. A `.env` file in the current directory is
loaded first, if present. Variables that are already set are not overridden.

| Variable          | Required | Default                     |
|-------------------|----------|-----------------------------|
| `OPENAI_API_KEY`  | yes      |                             |
| `OPENAI_BASE_URL` | no       | `https://api.openai.com/v1` |

```
export OPENAI_API_KEY="placeholder"
```

## Usage

```
news-reporter "今日の経済ニュース"
news-reporter "最新のAI技術動向"
news-reporter --audio "今日のニュース"
news-reporter --save summary.mp3 "AIニュース"
```

Options:

- `-h`, `--help`: show the help message and exit with status 0.
- `-a`, `--audio`: search and print the results, then search again and ask
  `(y/N)` whether to play the summary aloud. An answer of `y` or `yes` in any
  case plays it. A playback failure is reported as a warning. It does not make
  the command fail.
- `-s`, `--save <filename>`: search and write the spoken summary to
  `<filename>` as MP3. The search results are not printed. This option takes
  precedence over `--audio`.

All other arguments are joined with spaces to form the query. The command
exits with status 1 in these cases:

- no arguments or an empty query
- `--save` given without a file name
- `OPENAI_API_KEY` not set
- a failed request
- no summary to save

## Library use

```python
from news_reporter.config import load_config
from news_reporter.client import OpenAIClient
from news_reporter.handlers import format_text

client = OpenAIClient(load_config())
result = client.search("円安ドル高の最新状況")
for item in result.results:
    print(item.title, item.url)
print(format_text(result.summary, 80))
```

Modules:

- `news_reporter.config`: `Config` and `load_config()`. `load_config()`
  raises `ConfigError` when the key is missing.
- `news_reporter.client`:
  - `OpenAIClient.search()` returns a `SearchResult` and raises `APIError` on
    failure.
  - `build_search_request()` builds the request.
  - `parse_stream()` reads server-sent event lines.
  - `apply_annotation()` adds URL citations without duplicates.
- `news_reporter.tts`:
  - `TTSClient.synthesize()` returns MP3 bytes.
  - `TTSClient.synthesize_and_play()` synthesizes and plays them.
  - `TTSClient.save_to_file()` writes them to a file.
  - `play_audio()` plays MP3 bytes.
  - All of these raise `TTSError` on failure.
- `news_reporter.handlers`:
  - `SearchHandler` runs the search workflows and prints the results, raising
    `HandlerError` on failure.
  - `format_snippet()` and `format_text()` shorten and wrap text. Width is
    measured in UTF-8 bytes.
- `news_reporter.models`: dataclasses for requests and results, including
  `ResponseRequest`, `SearchResult` and `WebSearchResult`.
- `news_reporter.cli`: `main()`, `parse_args()` and `show_help()`.

## Limitations

- Each search is a single request. Results are not cached or stored.
- The request settings are fixed:
  - search model: `gpt-4o-mini`, temperature 0.3
  - voice: `alloy`
  - speech model: `tts-1`

## Development

```
pip install -e ".[test]"
pytest
```