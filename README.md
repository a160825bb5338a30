# samedi

Building blocks for a terminal learning companion: a validated user
configuration stored as TOML, interactive prompts that work on any text
streams, and helpers that format plan and statistics output.

## Configuration

`samedi.config` holds the configuration as dataclasses, one per section:
`UserConfig`, `LLMConfig`, `StorageConfig`, `SyncConfig`, `TUIConfig` and
`LearningConfig`, gathered in `Config`.

```python
from samedi.config import ConfigError, config_path, default_config, load, save

cfg = load()                 # ~/.samedi/config.toml, or defaults if it does not exist
cfg.tui.theme = "gruvbox"
cfg.llm.timeout_seconds = 180
save(cfg)                    # validates, then writes the file with mode 0600
print(config_path())
```

- `default_config()` returns the defaults: provider `auto`, a timeout of
  300 seconds, data in `~/.samedi`, backups in `~/samedi-backups`, the
  `dracula` theme, weeks starting on `monday`, 60-minute chunks.
- `load()` reads the file, overlays the known keys of each section (key
  case is ignored, unknown keys are skipped, values are coerced to the
  field's type) and validates the result.
- `save(cfg)` validates, creates the directory if needed and writes one
  TOML table per section.
- `init_config()` writes the default file and fails if one already exists.
- `Config.validate()` checks that the LLM provider is a known one, that a
  set `cli_command` matches the provider (`claude`, `codex`, `gemini`,
  `llm`, or `q` for `amazonq`), that the timeout lies between 10 and 600
  seconds, that the data directory is not empty, that the theme is
  `dracula`, `monokai` or `gruvbox`, and that the first day of the week is
  `monday` or `sunday`.
- `Config.to_dict()` and `Config.update_from_dict(data)` convert to and
  from nested dictionaries.

Every failure raises `ConfigError`.

## Prompts

The prompts take a reader and a writer, so they run as well on
`io.StringIO` as on a terminal. A blank line or the end of input accepts
the default.

```python
import io
from samedi.prompts import prompt_for_hours, prompt_for_level

out = io.StringIO()
prompt_for_hours(io.StringIO("abc\n80\n"), out, 40)    # 80.0, after a warning
prompt_for_level(io.StringIO("Intermediate\n"), out)    # "intermediate"
```

`samedi.prompts` offers `prompt_for_hours` (values in (0, 1000]),
`prompt_for_level` (`beginner`, `intermediate`, `advanced` or blank),
`prompt_for_goals`, `prompt_for_initial_note`, `validate_init_inputs`
(raises `ValueError` outside (0, 1000]) and `join_sample`, which joins at
most a given number of values or returns `-` for none.

`samedi.session_prompts` offers `prompt_for_stop_note`,
`prompt_for_artifacts` (one entry per line until a blank line),
`is_interactive`, true only when prompting is allowed and both standard
input and output are terminals, and `collect_stop_inputs`, which returns
the note and artifacts for ending a session and prompts on the standard
streams for whichever was not given.

## Formatting

```python
from samedi.plan_format import chunk_status_icon, format_duration, format_status, truncate
from samedi.stats_format import build_progress_bar, format_plan_status, print_json

format_duration(90)                       # "1.5h"
format_duration(45)                       # "45min"
format_status("completed")                # "✓ completed"
chunk_status_icon("in-progress")          # "→"
truncate("a rather long plan title", 10)  # "a rathe..."
build_progress_bar(0.5, 10)               # "[█████░░░░░]"
format_plan_status("in-progress")         # "🟡 In Progress"
print_json({"hours": 12.5})               # two-space indented JSON on stdout
```

`truncate` raises `ValueError` when asked to shorten below three
characters. `print_json` accepts dataclasses and dates, escapes `<`, `>`
and `&`, and raises `ValueError` for data it cannot encode.

## What it does not do

The package installs no command. It does not store or generate learning
plans, does not record or time sessions, does not compute statistics or
write reports, and has no full-screen dashboard; it provides the
configuration, prompts and formatting that such a tool would be built on.