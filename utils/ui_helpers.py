import os
import json
from typing import Any
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_record(record: Any) -> None:
    """Print a book or member according to the current output mode.
    - plain: the record's display form, e.g. '1: Dune - Herbert'
    - json: the record's fields as a JSON object
    - rich: a Rich panel listing each field
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(record.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        lines = [f"[bold]{key.title()}:[/] {escape(str(value))}" for key, value in record.to_dict().items()]
        _console.print(Panel.fit("\n".join(lines), title=type(record).__name__, border_style="green"))
    else:
        print(str(record))
