from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler

from deepseek_client.client import DeepSeekClient
from deepseek_client.config import load_settings
from deepseek_client.errors import ConfigurationError
from deepseek_client.results import BadResult, Failure, Success
from deepseek_client.schema import parse_completion
from deepseek_client.utils.run_log import append_outcome, init_run_log, make_run_id


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deepseek-chat")
    parser.add_argument("prompt", type=str, help="User message sent to the chat endpoint")
    parser.add_argument("--system", type=str, default=None, help="Optional system message sent before the prompt")
    parser.add_argument("--model", type=str, default=None, help="Override the configured model")
    parser.add_argument("--stream", action="store_true", help="Ask the API for a streamed answer")
    parser.add_argument("--temperature", type=float, default=None)
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="Do not write a run log (by default one line is appended to logs/run_*.jsonl)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    console = Console()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

    try:
        settings = load_settings()
    except ConfigurationError as e:
        console.print(f"[bold red]config error[/bold red]: {e}")
        if e.hint:
            console.print(f"hint: {e.hint}")
        return 2

    client = DeepSeekClient.build(settings)
    if args.system:
        client.query(args.system, role="system")
    client.query(args.prompt)
    if args.model:
        client.with_model(args.model)
    if args.stream:
        client.with_stream(True)
    if args.temperature is not None:
        client.set_temperature(args.temperature)

    try:
        result = client.run()
    finally:
        client.close()

    if not args.no_log:
        log_paths = init_run_log(settings.log_dir, make_run_id())
        append_outcome(log_paths, result, extra={"event": "chat", "model": args.model or settings.model})

    match result:
        case Success():
            completion = parse_completion(result)
            console.rule("DeepSeek")
            console.print(completion.text if completion is not None else result.content)
            if completion is not None and completion.usage is not None:
                console.print(f"[dim]tokens: {completion.usage.total_tokens}[/dim]")
            return 0
        case BadResult(response=response):
            console.print(f"[bold red]API error {response.status_code}[/bold red]")
            console.print(result.content)
            return 1
        case Failure(code=code, content=content):
            console.print(f"[bold red]request failed (code {code})[/bold red]")
            console.print(content)
            return 1
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
