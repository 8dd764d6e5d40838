"""
Layout Agent - interactive entry point.
Reads prompts from stdin and prints the resulting form state.
"""

import asyncio
import sys

from .agents.pipeline import LayoutPipeline
from .core import configure_logging, create_container, get_logger, get_settings, safe_json_dumps

logger = get_logger(__name__)

HELP = """Type a prompt to restyle the form, paste a JSON instruction, or:
  :quick   list quick actions
  :state   print the current state
  :reset   restore the default style
  :quit    exit"""


def _print_state(pipeline: LayoutPipeline) -> None:
    print(safe_json_dumps(pipeline.state.to_dict(), indent=2))


async def run(pipeline: LayoutPipeline) -> None:
    """Prompt loop; stdin is read off the event loop."""
    loop = asyncio.get_running_loop()
    print(HELP)
    _print_state(pipeline)

    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line:
            break
        command = line.strip()

        if command == ":quit":
            break
        if command == ":quick":
            for index, action in enumerate(pipeline.quick_actions, start=1):
                print(f"  {index}. {action}")
            continue
        if command == ":state":
            _print_state(pipeline)
            continue
        if command == ":reset":
            pipeline.reset()
            _print_state(pipeline)
            continue
        if command.isdigit() and 1 <= int(command) <= len(pipeline.quick_actions):
            command = pipeline.quick_actions[int(command) - 1]

        resolution = await pipeline.handle(command)
        print(f"[{resolution.outcome.value}]" + (f" {resolution.reason}" if resolution.reason else ""))
        if resolution.applied:
            _print_state(pipeline)


async def main_async() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)

    container = create_container(settings)
    pipeline = container.get(LayoutPipeline)
    try:
        await run(pipeline)
    finally:
        await pipeline.aclose()


def main() -> None:
    try:
        asyncio.run(main_async())
    except KeyboardInterrupt:
        logger.info("interrupted")


if __name__ == "__main__":
    main()
