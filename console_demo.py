"""
Console chat demo for the carbon accounting assistant.

Runs the real classifier, extractor, dispatcher and context store in the
terminal. No network calls and no API keys.

Usage:
    python console_demo.py
    python console_demo.py --scenario calculate
    python console_demo.py --scenario learn
"""

import argparse
import uuid
from typing import Optional

from carbon_assistant.chatbot import CarbonChatbot
from carbon_assistant.config import settings
from carbon_assistant.schemas.conversation_schema import Response

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


class ConsoleSession:
    """One interactive chat session in the terminal."""

    # Pre-scripted scenarios for --scenario flag
    SCENARIOS: dict[str, list[str]] = {
        "calculate": [
            "hello",
            "calculate my carbon footprint",
            "calculate emissions for 50000 kwh and 20 employees",
            "can you recommend some tips",
            "bye",
        ],
        "learn": [
            "what is a carbon footprint",
            "Tips for a manufacturing company",
            "We want a 30% cut in 5 years",
            "thanks",
        ],
        "fallback": [
            "xyzzy plugh",
            "hey",
        ],
    }

    MAX_INPUT_LENGTH = 500

    def __init__(self, bot: Optional[CarbonChatbot] = None) -> None:
        self.bot = bot or CarbonChatbot()
        self.session_id = f"console-{uuid.uuid4().hex[:8]}"

    def bot_say(self, response: Response) -> None:
        print(f"{GREEN}{BOLD}[{settings.assistant.name}]{RESET} {GREEN}{response.text}{RESET}")
        if response.suggestions:
            print(f"{YELLOW}  Try: {' | '.join(response.suggestions)}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        self._banner(f"Scenario: {scenario}")
        for step in steps:
            print(f"\n{BLUE}[You] {RESET}{step}")
            self._process_input(step)
        self._summary(f"Scenario '{scenario}' complete.")

    def run(self) -> None:
        self._banner("Console Demo", "Type 'quit' to exit")

        while True:
            try:
                user_input = input(f"\n{BLUE}[You] {RESET}").strip()
            except EOFError:
                break
            if not user_input:
                continue
            if user_input.lower() in ("quit", "exit", "q"):
                break

            if len(user_input) > self.MAX_INPUT_LENGTH:
                print(f"{RED}That was quite long. Could you keep it brief?{RESET}")
                continue

            self._process_input(user_input)

        self._summary("Session ended.")

    def _process_input(self, text: str) -> None:
        response = self.bot.process_message(text, session_id=self.session_id)
        self.bot_say(response)

        context = self.bot.get_context(self.session_id)
        if context.intents:
            latest = context.intents[-1]
            self.system_log(f"Intent: {latest.name.value} ({latest.confidence:.2f})")
        if response.data and "estimate" in response.data:
            estimate = response.data["estimate"]
            self.system_log(
                f"Partial estimate: {estimate['total_tonnes']} tCO2e "
                f"(±{estimate['uncertainty']:.0%})"
            )

    def _banner(self, title: str, subtitle: str = "") -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  CARBON ASSISTANT - {title}{RESET}")
        print(f"{BOLD}  Assistant: {settings.assistant.name}{RESET}")
        if subtitle:
            print(f"{BOLD}  {subtitle}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def _summary(self, headline: str) -> None:
        context = self.bot.get_context(self.session_id)
        trace = " -> ".join(i.name.value for i in context.intents)
        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {headline}{RESET}")
        print(f"{DIM}  Intent trace: {trace or '(none)'}{RESET}")
        print(f"{DIM}  Entities remembered: {len(context.entities)}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Console chat demo")
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleSession.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    args = parser.parse_args()

    session = ConsoleSession()
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
