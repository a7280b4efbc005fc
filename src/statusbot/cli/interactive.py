#!/usr/bin/env python3
"""
Interactive CLI for the project status assistant

A REPL that plays the transport for one local conversation: every line typed
is delivered as a user message and the bot's replies are printed.

Usage:
    python -m statusbot.cli.interactive
    python -m statusbot.cli.interactive --show-config
"""
import argparse
import sys
import uuid

# Loads .env files and configures logging
from statusbot.app import settings
from statusbot.orchestration.orchestrator import handle_message
from statusbot.session import clear_session

EXIT_WORDS = {"exit", ":q"}


def print_banner():
    print("\n" + "=" * 60)
    print("Project Status Assistant - Interactive Mode")
    print("=" * 60)
    print("Type a message to talk to the bot, 'exit' to leave.")
    print("=" * 60 + "\n")


def print_result(result):
    for message in result.get("messages", []):
        print(f"bot> {message['text']}")
    if not result.get("success", False):
        print(f"     [{result.get('error')}] {result.get('message')}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Chat with the project status assistant")
    parser.add_argument("--conversation-id", default=None,
                        help="Conversation id (default: a fresh one)")
    parser.add_argument("--show-config", action="store_true",
                        help="Print the active configuration and exit")
    args = parser.parse_args(argv)

    if args.show_config:
        print(settings.summary())
        return 0

    conversation_id = args.conversation_id or f"console-{uuid.uuid4().hex[:8]}"
    print_banner()

    try:
        while True:
            try:
                text = input("you> ").strip()
            except EOFError:
                break
            if text.lower() in EXIT_WORDS:
                break
            if not text:
                continue
            print_result(handle_message(conversation_id, text))
    except KeyboardInterrupt:
        print()
    finally:
        clear_session(conversation_id)

    print("Goodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
