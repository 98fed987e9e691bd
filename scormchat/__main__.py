#!/usr/bin/env python3
"""
scormchat CLI Entry Point

Build, extract and serve SCORM packages for local testing.
"""

import os
import sys
import json
import argparse
from pathlib import Path
from typing import List, Optional

from scormchat.config.builder import BuilderSettings
from scormchat.config.environments import get_config
from scormchat.errors import ScormChatError
from scormchat.utils.logging import setup_logging, CURRENT_TOPIC

TOPIC_ENV_VARS = ("SCORM_TOPIC", "npm_config_topic")


def default_topic() -> Optional[str]:
    for name in TOPIC_ENV_VARS:
        if os.getenv(name):
            return os.environ[name]
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scormchat", description="SCORM package build and test tooling",
                                     allow_abbrev=False)
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Builder project root (default: $SCORM_BUILDER_ROOT or the current directory)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("build", "Run the packaging step, forwarding all arguments"),
        ("test-topic", "Dev build, extract the newest package, then serve it"),
    ):
        sub = subparsers.add_parser(name, help=help_text, allow_abbrev=False)
        sub.add_argument(
            "--topic",
            default=default_topic(),
            help="Topic to build (default: $SCORM_TOPIC or $npm_config_topic)"
        )

    subparsers.add_parser("extract", help="Extract the newest package into the test directory")

    serve = subparsers.add_parser("serve", help="Serve the test directory over HTTP")
    serve.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: 8080)")

    config = subparsers.add_parser("config", help="Print the chat backend config for an environment")
    config.add_argument("--env", default=None, help="Environment name (default: $APP_ENV or development)")

    return parser


def forwarded_args(topic: Optional[str], extra: List[str]) -> List[str]:
    """Arguments handed to the packaging step, with the topic first"""
    return (["--topic", topic] if topic else []) + list(extra)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the scormchat CLI."""
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    if extra and args.command not in ("build", "test-topic"):
        parser.error(f"unrecognized arguments: {' '.join(extra)}")

    setup_logging(level="DEBUG" if args.debug else "INFO")

    topic = getattr(args, "topic", None)
    token = CURRENT_TOPIC.set(topic)

    try:
        settings = BuilderSettings.from_env()
        if args.root is not None:
            settings = settings.model_copy(update={"root_dir": args.root})

        if args.command == "build":
            from scormchat.tooling.build import forward_build
            return forward_build(settings, forwarded_args(topic, extra), topic=topic)

        if args.command == "test-topic":
            from scormchat.tooling.pipeline import run_test_topic
            run_test_topic(settings, forwarded_args(topic, extra), topic=topic)
            return 0

        if args.command == "extract":
            from scormchat.tooling.extract import TopicExtractor
            TopicExtractor.from_settings(settings).extract_latest()
            print("\n🎉 Extraction completed successfully!")
            return 0

        if args.command == "serve":
            from scormchat.server.app import ScormTestServer
            ScormTestServer(settings).run(host=args.host, port=args.port)
            return 0

        if args.command == "config":
            print(json.dumps(get_config(args.env).model_dump(), indent=2))
            return 0

    except (ScormChatError, ValueError, OSError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    finally:
        CURRENT_TOPIC.reset(token)

    parser.error(f"unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
