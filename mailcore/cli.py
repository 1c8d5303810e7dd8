import argparse
import logging
import sys
from pathlib import Path
from uuid import uuid4

from mailcore.adapters.factory import create_transport
from mailcore.config.loader import load_settings
from mailcore.config.models import MailSettings
from mailcore.core.entities import EmailAddress, Envelope
from mailcore.core.errors import EmailError
from mailcore.core.message import SendableEmail

logger = logging.getLogger("mailcore.cli")


def get_settings(config_path: str | None) -> MailSettings:
    if config_path is None:
        return MailSettings()
    try:
        return load_settings(Path(config_path))
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


def generate_message_id() -> str:
    return f"{uuid4().hex}@mailcore"


def handle_send(settings: MailSettings, args: argparse.Namespace) -> int:
    sender_text = args.sender or settings.default_sender
    try:
        sender = EmailAddress.parse(sender_text) if sender_text else None
        envelope = Envelope.new(sender, [EmailAddress.parse(to) for to in args.to])
    except EmailError as e:
        logger.error(f"Invalid envelope: {e}")
        return 1

    message_id = args.message_id or generate_message_id()
    transport = create_transport(settings.transport)

    if args.file == "-":
        email = SendableEmail.from_reader(envelope, message_id, sys.stdin.buffer)
        result = transport.send(email)
    else:
        path = Path(args.file)
        if not path.is_file():
            logger.error(f"Message file {path} not found.")
            return 1
        with open(path, "rb") as f:
            email = SendableEmail.from_reader(envelope, message_id, f)
            result = transport.send(email)

    if not result.ok:
        print(f"Failed to send {result.message_id}: {result.error}")
        return 1

    print(f"Sent {result.message_id} to {', '.join(result.recipients)}")
    for key, value in result.metadata.items():
        print(f"  {key}: {value}")
    return 0


def handle_check_config(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(Path(args.path))
    except (FileNotFoundError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"Configuration valid. Transport backend: {settings.transport.backend}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mailcore", description="mailcore CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # send
    send_parser = subparsers.add_parser("send", help="Send a message file")
    send_parser.add_argument("file", help="Path to the raw message, or - for stdin")
    send_parser.add_argument(
        "--to", action="append", default=[], help="Recipient (repeatable)"
    )
    send_parser.add_argument(
        "--from", dest="sender", help="Sender (defaults to config default_sender)"
    )
    send_parser.add_argument("--message-id", help="Message id (generated if omitted)")
    send_parser.add_argument("--config", help="Path to a YAML config file")

    # check-config
    check_parser = subparsers.add_parser("check-config", help="Validate a config file")
    check_parser.add_argument("path", help="Path to a YAML config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "check-config":
        return handle_check_config(args)

    settings = get_settings(args.config)
    logging.basicConfig(level=settings.logging.level)
    return handle_send(settings, args)


if __name__ == "__main__":
    sys.exit(main())
