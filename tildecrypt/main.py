# TILDECRYPT COMMAND LINE ->

import json
import sys

import colorama

colorama.just_fix_windows_console()

from .config import CodecConfig
from .errors import CodecError
from .processor import Mode, TextProcessor

_MODE_COLORS = {
    Mode.ENCRYPT: colorama.Fore.GREEN,
    Mode.DECRYPT: colorama.Fore.YELLOW,
}


def _read_text(value):
    if value is None or value == "-":
        data = sys.stdin.read()
        return data[:-1] if data.endswith("\n") else data
    return value


def _build_processor(passphrase):
    if passphrase:
        return TextProcessor(CodecConfig(CodecConfig.resolve_passphrase(passphrase)))
    return TextProcessor(CodecConfig.from_env())


def _report_mode(mode: Mode, quiet: bool) -> None:
    if quiet:
        return
    color = _MODE_COLORS.get(mode, "")
    print(f"{color}[{mode.value}]{colorama.Style.RESET_ALL}", file=sys.stderr)


def cli(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog="tildecrypt", description="Tilde text encrypt/decrypt codec")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("process", "Decrypt '~' ciphertext, otherwise encrypt (automatic mode)"),
        ("encrypt", "Always encrypt the input"),
        ("decrypt", "Always decrypt the input; fail if it is not valid ciphertext"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "text",
            nargs="?",
            default=None,
            help="Input text (omit or '-' to read stdin)"
        )
        sub.add_argument(
            "-p", "--passphrase",
            default="",
            help="Passphrase text or path (leave blank to use TILDECRYPT_PASSPHRASE or the default)"
        )
        sub.add_argument(
            "--json",
            dest="as_json",
            action="store_true",
            help="Print {\"result\", \"mode\"} as JSON"
        )
        sub.add_argument(
            "-q", "--quiet",
            action="store_true",
            help="Do not print the mode tag to stderr"
        )

    args = parser.parse_args(argv)

    try:
        processor = _build_processor(args.passphrase)
    except ValueError as exc:
        print(f"{colorama.Fore.RED}Invalid passphrase: {exc}{colorama.Style.RESET_ALL}", file=sys.stderr)
        return 1
    text = _read_text(args.text)

    if args.command == "process":
        outcome = processor.process(text)
        result, mode = outcome.result, outcome.mode
    elif args.command == "encrypt":
        result, mode = processor.encrypt_text(text), Mode.ENCRYPT
    else:
        try:
            result, mode = processor.decrypt_text(text), Mode.DECRYPT
        except CodecError as exc:
            print(f"{colorama.Fore.RED}Decryption failed: {exc}{colorama.Style.RESET_ALL}", file=sys.stderr)
            return 1

    if args.as_json:
        print(json.dumps({"result": result, "mode": mode.value}))
    else:
        _report_mode(mode, args.quiet)
        print(result)
    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
