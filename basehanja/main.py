#!/usr/bin/env python3
"""basehanja: Base64-style encoding over arbitrary alphabets."""

import argparse
import logging
import sys

from basehanja import registry, table
from basehanja.text import decode_text, encode_text

log = logging.getLogger(__name__)

USAGE = """Usage:
exit
enc <encoding> <text>
dec <encoding> <text>
"""


def _read_text(value):
    return sys.stdin.read() if value == "-" else value


def cmd_enc(args):
    encoding = registry.parse(args.encoding)
    if args.file:
        with open(args.file, "rb") as f:
            print(encoding.encode(f.read()))
    else:
        print(encode_text(_read_text(args.text), encoding))


def cmd_dec(args):
    encoding = registry.parse(args.encoding)
    text = _read_text(args.text).strip()
    if args.binary:
        sys.stdout.buffer.write(encoding.decode(text))
        sys.stdout.flush()
    else:
        print(decode_text(text, encoding))


def cmd_list(args):
    log.debug("registered encodings: %s", ", ".join(registry.names()))
    for e in registry.ENCODINGS:
        print(f"{e.name:<10} {e.bitcount():>2}-bit  {e.long_name}")


def cmd_table(args):
    print(table.render(table.rows()))


def _pop_arg(line):
    """Split off the first whitespace-delimited word."""
    rest = line.lstrip()
    parts = rest.split(None, 1)
    if not parts:
        return "", ""
    word = parts[0]
    return word, rest[len(word):]


def repl(stdin=None, stdout=None, stderr=None):
    """Read `enc|dec <encoding> <text>` lines until `exit` or end of input.

    The text is everything after the encoding name and one separating
    space, so leading and trailing spaces inside it are kept.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    while True:
        stderr.write(">>> ")
        stderr.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip("\n")

        command, rest = _pop_arg(line)
        if command == "exit":
            break
        if command not in ("enc", "dec"):
            stderr.write(USAGE)
            continue

        name, text = _pop_arg(rest)
        text = text[1:] if text.startswith(" ") else text
        try:
            if command == "enc":
                result = encode_text(text, name)
            else:
                result = decode_text(text, name)
        except ValueError as e:
            stderr.write(f"error: {e}\n")
            continue
        stdout.write(result + "\n")
        stdout.flush()


def cmd_repl(args):
    repl()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="basehanja",
        description="Base64-style encoding over arbitrary alphabets",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = parser.add_subparsers(dest="command")

    # enc
    p = sub.add_parser("enc", help="Encode text (or a file) into an alphabet")
    p.add_argument("encoding")
    p.add_argument("text", nargs="?", default="-", help="Text to encode (or - for stdin)")
    p.add_argument("--file", help="Encode the raw bytes of this file instead")
    p.set_defaults(func=cmd_enc)

    # dec
    p = sub.add_parser("dec", help="Decode text back to the original")
    p.add_argument("encoding")
    p.add_argument("text", help="Text to decode (or - for stdin)")
    p.add_argument("--binary", action="store_true", help="Write raw bytes to stdout")
    p.set_defaults(func=cmd_dec)

    # list
    p = sub.add_parser("list", help="List available encodings")
    p.set_defaults(func=cmd_list)

    # table
    p = sub.add_parser("table", help="Print a size comparison table (Markdown)")
    p.set_defaults(func=cmd_table)

    # repl
    p = sub.add_parser("repl", help="Interactive encode/decode loop")
    p.set_defaults(func=cmd_repl)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    if not args.command:
        parser.print_help()
        return 1

    log.debug("running %s", args.command)
    try:
        args.func(args)
    except ValueError as e:
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
