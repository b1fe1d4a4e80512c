# // filename: braille_service.py

import argparse
import logging
import sys

from braille_core import BrailleLogic, CHUNK_WIDTH, Symbol

logger = logging.getLogger(__name__)


class TableFormatError(ValueError):
    pass


def parse_encoding_line(line):
    """Parse one ``"<char> <encoding>"`` table line into a Symbol.

    The character is the first character of the line and may itself be a
    space; the encoding is the first token after it.
    """
    line = line.rstrip("\r\n")
    if not line:
        raise TableFormatError("empty encoding line")
    character = line[0]
    tokens = line[1:].split()
    if not tokens:
        raise TableFormatError(f"no encoding for character {character!r}")
    return Symbol(character, tokens[0])


def format_tree(root):
    lines = []
    _format_node(root, "", False, True, lines)
    return "\n".join(lines) + "\n"


def _format_node(node, indent, is_right, is_root, lines):
    if is_root:
        prefix = indent + "+--- "
    else:
        prefix = indent + ("|+R- " if is_right else "--L- ")

    if node is None:
        lines.append(prefix + "null")
        return

    symbol = node.symbol
    if symbol.has_character():
        lines.append(f"{prefix}{symbol.character} -> {symbol.encoding}")
    elif symbol.encoding == "":
        lines.append(prefix + ' "" ')
    else:
        lines.append(f"{prefix}{symbol.encoding} ")

    if node.is_leaf():
        return

    indent += "|    " if is_right else "     "
    _format_node(node.right, indent, True, False, lines)
    _format_node(node.left, indent, False, False, lines)


class BrailleService:
    def __init__(self, chunk_width=CHUNK_WIDTH):
        if chunk_width < 1:
            raise ValueError(f"chunk width must be positive, got {chunk_width}")
        self.logic = BrailleLogic()
        self.chunk_width = chunk_width

    def load_table_lines(self, lines):
        lines = iter(lines)
        header = next((line for line in lines if line.strip()), None)
        if header is None:
            raise TableFormatError("missing character count")
        try:
            count = int(header.strip())
        except ValueError:
            raise TableFormatError(f"invalid character count {header.strip()!r}") from None
        if count < 0:
            raise TableFormatError(f"negative character count {count}")

        # Parse the whole table first so a bad line leaves the tree untouched
        symbols = []
        for i in range(count):
            line = next(lines, None)
            if line is None:
                raise TableFormatError(f"expected {count} encodings, found {i}")
            symbols.append(parse_encoding_line(line))
        self.logic.build(symbols)
        return count

    def load_table(self, path):
        with open(path, encoding="utf-8") as f:
            count = self.load_table_lines(f)
        logger.info("loaded %d encodings from %s", count, path)
        return count

    def translate(self, bits):
        return self.logic.decode(bits.strip(), self.chunk_width)

    def translate_file(self, path):
        with open(path, encoding="utf-8") as f:
            bits = f.read()
        return self.translate(bits)

    def encode(self, text):
        return self.logic.encode(text)

    def encoding_of(self, character):
        return self.logic.find_encoding(character)

    def encodings_starting_with(self, prefix):
        return self.logic.symbols_with_prefix(prefix)

    def delete(self, character):
        self.logic.delete(character)

    def format_tree(self):
        return format_tree(self.logic.root)

    def print_tree(self, out=None):
        (out or sys.stdout).write(self.format_tree())


def main(argv=None):
    parser = argparse.ArgumentParser(description="Translate L/R braille encodings using an encoding tree")
    parser.add_argument("table", help="encoding table: a count line, then '<char> <encoding>' lines")
    parser.add_argument("bitstream", nargs="?", help="file holding the L/R stream to translate")
    parser.add_argument("--chunk-width", type=int, default=CHUNK_WIDTH, help="tokens per character (default: %(default)s)")
    parser.add_argument("--delete", action="append", default=[], metavar="CHAR", help="delete a character before translating")
    parser.add_argument("--encoding-of", metavar="CHAR", help="print the encoding of a character")
    parser.add_argument("--prefix", help="list characters whose encoding starts with PREFIX")
    parser.add_argument("--print-tree", action="store_true", help="dump the tree")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.chunk_width < 1:
        parser.error("--chunk-width must be positive")

    service = BrailleService(chunk_width=args.chunk_width)
    try:
        service.load_table(args.table)
        for character in args.delete:
            service.delete(character)
        if args.encoding_of is not None:
            encoding = service.encoding_of(args.encoding_of)
            print(encoding if encoding is not None else "not found")
        if args.prefix is not None:
            for symbol in service.encodings_starting_with(args.prefix):
                print(f"{symbol.character} {symbol.encoding}")
        if args.print_tree:
            service.print_tree()
        if args.bitstream is not None:
            print(service.translate_file(args.bitstream))
    except (TableFormatError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
