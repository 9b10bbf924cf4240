"""Cyclic redundancy check over strings of binary digits."""

import argparse
import sys

GENERATOR = "10001000000100001"
_RULE = "-" * 40
_BINARY = frozenset("01")


def _validate_bits(bits, what):
    if not bits or set(bits) - _BINARY:
        raise ValueError(f"{what} must be a non-empty string of 0s and 1s: {bits!r}")


def _validate_generator(generator):
    _validate_bits(generator, "generator")
    if len(generator) < 2 or generator[0] != "1":
        raise ValueError("generator must start with 1 and have at least two digits")


def _remainder(bits, generator):
    """Return the modulo-2 remainder of ``bits`` divided by ``generator``."""
    width = len(generator) - 1
    divisor = int(generator, 2)
    top = 1 << width
    remainder = 0
    for bit in bits:
        remainder = (remainder << 1) | (bit == "1")
        if remainder & top:
            remainder ^= divisor
    return format(remainder, f"0{width}b")


def checksum(data, generator=GENERATOR):
    """Return the CRC of ``data``: one digit fewer than ``generator``."""
    _validate_generator(generator)
    _validate_bits(data, "data")
    return _remainder(data + "0" * (len(generator) - 1), generator)


def encode(data, generator=GENERATOR):
    """Return ``data`` followed by its checksum."""
    return data + checksum(data, generator)


def has_error(codeword, generator=GENERATOR):
    """Return True if ``codeword`` does not divide evenly by ``generator``."""
    _validate_generator(generator)
    _validate_bits(codeword, "codeword")
    if len(codeword) < len(generator):
        raise ValueError("codeword is shorter than the generator")
    return "1" in _remainder(codeword, generator)


def flip_bit(codeword, position):
    """Return ``codeword`` with the digit at 1-based ``position`` inverted."""
    _validate_bits(codeword, "codeword")
    if not 1 <= position <= len(codeword):
        raise ValueError(f"position must be between 1 and {len(codeword)}")
    index = position - 1
    flipped = "1" if codeword[index] == "0" else "0"
    return codeword[:index] + flipped + codeword[index + 1:]


def _ask_int(prompt):
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def main(argv=None):
    """Compute a codeword interactively and optionally test error detection."""
    parser = argparse.ArgumentParser(
        prog="netlab-crc", description="Compute and verify a CRC checksum."
    )
    parser.add_argument(
        "-g", "--generator", default=GENERATOR, help="generating polynomial as binary digits"
    )
    args = parser.parse_args(argv)
    generator = args.generator

    data = input("\nEnter data : ").strip()
    try:
        check = checksum(data, generator)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(_RULE)
    print(f"Generating polynomial : {generator}")
    print(_RULE)
    print(f"Modified data is : {data + '0' * (len(generator) - 1)}")
    print(_RULE)
    print(f"Checksum is : {check}")
    codeword = data + check
    print(_RULE)
    print(f"Final codeword is : {codeword}")
    print(_RULE)

    if _ask_int("Test error detection 0(yes) 1(no)? : ") == 0:
        while True:
            position = _ask_int("Enter the position where error is to be inserted : ")
            if position is None:
                continue
            try:
                codeword = flip_bit(codeword, position)
            except ValueError:
                continue
            break
        print(_RULE)
        print(f"Erroneous data : {codeword}")

    if has_error(codeword, generator):
        print("\nError detected\n")
    else:
        print("\nNo error detected\n")
    print(_RULE)
    return 0


if __name__ == "__main__":
    sys.exit(main())