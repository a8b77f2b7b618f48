# cipher_tools/bifid.py
from .errors import InvalidKeyLength
from .polybius_square import AZ25, build_square, clean_ciphertext, clean_text, from_coordinate, to_coordinate


def _period(period):
    try:
        period = int(period)
    except (TypeError, ValueError):
        raise InvalidKeyLength(f"Bifid period must be a whole number, got {period!r}")
    if period < 0:
        raise InvalidKeyLength("Bifid period cannot be negative")
    return period


def _blocks(letters, period):
    if period == 0:
        return [letters] if letters else []
    return [letters[i:i + period] for i in range(0, len(letters), period)]


def bifid_encode(text, square_keyword="", period=5):
    period = _period(period)
    square = build_square(square_keyword, 5)
    out = []
    for block in _blocks(clean_text(text), period):
        coords = [to_coordinate(square, ch) for ch in block]
        line = [r for r, _ in coords] + [c for _, c in coords]
        out.extend(from_coordinate(square, line[i], line[i + 1]) for i in range(0, len(line), 2))
    return "".join(out)


def bifid_decode(cipher, square_keyword="", period=5):
    period = _period(period)
    square = build_square(square_keyword, 5)
    letters = clean_ciphertext((cipher or "").upper().replace("J", "I"), AZ25)
    out = []
    for block in _blocks(letters, period):
        line = []
        for ch in block:
            line.extend(to_coordinate(square, ch))
        rows, cols = line[:len(block)], line[len(block):]
        out.extend(from_coordinate(square, r, c) for r, c in zip(rows, cols))
    return "".join(out)
