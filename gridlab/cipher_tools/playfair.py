# cipher_tools/playfair.py
from .digraphs import decrypt_digraph, encrypt_digraph, pairs
from .errors import MalformedCiphertext
from .polybius_square import AZ25, build_square, clean_ciphertext, clean_text

FILLER = "X"
ALT_FILLER = "Q"  # used when the doubled letter is X itself


def _filler_for(letter):
    return ALT_FILLER if letter == FILLER else FILLER


def insert_fillers(text):
    """
    Split up doubled letters anywhere in the text:
      HELLO   -> HELXLO
      BALLOON -> BALXLOXON
    """
    out = []
    for i, ch in enumerate(text):
        out.append(ch)
        if i + 1 < len(text) and text[i + 1] == ch:
            out.append(_filler_for(ch))
    return "".join(out)


def prepare_playfair_text(text):
    prepared = insert_fillers(clean_text(text))
    if len(prepared) % 2:
        prepared += _filler_for(prepared[-1])
    return prepared


def playfair_encode(text, square_keyword=""):
    square = build_square(square_keyword, 5)
    out = []
    for a, b in pairs(prepare_playfair_text(text)):
        out.extend(encrypt_digraph(square, a, b))
    return "".join(out)


def playfair_decode(cipher, square_keyword=""):
    """
    Returns the prepared plaintext: inserted fillers stay in place since a
    genuine X cannot be told apart from a filler.
    """
    square = build_square(square_keyword, 5)
    letters = clean_ciphertext((cipher or "").upper().replace("J", "I"), AZ25)
    if len(letters) % 2:
        raise MalformedCiphertext("Playfair ciphertext has an odd number of letters")
    out = []
    for a, b in pairs(letters):
        out.extend(decrypt_digraph(square, a, b))
    return "".join(out)
