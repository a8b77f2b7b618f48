# cipher_tools/foursquare.py
from .digraphs import foursquare_decrypt_digraph, foursquare_encrypt_digraph, pairs
from .errors import MalformedCiphertext, require_key
from .polybius_square import AZ25, build_square, clean_ciphertext, clean_text

FILLER = "X"


def _squares(key1, key2):
    plain = build_square("", 5)
    c1 = build_square(require_key(key1, "key1"), 5)
    c2 = build_square(require_key(key2, "key2"), 5)
    return plain, c1, c2


def foursquare_encode(text, key1, key2):
    plain, c1, c2 = _squares(key1, key2)
    letters = clean_text(text)
    if len(letters) % 2:
        letters += FILLER
    out = []
    for a, b in pairs(letters):
        out.extend(foursquare_encrypt_digraph(plain, c1, c2, a, b))
    return "".join(out)


def foursquare_decode(cipher, key1, key2):
    plain, c1, c2 = _squares(key1, key2)
    letters = clean_ciphertext((cipher or "").upper().replace("J", "I"), AZ25)
    if len(letters) % 2:
        raise MalformedCiphertext("Four-square ciphertext has an odd number of letters")
    out = []
    for a, b in pairs(letters):
        out.extend(foursquare_decrypt_digraph(plain, c1, c2, a, b))
    return "".join(out)
