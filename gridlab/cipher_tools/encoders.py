# cipher_tools/encoders.py
"""
Name -> (encode, decode, key fields) registry for every cipher the web
tool offers, plus the single dispatch entry point used by the API routes.
"""
from collections import namedtuple

from . import adfgvx, bifid, checkerboard, columnar_transposition, foursquare
from . import homophonic, nihilist, playfair, polybius_square, porta
from .errors import UnknownCipher

CipherSpec = namedtuple("CipherSpec", ["encode", "decode", "key_fields"])

CIPHERS = {
    "playfair":     CipherSpec(playfair.playfair_encode, playfair.playfair_decode,
                               ("square_keyword",)),
    "adfgx":        CipherSpec(adfgvx.adfgx_encode, adfgvx.adfgx_decode,
                               ("square_keyword", "trans_keyword")),
    "adfgvx":       CipherSpec(adfgvx.adfgvx_encode, adfgvx.adfgvx_decode,
                               ("square_keyword", "trans_keyword")),
    "foursquare":   CipherSpec(foursquare.foursquare_encode, foursquare.foursquare_decode,
                               ("key1", "key2")),
    "nihilist":     CipherSpec(nihilist.nihilist_encode, nihilist.nihilist_decode,
                               ("square_keyword", "key_phrase")),
    "checkerboard": CipherSpec(checkerboard.checkerboard_encode, checkerboard.checkerboard_decode,
                               ("keyword", "escape_digits")),
    "porta":        CipherSpec(porta.porta_encode, porta.porta_decode,
                               ("key",)),
    "homophonic":   CipherSpec(homophonic.homophonic_encode, homophonic.homophonic_decode,
                               ("custom_mapping",)),
    "polybius":     CipherSpec(polybius_square.polybius_encode, polybius_square.polybius_decode,
                               ("square_keyword",)),
    "columnar":     CipherSpec(columnar_transposition.columnar_encode,
                               columnar_transposition.columnar_decode,
                               ("trans_keyword",)),
    "bifid":        CipherSpec(bifid.bifid_encode, bifid.bifid_decode,
                               ("square_keyword", "period")),
}


def get_cipher(name) -> CipherSpec:
    try:
        return CIPHERS[(name or "").strip().lower()]
    except KeyError:
        raise UnknownCipher(f"Unsupported cipher: {name}")


def perform_cipher(cipher, text, keys=None, mode="encode", rng=None):
    """
    Look up ``cipher`` and run it in ``mode`` ("encode" or "decode").
    Keys the cipher does not take are ignored. ``rng`` only reaches
    the homophonic encoder.
    """
    spec = get_cipher(cipher)
    if mode not in ("encode", "decode"):
        raise ValueError(f"mode must be 'encode' or 'decode', not {mode!r}")
    kwargs = {k: v for k, v in (keys or {}).items() if k in spec.key_fields}
    if mode == "encode":
        if spec.encode is homophonic.homophonic_encode:
            kwargs["rng"] = rng
        return spec.encode(text, **kwargs)
    return spec.decode(text, **kwargs)


def render_tables(cipher, keys=None, rng=None):
    """
    Text previews of the squares/board a cipher would build from ``keys``.
    For homophonic, a truthy ``generate`` key deals a fresh random mapping
    (from ``rng``) instead of showing the custom or default one.
    """
    name = (cipher or "").strip().lower()
    get_cipher(name)
    keys = keys or {}
    square_keyword = keys.get("square_keyword", "")
    build = polybius_square.build_square
    render = polybius_square.render_square

    if name in ("playfair", "polybius", "nihilist", "bifid"):
        return {"square": render(build(square_keyword, 5))}
    if name == "adfgx":
        return {"square": render(build(square_keyword, 5), polybius_square.ADFGX)}
    if name == "adfgvx":
        return {"square": render(build(square_keyword, 6), polybius_square.ADFGVX)}
    if name == "foursquare":
        return {
            "plain": render(build("", 5)),
            "key1": render(build(keys.get("key1", ""), 5)),
            "key2": render(build(keys.get("key2", ""), 5)),
        }
    if name == "checkerboard":
        board = checkerboard.build_checkerboard(keys.get("keyword", ""), keys.get("escape_digits"))
        return {"board": checkerboard.render_checkerboard(board)}
    if name == "homophonic":
        if keys.get("generate"):
            mapping = homophonic.generate_mapping(rng)
        else:
            mapping = homophonic.build_homophones(keys.get("custom_mapping")).forward
        return {"mapping": homophonic.format_mapping(mapping)}
    return {}
