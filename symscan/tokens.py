"""Token kinds of the scanner and the text lines it prints for them."""

from __future__ import annotations

from enum import IntEnum


class TokenType(IntEnum):
    """Token numbers returned by the scanner, in their fixed order."""

    TEOF = 0
    TCONST = 1
    TELSE = 2
    TIF = 3
    TINT = 4
    TFLOAT = 5
    TCHAR = 6
    TRETURN = 7
    TVOID = 8
    TWHILE = 9
    TPLUS = 10
    TMINUS = 11
    TMUL = 12
    TDIV = 13
    TMOD = 14
    TASSIGN = 15
    TEQUAL = 16
    TNOTEQU = 17
    TLESS = 18
    TGREAT = 19
    TLESSE = 20
    TGREATE = 21
    TNOT = 22
    TAND = 23
    TOR = 24
    TINC = 25
    TDEC = 26
    TADDASSIGN = 27
    TSUBASSIGN = 28
    TMULASSIGN = 29
    TDIVASSIGN = 30
    TMODASSIGN = 31
    TIDENT = 32
    TINTNUM = 33
    TFLOATNUM = 34
    TSTRING = 35
    TDOT = 36
    TCOMMA = 37
    TSEMI = 38
    TLPAREN = 39
    TRPAREN = 40
    TLSQUARE = 41
    TRSQUARE = 42
    TLBRACE = 43
    TRBRACE = 44
    TERROR = 45


_ERROR_MESSAGES = {
    1: "long identifier ({token})",
    2: "Invalid character ({token})",
    3: "Overflow",
    4: "Start with digit ({token})",
}


def format_error(err_num: int, lineno: int, token: str) -> str:
    """Return the scanner's error line for error code ``err_num``."""
    template = _ERROR_MESSAGES.get(err_num, "Unknown Error")
    return f"{lineno}\tERROR - {template.format(token=token)}"


def token_header() -> str:
    """Return the column header printed before the token listing."""
    return "Line\tToken type\tST-index\tToken"


def format_token_line(lineno: int, token_type: TokenType | int, text: str) -> str:
    """Return one listing line; short token names get an extra tab to keep columns aligned."""
    name = TokenType(token_type).name
    tabs = "\t\t" if len(name) < 8 else "\t"
    return f"{lineno}\t{name}{tabs}\t\t{text}"