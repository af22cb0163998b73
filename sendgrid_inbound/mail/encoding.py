"""
Byte-encoding repair for SendGrid Inbound Parse text fields.

SendGrid forwards each text part in whatever charset the sending client
used and only reports that charset on the side (the ``charsets`` field),
so by the time the fields reach us the bytes may or may not be UTF-8.
Every top-level text value is run through :func:`to_utf8` once, before
any other field is interpreted.
"""

FALLBACK_ENCODING = "iso-8859-1"


def to_utf8(value):
    """
    Decode ``value`` as UTF-8, falling back to ISO-8859-1.

    ISO-8859-1 maps every byte to exactly one code point, so the fallback
    cannot fail. A ``str`` is assumed to be decoded already and is returned
    unchanged.
    """
    if isinstance(value, str):
        return value
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError:
        return value.decode(FALLBACK_ENCODING)


def repair_params(params: dict) -> dict:
    """
    Return a copy of ``params`` with every text value decoded to ``str``.

    Uploaded files and ``None`` values are carried over untouched.
    """
    return {
        key: to_utf8(value) if isinstance(value, (bytes, str)) else value
        for key, value in params.items()
    }
