"""
Type signature → simple (unqualified, readable) type name.

Host models commonly report declared types as JDT-style signatures:

    Z                              boolean
    [I                             int[]
    QString;                       String
    Ljava.util.Map<QString;QInteger;>;  Map<String, Integer>
    QList<+QNumber;>;              List<? extends Number>
    TT;                            T

Text that is not a signature (already a simple name such as "int" or
"List<String>") is returned unchanged.
"""

from __future__ import annotations

from fieldtemplates.exceptions import SignatureError

__all__ = ["signature_simple_name", "looks_like_signature"]

_BASE_TYPES = {
    "B": "byte",
    "C": "char",
    "D": "double",
    "F": "float",
    "I": "int",
    "J": "long",
    "S": "short",
    "Z": "boolean",
    "V": "void",
}

_CLASS_MARKERS   = "LQ"
_TYPE_VAR_MARKER = "T"
_SEGMENT_SEPS    = ".$/"


def looks_like_signature(text: str) -> bool:
    if text in _BASE_TYPES or text.startswith("["):
        return True
    return (
        len(text) > 2
        and text[0] in _CLASS_MARKERS + _TYPE_VAR_MARKER
        and text.endswith(";")
        and " " not in text
    )


def signature_simple_name(signature: str) -> str:
    """
    Render a type signature as its simple name.

    Raises:
        SignatureError: the text looks like a signature but is malformed.
    """
    text = signature.strip()
    if not looks_like_signature(text):
        return text

    reader = _SignatureReader(text)
    name = reader.read_type()
    if not reader.at_end():
        raise SignatureError(f"Trailing characters in type signature: {signature!r}")
    return name


class _SignatureReader:
    """Single-pass recursive-descent reader over one signature string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _peek(self) -> str:
        return "" if self.at_end() else self._text[self._pos]

    def _next(self) -> str:
        if self.at_end():
            raise SignatureError(f"Truncated type signature: {self._text!r}")
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def read_type(self) -> str:
        ch = self._next()
        if ch in _BASE_TYPES:
            return _BASE_TYPES[ch]
        if ch == "[":
            return self.read_type() + "[]"
        if ch in _CLASS_MARKERS:
            return self._read_class()
        if ch == _TYPE_VAR_MARKER:
            return self._read_type_variable()
        raise SignatureError(
            f"Unexpected {ch!r} at offset {self._pos - 1} in type signature {self._text!r}"
        )

    def _read_class(self) -> str:
        # Only the innermost segment (and its type arguments) survives
        segment = ""
        args = ""
        while True:
            ch = self._next()
            if ch == ";":
                break
            if ch in _SEGMENT_SEPS:
                segment, args = "", ""
            elif ch == "<":
                args = f"<{self._read_type_args()}>"
            else:
                segment += ch
        if not segment:
            raise SignatureError(f"Empty class name in type signature: {self._text!r}")
        return segment + args

    def _read_type_variable(self) -> str:
        name = ""
        ch = self._next()
        while ch != ";":
            name += ch
            ch = self._next()
        if not name:
            raise SignatureError(f"Empty type variable in type signature: {self._text!r}")
        return name

    def _read_type_args(self) -> str:
        args: list[str] = []
        while self._peek() != ">":
            args.append(self._read_type_arg())
        self._next()
        if not args:
            raise SignatureError(f"Empty type argument list in type signature: {self._text!r}")
        return ", ".join(args)

    def _read_type_arg(self) -> str:
        ch = self._peek()
        if ch == "*":
            self._next()
            return "?"
        if ch == "+":
            self._next()
            return "? extends " + self.read_type()
        if ch == "-":
            self._next()
            return "? super " + self.read_type()
        return self.read_type()
