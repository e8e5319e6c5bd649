"""
The RS274/NGC language is based on lines of code. Each line (command block) includes words that change the internal state
of the machine and/or move the machining center. Lines of code collected in a file form a program.

Most words are modal: once the controller has been told G90, X10 or F600 it keeps that setting until told otherwise.
A well behaved post processor therefore only writes the words whose value changed since they were last written.
`LineAssembler` implements this modal suppression for one group of tokens at a time, `LineWriter` streams the resulting
lines to a file.

Rules for a group of tokens, applied in order:
- A command is always written if it is the first command seen in the session
- A command repeating the last command is only written if it is always emitted (e.g. G28)
- Any other command becomes the last command and is written if always emitted or its modal group changed
- A variable is written if always emitted or its value changed
- Every token is committed, written or not
- A line number is prepended only to non-empty lines, so suppressed lines do not consume numbers

Example with G0 and G1 stateless and X, Y suppressed when unchanged:
```
G0 X0 Y0   ->  G0 X0 Y0
G0 X0 Y5   ->  Y5
G1 X5 Y5   ->  G1 X5
G1 X5 Y5   ->
```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from cq_post.address import Token
from cq_post.common import EmitPolicy


@dataclass(frozen=True)
class LineFormatSpec:
    token_separator: str = " "
    newline: str = "\r\n"


@dataclass(frozen=True)
class LineNumberFormatSpec:
    prefix: str = "N"
    start: int = 5
    increment: int = 5


class TextStream(Protocol):
    def write(self, text: str): ...


class LineAssembler:
    line_format: LineFormatSpec
    line_number_format: LineNumberFormatSpec | None

    def __init__(
        self,
        line_format: LineFormatSpec | None = None,
        line_number_format: LineNumberFormatSpec | None = None,
    ):
        self.line_format = LineFormatSpec() if line_format is None else line_format
        self.line_number_format = line_number_format
        self._line_count = 0
        self._last_command: Token | None = None

    def __call__(self, *tokens: Token) -> str:
        return self.assemble(tokens)

    @property
    def line_number(self) -> int:
        """Number of non-empty lines assembled so far"""
        return self._line_count

    @property
    def last_command(self) -> Token | None:
        return self._last_command

    def assemble(self, tokens: Iterable[Token]) -> str:
        words = []
        for token in tokens:
            if self._emit(token):
                text = token.format()
                if text:
                    words.append(text)

        if not words:
            return ""

        line = self.line_format.token_separator.join(words)
        if self.line_number_format is not None:
            lnf = self.line_number_format
            number = lnf.start + self._line_count * lnf.increment
            line = f"{lnf.prefix}{number}{self.line_format.token_separator}{line}"
        self._line_count += 1
        return line

    def _emit(self, token: Token) -> bool:
        """Update the modal state with the token and tell whether it has to be written"""
        always = token.policy == EmitPolicy.ALWAYS

        if token.is_command:
            token.set(token.code)
            last = self._last_command
            self._last_command = token
            if last is None:
                token.commit()
                return True
            if token.same_as(last):
                token.commit()
                return always

        emit = always or token.changed()
        token.commit()
        return emit


class LineWriter:
    stream: TextStream
    line_format: LineFormatSpec

    def __init__(self, stream: TextStream, line_format: LineFormatSpec | None = None):
        self.stream = stream
        self.line_format = LineFormatSpec() if line_format is None else line_format
        self._first_line = True

    def write(self, lines: Iterable[str]) -> None:
        for line in lines:
            if line == "":
                continue
            if self._first_line:
                self._first_line = False
            else:
                self.stream.write(self.line_format.newline)
            self.stream.write(line)
