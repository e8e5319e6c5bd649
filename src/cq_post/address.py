"""
# Words and Letter Addresses

A line of G-code (command block) is formed by words. A word is a letter address followed by a number.
```
 G 01 X12.5 F600
⌊ ⌋  letter address
⌊   ⌋  word (command)
      ⌊     ⌋  word (variable)
⌊              ⌋  command block
```

Here every word is modelled as a `Token`. A token knows its letter address (prefix), how to format itself
and where its state lives. The state of a token is held in a `Scalar`, a value cell with a staged value
and a committed value. The staged value is what the next line would contain, the committed value is what
the controller was last told. Comparing the two tells whether the word needs to be repeated.

Command tokens of the same modal group share one `Scalar`. Activating a member writes its code into the
shared cell, so activating G91 after G90 is detected as a change of the distance mode:
```
distance = Scalar()
G90 = command("G", 90, EmitPolicy.IF_CHANGED, integer_formatter(), distance)
G91 = command("G", 91, EmitPolicy.IF_CHANGED, integer_formatter(), distance)
```

Commands without a cell (G0, G1, G94, ...) carry no modal memory and always report a change.
Variables (X, Y, Z, F, S, T) own a private cell holding the caller supplied value.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from cq_post.common import EmitPolicy, TokenKind
from cq_post.utils import round_half_up

TokenFormatter = Callable[["Token"], Optional[str]]


class Scalar:
    staged: float | None
    committed: float | None
    decimals: int | None

    def __init__(
        self,
        decimals: int | None = None,
        staged: float | None = None,
        committed: float | None = None,
    ):
        self.decimals = decimals
        self.staged = staged
        self.committed = committed

    def __repr__(self):
        return f"{self.__class__.__name__}(staged={self.staged!r}, committed={self.committed!r})"

    def set(self, value: float | None) -> Scalar:
        if value is not None and self.decimals is not None:
            value = round_half_up(value, self.decimals)
        self.staged = value
        return self

    def get(self) -> float | None:
        return self.staged

    def commit(self) -> None:
        self.committed = self.staged

    def reset(self) -> None:
        """Forget what was committed, the next commit is always a change"""
        self.committed = None

    def changed(self) -> bool:
        return self.staged != self.committed


class Token:
    prefix: str
    code: float
    kind: TokenKind
    policy: EmitPolicy
    formatter: TokenFormatter
    value: Scalar | None

    def __init__(
        self,
        prefix: str,
        code: float,
        kind: TokenKind,
        policy: EmitPolicy,
        formatter: TokenFormatter,
        value: Scalar | None = None,
    ):
        self.prefix = prefix
        self.code = code
        self.kind = kind
        self.policy = policy
        self.formatter = formatter
        self.value = value

    def __repr__(self):
        if self.kind == TokenKind.COMMAND:
            return f"{self.__class__.__name__}({self.prefix}{self.code:g})"
        return f"{self.__class__.__name__}({self.prefix}={self.get()!r})"

    def __str__(self):
        text = self.format()
        return "" if text is None else text

    @property
    def is_command(self) -> bool:
        return self.kind == TokenKind.COMMAND

    def same_as(self, other: Token) -> bool:
        """Tokens are the same word when both prefix and code match"""
        return self.prefix == other.prefix and self.code == other.code

    def set(self, value: float | None) -> Token:
        # A missing value keeps whatever was staged before
        if self.value is not None and value is not None:
            self.value.set(value)
        return self

    def get(self) -> float | None:
        if self.value is not None:
            return self.value.get()
        return None

    def output_value(self) -> float | None:
        if self.is_command:
            return self.code
        return self.get()

    def commit(self) -> None:
        if self.value is not None:
            self.value.commit()

    def reset(self) -> None:
        if self.value is not None:
            self.value.reset()

    def changed(self) -> bool:
        if self.value is not None:
            return self.value.changed()
        return True

    def format(self) -> str | None:
        return self.formatter(self)


def command(
    prefix: str,
    code: float,
    policy: EmitPolicy,
    formatter: TokenFormatter,
    value: Scalar | None = None,
) -> Token:
    return Token(prefix, code, TokenKind.COMMAND, policy, formatter, value)


def commands(
    prefix: str,
    codes: Iterable[float],
    policy: EmitPolicy,
    formatter: TokenFormatter,
    value: Scalar | None = None,
) -> dict[str, Token]:
    """
    Create one command per code, keyed by the word (e.g. "G90").
    When a value is given all the commands share it and form a modal group.
    """
    return {
        f"{prefix}{code:g}": command(prefix, code, policy, formatter, value)
        for code in codes
    }


def variable(
    prefix: str,
    policy: EmitPolicy,
    formatter: TokenFormatter,
    value: Scalar | None = None,
) -> Token:
    if value is None:
        value = Scalar(decimals=3)
    return Token(prefix, 0, TokenKind.VARIABLE, policy, formatter, value)


def variables(
    prefixes: Iterable[str],
    policy: EmitPolicy,
    formatter: TokenFormatter,
    decimals: int | None = 3,
) -> dict[str, Token]:
    """Create one variable per prefix, each with its own value"""
    return {
        prefix: variable(prefix, policy, formatter, Scalar(decimals))
        for prefix in prefixes
    }
