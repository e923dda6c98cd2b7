import sys
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class ArgumentStore:
    tokens: tuple[str, ...]

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "ArgumentStore":
        return cls(tokens=tuple(str(t) for t in tokens))

    @classmethod
    def from_process(cls) -> "ArgumentStore":
        return cls.from_tokens(sys.argv)

    def has_flag(self, name: str) -> bool:
        return name in self.tokens

    def get_value(self, name: str, default: str | None = None) -> str | None:
        try:
            index = self.tokens.index(name)
        except ValueError:
            return default
        if index < len(self.tokens) - 1:
            return self.tokens[index + 1]
        return default
