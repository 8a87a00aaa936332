from typing import Dict, Iterator, Optional

from paris.values import Value


class Environment:
    """Flat global mapping from binding names to values.

    Paris has no functions of its own and therefore no nested scopes: a
    program runs against exactly one of these, and later bindings simply
    overwrite earlier ones.
    """
    def __init__(self, values: Optional[Dict[str, Value]] = None):
        self.values: Dict[str, Value] = dict(values) if values else {}

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get(self, name: str) -> Optional[Value]:
        return self.values.get(name)

    def set(self, name: str, value: Value):
        self.values[name] = value

    def names(self):
        return sorted(self.values)
