from ..types import *


def split(separator: Optional[str] = None) -> Callable[[str], List[str]]:
    return lambda s: s.split(separator)


def trim(s: str) -> str:
    return s.strip()


def startswith(prefix: str) -> Predicate[str]:
    return lambda s: s.startswith(prefix)


def endswith(suffix: str) -> Predicate[str]:
    return lambda s: s.endswith(suffix)


def startswith_any(prefixes: Iterable[str]) -> Predicate[str]:
    prefixes = tuple(prefixes)
    return lambda s: s.startswith(prefixes)


def endswith_any(suffixes: Iterable[str]) -> Predicate[str]:
    suffixes = tuple(suffixes)
    return lambda s: s.endswith(suffixes)


def str_(x: Any) -> str:
    return str(x)
