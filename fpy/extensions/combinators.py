"""
combinatory-logic primitives. each one only rearranges and calls its own
arguments. the bird names follow smullyan's "to mock a mockingbird".
"""
from functools import partial
from ..types import Any, Callable, Type, KeySelector, Comparer


def B(f: Callable, g: Callable) -> Callable:
    """bluebird: compose two unary functions, f after g"""
    return lambda x: f(g(x))


def B1(f: Callable, g: Callable) -> Callable:
    """blackbird: f after a binary g"""
    return lambda x, y: f(g(x, y))


def C(f: Callable) -> Callable:
    """cardinal: swap the two arguments of a binary function"""
    return lambda a, b: f(b, a)


flip = C


def D(f: Callable, g: Callable, h: Callable) -> Callable:
    """dovekies: preprocess each argument of a binary f separately"""
    return lambda x, y: f(g(x), h(y))


def K(a: Any) -> Callable[..., Any]:
    """kestrel: a function that ignores its arguments and returns a"""
    return lambda *_, **__: a


just = K


def K1(f: Callable, x: Any) -> Callable[..., Any]:
    """kestrel once removed: defer the call f(x)"""
    return lambda *_, **__: f(x)


def I(x: Any) -> Any:
    return x


identity = I


def V(a: Any, b: Any) -> Callable:
    """vireo: hold a pair until a binary function arrives"""
    return lambda f: f(a, b)


def S(f: Callable, g: Callable, h: Callable) -> Callable:
    """starling prime: feed x through g and h, then combine with f"""
    return lambda x: f(g(x), h(x))


def T(x: Any) -> Callable:
    """thrush: apply a function to a held value"""
    return lambda f: f(x)


def W(f: Callable) -> Callable:
    """warbler: duplicate the argument"""
    return lambda x: f(x, x)


def WS(f: Callable) -> Callable:
    """warbler over a spread argument list"""
    return lambda xs: f(*xs, *xs)


def Q(f: Callable, g: Callable) -> Callable:
    """queer bird: g after f"""
    return lambda x: g(f(x))


def N(cls: Type) -> Callable[[Any], Any]:
    return lambda x: cls(x)


def spread(f: Callable) -> Callable:
    return lambda xs: f(*xs)


def unspread(f: Callable) -> Callable:
    return lambda *xs: f(xs)


def tap(f: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """run f for its side effect and pass the argument through"""
    def tapped(x):
        f(x)
        return x
    return tapped


def pipe(x: Any, *fs: Callable) -> Any:
    """thread x through fs from left to right"""
    for f in fs:
        x = f(x)
    return x


def arrow(*fs: Callable) -> Callable:
    """left to right composition, pipe without the value"""
    return lambda x: pipe(x, *fs)


def compose(*fs: Callable) -> Callable:
    """right to left composition"""
    return arrow(*reversed(fs))


def curry(f: Callable[[Any, Any], Any]) -> Callable[[Any], Callable]:
    return lambda a: lambda b: f(a, b)


def by(*keys: KeySelector) -> Comparer:
    """
    comparator over several keys, for use with functools.cmp_to_key.
    the first key that differs decides.
    """
    def compare(a, b) -> int:
        for key in keys:
            ka, kb = key(a), key(b)
            if ka == kb:
                continue
            return -1 if ka < kb else 1
        return 0
    return compare


do_nothing = K(False)


def waterfall(*fs: Callable) -> None:
    """
    continuation-passing chain. every step receives `next` as its first argument
    and calls it with whatever the following step should receive.
    """
    steps = list(fs)
    position = 0

    def advance(*xs):
        nonlocal position
        position += 1
        step = steps[position] if position < len(steps) else do_nothing
        return step(advance, *xs)

    if steps:
        steps[0](advance)


def bind(f: Callable) -> Callable[[Any], Callable]:
    """bind the receiver of an unbound method: bind(list.append)(xs)(1)"""
    return lambda x: partial(f, x)
