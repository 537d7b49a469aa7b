r"""
'    ________________  __
'   / ____/ __ \ \/ /
'  / /_  / /_/ /\  /
' / __/ / ____/ / /
'/_/   /_/     /_/
"""

# configure the package logger before anything logs
from .logger import logger, setup_logger
from .config import Settings, settings
from .errors import FpyError, NotASequence, Rejected

# expose the iteration protocol
from .protocol import (
    SeqKind, STOP, kind_of, is_iterable, is_restartable, iter_, next_, len_, is_empty
)

# expose supporting data classes
from .types import Range
from .duad import Duad

# expose the main class and its factories
from .enumerable import Seq
from .factories import (
    from_iterable,
    from_generator,
    from_range,
    naturals_seq,
    repeat,
    empty,
    P,
)

from .extensions.combinators import (
    B, B1, C, flip, D, K, just, K1, I, identity, V, S, T, W, WS, Q, N,
    spread, unspread, tap, pipe, arrow, compose, curry, by, do_nothing, waterfall, bind,
)
from .extensions.predicates import (
    not_, and_, or_, AND, OR, strict_equal, is_, isnt, like, is_none, defined, instance,
    equal, between, cbetween, gt, gte, lt, lte, divisible, inside, outside, has, hasnt,
    has_one,
)
from .extensions.control import (
    ifelse, when, maybeor, maybe, nothing, success, failure, trycatch, valmap, cond,
    attempt, reject, assert_, print_,
)
from .extensions.arithmetic import (
    add, addr, pow_, mult, div, probability, percentage, randint, clamp, relative,
    ceil, floor, minmax, plus_mod, rollover, signum,
)
from .extensions.accessors import (
    get, get_from, get_many, pluck, set_, change, update, object_map, object_filter,
    first, second, last, head, tail, slice_, swap, pick, construct,
    array_map, array_filter, array_splice, array_take, array_get, array_push,
    join, sort, reverse,
)
from .extensions.lazy import (
    map_, filter_, limit, flatten, enumerate_, scanl, scanr, unshift, append,
    combinations, combinations_fn, naturals, seq, map_match, side_effect, ungroup,
)
from .extensions.reducers import (
    foldl, foldr, sum_, average, optimise, maximum, minimum, find, find_index,
    every, some, early, each, union,
)
from .extensions.grouping import group, partition, count, objectify, find_many
from .extensions.strings import (
    split, trim, startswith, endswith, startswith_any, endswith_any, str_,
)
from .extensions.timing import (
    sleep, next_tick, then, pcatch, batch, CacheState, Cached, cache, benchmark,
    Looper, Timer, debounce,
)

# define what `import *` does
__all__ = [
    # ambient
    "logger", "setup_logger", "Settings", "settings",
    "FpyError", "NotASequence", "Rejected",
    # protocol
    "SeqKind", "STOP", "kind_of", "is_iterable", "is_restartable", "iter_", "next_",
    "len_", "is_empty",
    # data
    "Range", "Duad",
    # seq
    "Seq", "from_iterable", "from_generator", "from_range", "naturals_seq", "repeat",
    "empty", "P",
    # combinators
    "B", "B1", "C", "flip", "D", "K", "just", "K1", "I", "identity", "V", "S", "T",
    "W", "WS", "Q", "N", "spread", "unspread", "tap", "pipe", "arrow", "compose",
    "curry", "by", "do_nothing", "waterfall", "bind",
    # predicates
    "not_", "and_", "or_", "AND", "OR", "strict_equal", "is_", "isnt", "like",
    "is_none", "defined", "instance", "equal", "between", "cbetween", "gt", "gte",
    "lt", "lte", "divisible", "inside", "outside", "has", "hasnt", "has_one",
    # control
    "ifelse", "when", "maybeor", "maybe", "nothing", "success", "failure",
    "trycatch", "valmap", "cond", "attempt", "reject", "assert_", "print_",
    # arithmetic
    "add", "addr", "pow_", "mult", "div", "probability", "percentage", "randint",
    "clamp", "relative", "ceil", "floor", "minmax", "plus_mod", "rollover", "signum",
    # accessors
    "get", "get_from", "get_many", "pluck", "set_", "change", "update", "object_map",
    "object_filter", "first", "second", "last", "head", "tail", "slice_", "swap",
    "pick", "construct", "array_map", "array_filter", "array_splice", "array_take",
    "array_get", "array_push", "join", "sort", "reverse",
    # lazy
    "map_", "filter_", "limit", "flatten", "enumerate_", "scanl", "scanr",
    "unshift", "append", "combinations", "combinations_fn", "naturals", "seq",
    "map_match", "side_effect", "ungroup",
    # reducers
    "foldl", "foldr", "sum_", "average", "optimise", "maximum", "minimum", "find",
    "find_index", "every", "some", "early", "each", "union",
    "group", "partition", "count", "objectify", "find_many",
    # strings
    "split", "trim", "startswith", "endswith", "startswith_any", "endswith_any", "str_",
    # timing
    "sleep", "next_tick", "then", "pcatch", "batch", "CacheState", "Cached", "cache",
    "benchmark", "Looper", "Timer", "debounce",
]
