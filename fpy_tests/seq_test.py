import suite
import dgen
import numpy as np
import pandas as pd
from fpy import (
    P, from_iterable, from_generator, from_range, naturals_seq, repeat, empty,
    get, gt, lt, NotASequence,
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

sales = [
    {'region': 'north', 'product': 'tea', 'units': 12, 'price': 2.5},
    {'region': 'south', 'product': 'coffee', 'units': 4, 'price': 3.0},
    {'region': 'north', 'product': 'coffee', 'units': 7, 'price': 3.0},
    {'region': 'east', 'product': 'tea', 'units': 1, 'price': 2.5},
]

customer_schema = {
    'id': {'_qen_provider': 'counter', 'start': 100},
    'name': 'name',
    'tier': {'_qen_provider': 'choice', 'from': ['gold', 'silver', 'bronze']},
}


def gen(*xs):
    yield from xs


def inc(x):
    return x + 1


# --- factories ---

@test("factories build the expected sequences")
def test_factories():
    assert_that(from_range(3, 4).to.list() == [3, 4, 5, 6], "range of four from 3")
    assert_that(repeat('x', 3).to.list() == ['x', 'x', 'x'], "repeated item")
    assert_that(empty().to.list() == [], "empty")
    assert_that(naturals_seq(1).limit(3).to.list() == [1, 2, 3], "unbounded naturals")
    assert_that(P is from_iterable, "P alias")


@test("from_iterable validates its argument at once")
def test_from_iterable_rejects():
    with assert_raises(NotASequence):
        from_iterable(7)


# --- restartability ---

@test("seqs over containers restart")
def test_restartable_container():
    doubled = P([1, 2, 3]).map(lambda x: x * 2)
    assert_that(doubled.to.list() == [2, 4, 6], "first pass")
    assert_that(doubled.to.list() == [2, 4, 6], "second pass sees the same values")
    assert_that(doubled.restartable, "reported as restartable")


@test("seqs over a single iterator are single-pass")
def test_single_pass():
    once = P(gen(1, 2, 3)).map(inc)
    assert_that(not once.restartable, "reported as single-pass through the chain")
    assert_that(once.to.list() == [2, 3, 4], "first pass")
    assert_that(once.to.list() == [], "exhausted afterwards")


@test("unshift and append report the restartability of their arguments")
def test_prepended_iterator_is_single_pass():
    prefixed = P([3, 4]).unshift(iter([1, 2]))
    assert_that(not prefixed.restartable, "an iterator prefix makes the seq single-pass")
    assert_that(prefixed.to.list() == [1, 2, 3, 4], "first pass sees the prefix")
    assert_that(prefixed.to.list() == [3, 4], "the prefix is spent afterwards")

    replayed = P([3, 4]).unshift([1, 2])
    assert_that(replayed.restartable, "a list prefix keeps it restartable")
    assert_that(replayed.to.list() == replayed.to.list() == [1, 2, 3, 4], "replayed")

    assert_that(not P([1]).append(iter([2])).restartable, "an iterator suffix makes the seq single-pass")
    assert_that(not P(gen(1)).append([2]).restartable, "the seq itself still counts")


@test("from_generator restarts by calling the generator again")
def test_from_generator():
    stream = from_generator(lambda: gen(1, 2))
    assert_that(stream.restartable, "a fresh generator per iteration")
    assert_that(stream.to.list() == [1, 2] and stream.to.list() == [1, 2], "replayed")


@test("seqs are lazy until consumed")
def test_seq_lazy():
    seen = []
    pipeline = P([1, 2, 3]).side_effect(seen.append).filter(gt(1))
    assert_that(seen == [], "nothing ran while building")
    assert_that(pipeline.to.list() == [2, 3], "filtered")
    assert_that(seen == [1, 2, 3], "side effect ran once per element")


# --- fluent chains ---

@test("fluent chains mirror the standalone combinators")
def test_fluent_chain():
    result = (
        naturals_seq()
        .filter(lambda n: n % 3 == 0)
        .map(lambda n: n * n)
        .limit(4)
        .to.list()
    )
    assert_that(result == [0, 9, 36, 81], "squares of multiples of three")
    assert_that(P([[1, [2]], [3]]).flatten(2).to.list() == [1, 2, 3], "flatten")
    assert_that(P('ab').enumerate(1).to.list() == [(1, 'a'), (2, 'b')], "enumerate")
    assert_that(P([1, 2, 3]).scanl(lambda acc, x: acc + x, 0).to.list() == [1, 3, 6], "scanl")
    assert_that(P([1, 2]).scanr(lambda x, acc: acc - x, 0).to.list() == [-1, -3], "scanr")
    assert_that(P([2]).unshift([1]).append([3]).to.list() == [1, 2, 3], "unshift and append")


@test("pipe hands the seq to an external function")
def test_pipe():
    def report(seq, title):
        return f"{title}: {seq.to.size()}"
    assert_that(P(sales).pipe(report, title='rows') == 'rows: 4', "custom terminal")


# --- reduce accessor ---

@test("reduce accessor folds and aggregates")
def test_reduce_accessor():
    units = P(sales).map(get('units'))
    assert_that(units.reduce.sum() == 24, "total units")
    assert_that(units.reduce.average() == 6, "mean units")
    assert_that(units.reduce.foldl(lambda acc, x: max(acc, x), 0) == 12, "foldl")
    assert_that(units.reduce.foldr(lambda x, acc: acc + [x], []) == [12, 4, 7, 1], "foldr")
    assert_that(P(sales).reduce.maximum(get('units'))['product'] == 'tea', "maximum by key")
    assert_that(P(sales).reduce.minimum(get('units'))['region'] == 'east', "minimum by key")
    assert_that(units.reduce.optimise(lt) == 1, "optimise with the identity key")
    assert_that(units.reduce.maximum() == 12, "default key is identity")


@test("reduce accessor searches")
def test_reduce_search():
    seq = P(sales)
    assert_that(seq.reduce.find(lambda s: s['units'] < 5)['product'] == 'coffee', "first small sale")
    assert_that(seq.reduce.find_index(lambda s: s['region'] == 'east') == 3, "index of east")
    assert_that(seq.reduce.every(lambda s: s['price'] > 0), "every price positive")
    assert_that(not seq.reduce.some(lambda s: s['units'] > 100), "no huge sale")
    assert_that(seq.reduce.early(lambda s: s['units'] > 100)['region'] == 'east', "early falls back to last")


@test("reduce.each returns the seq for chaining")
def test_reduce_each():
    seen = []
    seq = P([1, 2])
    assert_that(seq.reduce.each(seen.append) is seq, "same seq")
    assert_that(seen == [1, 2], "ran eagerly")


# --- terminal accessor ---

@test("terminal accessor materialises python collections")
def test_terminal_collections():
    seq = P(sales).map(get('product'))
    assert_that(seq.to.tuple() == ('tea', 'coffee', 'coffee', 'tea'), "tuple")
    assert_that(seq.to.set() == {'tea', 'coffee'}, "set")
    assert_that(seq.to.join('|') == 'tea|coffee|coffee|tea', "joined")
    assert_that(seq.to.size() == 4, "size")
    by_product = P(sales).to.dict(get('product'), get('units'))
    assert_that(by_product == {'tea': 1, 'coffee': 7}, "later keys win")
    assert_that(P(sales).to.dict(get('region'))['north']['product'] == 'coffee', "whole records as values")


@test("terminal accessor converts to numpy")
def test_terminal_numpy():
    arr = P(sales).map(get('units')).to.array()
    assert_that(isinstance(arr, np.ndarray), "numpy array")
    assert_that(np.array_equal(arr, np.array([12, 4, 7, 1])), "values in order")
    assert_that(arr.sum() == 24, "vectorised sum")


@test("terminal accessor converts to pandas")
def test_terminal_pandas():
    series = P(sales).map(get('price')).to.series()
    assert_that(isinstance(series, pd.Series), "pandas series")
    assert_that(series.tolist() == [2.5, 3.0, 3.0, 2.5], "values in order")

    frame = P(sales).filter(lambda s: s['region'] == 'north').to.frame()
    assert_that(isinstance(frame, pd.DataFrame), "pandas frame")
    assert_that(frame.shape == (2, 4), "two rows, four columns")
    assert_that(list(frame['product']) == ['tea', 'coffee'], "column values")


# --- generated data ---

@test("seeded schema streams replay the same records")
def test_generated_stream():
    stream = dgen.from_schema(customer_schema, seed=42).stream()
    first = stream.limit(5).to.list()
    second = stream.limit(5).to.list()
    assert_that(first == second, "same seed, same records")
    assert_that([c['id'] for c in first] == [100, 101, 102, 103, 104], "counter starts at 100")
    assert_that(all(c['tier'] in ('gold', 'silver', 'bronze') for c in first), "tiers from choices")


@test("generated records flow through a full pipeline")
def test_generated_pipeline():
    customers = dgen.from_schema(customer_schema, seed=3).take(25)
    tiers = customers.group.by(get('tier'))
    assert_that(sum(len(bucket) for bucket in tiers.values()) == 25, "every customer grouped")
    frame = customers.to.frame()
    assert_that(list(frame.columns) == ['id', 'name', 'tier'], "schema keys become columns")
    assert_that(customers.map(get('name')).reduce.every(lambda n: isinstance(n, str)), "names are text")


if __name__ == "__main__":
    suite.run(title="fpy seq test suite")
