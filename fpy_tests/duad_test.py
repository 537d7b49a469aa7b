import suite
from fpy import Duad, P, gt, map_

test = suite.test
assert_that = suite.assert_that


def inc(x):
    return x + 1


@test("a duad is an ordered pair")
def test_duad_pair():
    pair = Duad('a', 1)
    key, value = pair
    assert_that(pair.first == 'a' and pair.second == 1, "named slots")
    assert_that((key, value) == ('a', 1), "unpacks like a tuple")
    assert_that(pair == ('a', 1), "compares like a tuple")


@test("prefix and suffix fix one slot")
def test_prefix_suffix():
    assert_that(Duad.prefix('k')(1) == Duad('k', 1), "fixed first slot")
    assert_that(Duad.suffix('v')(1) == Duad(1, 'v'), "fixed second slot")
    tagged = list(map_(Duad.prefix('row'), [1, 2]))
    assert_that(tagged == [('row', 1), ('row', 2)], "pairs a whole sequence")


@test("slot maps rebuild pairs over mapping entries")
def test_slot_maps():
    prices = {'apple': 1, 'melon': 3}
    assert_that(list(Duad.map_first(str.upper, prices.items())) == [('APPLE', 1), ('MELON', 3)], "first slot mapped")
    assert_that(list(Duad.map_second(inc, prices.items())) == [('apple', 2), ('melon', 4)], "second slot mapped")


@test("slot filters keep whole pairs")
def test_slot_filters():
    entries = [(1, 'a'), (2, 'b'), (3, 'a')]
    assert_that(list(Duad.filter_first(gt(1), entries)) == [(2, 'b'), (3, 'a')], "filter on first")
    assert_that(list(Duad.filter_second(lambda s: s == 'a', entries)) == [(1, 'a'), (3, 'a')], "filter on second")


@test("combine feeds both slots to a binary function")
def test_combine():
    assert_that(Duad.combine(lambda a, b: a * b)(Duad(3, 4)) == 12, "3 * 4")


@test("is_ compares slots strictly")
def test_is():
    assert_that(Duad.is_(Duad(1, 'a'))((1, 'a')), "equal scalars")
    assert_that(not Duad.is_((1, [1]))((1, [1])), "distinct lists are not the same")


@test("flip swaps the slots")
def test_flip():
    assert_that(Duad.flip(('k', 'v')) == Duad('v', 'k'), "swapped")
    inverted = dict(P({'a': 1, 'b': 2}.items()).map(Duad.flip).to.list())
    assert_that(inverted == {1: 'a', 2: 'b'}, "inverts a mapping through a seq")


if __name__ == "__main__":
    suite.run(title="fpy duad test suite")
