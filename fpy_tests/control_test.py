import suite
from fpy import (
    ifelse, when, maybeor, maybe, nothing, success, failure, trycatch, valmap, cond,
    attempt, reject, assert_, print_, Rejected, FpyError, K, gt, lt, is_, mult, pipe,
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


def inc(x):
    return x + 1


# --- branching ---

@test("ifelse picks a branch per value")
def test_ifelse():
    sign = ifelse(gt(0), K('positive'), K('not positive'))
    assert_that(sign(1) == 'positive' and sign(0) == 'not positive', "both branches")


@test("when passes values through unless the condition holds")
def test_when():
    double_positive = when(gt(0), mult(2))
    assert_that(double_positive(3) == 6 and double_positive(-1) == -1, "conditional transform")


@test("maybe family branches on None")
def test_maybe_family():
    assert_that(maybe(inc)(1) == 2 and maybe(inc)(None) is None, "maybe skips None")
    assert_that(maybeor(inc, K('missing'))(None) == 'missing', "maybeor has a fallback")
    assert_that(maybeor(inc, K('missing'))(0) == 1, "zero is defined")
    assert_that(nothing(K('default'))(None) == 'default', "nothing fills in None")
    assert_that(nothing(K('default'))(5) == 5, "nothing leaves values alone")


@test("valmap looks up alternating pairs")
def test_valmap():
    colours = valmap('r', 'red', 'g', 'green')
    assert_that(colours('g') == 'green', "mapped")
    assert_that(colours('x') == 'x', "unmatched values pass through")
    with_default = valmap('r', 'red', 'unknown')
    assert_that(with_default('x') == 'unknown', "trailing argument is the fallback")


@test("cond dispatches to the first matching clause")
def test_cond():
    describe = cond(is_(0), K('none'), lt(3), K('few'), K('many'))
    assert_that(describe(0) == 'none', "first clause")
    assert_that(describe(2) == 'few', "second clause")
    assert_that(describe(10) == 'many', "fallback handler")
    assert_that(cond(is_(0), K('none'))(5) == 5, "no fallback passes through")


# --- failures as values ---

@test("attempt turns raised exceptions into values")
def test_attempt():
    assert_that(attempt(lambda: 1 + 1) == 2, "successful calls return their value")
    outcome = attempt(lambda: 1 / 0)
    assert_that(isinstance(outcome, ZeroDivisionError), "failures come back as exceptions")


@test("success, failure and trycatch branch on failure values")
def test_success_failure():
    bad = attempt(lambda: {}['missing'])
    assert_that(success(inc)(1) == 2 and success(inc)(bad) is bad, "success skips failures")
    assert_that(failure(K('recovered'))(bad) == 'recovered', "failure handles failures")
    assert_that(failure(K('recovered'))(1) == 1, "failure skips successes")
    handle = trycatch(inc, lambda e: type(e).__name__)
    assert_that(handle(1) == 2 and handle(bad) == 'KeyError', "trycatch picks a branch")


@test("reject raises exceptions built by the message function")
def test_reject_exception():
    non_negative = reject(lt(0), lambda x: ValueError(f"{x} is negative"))
    assert_that(non_negative(5) == 5, "valid values pass")
    with assert_raises(ValueError) as caught:
        non_negative(-2)
    assert_that(str(caught['error']) == "-2 is negative", "message built from the value")


@test("reject wraps non-exception messages in Rejected")
def test_reject_wraps():
    with assert_raises(Rejected) as caught:
        reject(is_(''), K('empty name'))('')
    assert_that(caught['error'].value == 'empty name', "value kept on the error")
    assert_that(isinstance(caught['error'], FpyError), "part of the fpy hierarchy")


@test("reject chains as a validation pipeline")
def test_reject_pipeline():
    checked = pipe(4, reject(lt(0), K('negative')), reject(gt(10), K('too big')), inc)
    assert_that(checked == 5, "valid value flows through")


@test("assert_ returns the condition or raises")
def test_assert():
    assert_that(assert_('ok') == 'ok', "truthy conditions come back")
    with assert_raises(AssertionError) as caught:
        assert_(0, "zero is falsy")
    assert_that(str(caught['error']) == "zero is falsy", "custom message")


@test("print_ passes its argument through")
def test_print():
    record = {'a': 1}
    assert_that(print_(record) is record, "same object returned")


if __name__ == "__main__":
    suite.run(title="fpy control flow test suite")
