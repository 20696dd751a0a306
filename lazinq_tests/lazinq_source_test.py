import suite
from dgen import from_schema
from lazinq import (
    as_linq, from_iterable, from_range, repeat, empty, generate, P,
    Enumerable, to_iterable, iterate_iterator
)

person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 100}),
    'name': 'word',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
}


class Countdown:
    """a bare single-step iterator: __next__ and __iter__, nothing else"""

    def __init__(self, start):
        self.current = start

    def __iter__(self):
        return self

    def __next__(self):
        if self.current <= 0:
            raise StopIteration
        self.current -= 1
        return self.current + 1


# --- source adapter ---

@suite.test("to_iterable returns iterables unchanged")
def test_to_iterable_passthrough():
    data = [1, 2, 3]
    suite.assert_that(to_iterable(data) is data, "a list should come back as the same object")


@suite.test("to_iterable calls factories returning iterables")
def test_to_iterable_iterable_factory():
    result = to_iterable(lambda: [4, 5])
    suite.assert_that(list(result) == [4, 5], f"factory result not used: {result}")


@suite.test("to_iterable drains factories returning iterators")
def test_to_iterable_iterator_factory():
    result = to_iterable(lambda: Countdown(3))
    suite.assert_that(list(result) == [3, 2, 1], "iterator should be advanced until exhaustion")


@suite.test("to_iterable invokes the factory once per call")
def test_to_iterable_factory_calls():
    calls = []
    def factory():
        calls.append(1)
        return [1]
    to_iterable(factory)
    to_iterable(factory)
    suite.assert_that(len(calls) == 2, f"factory should run for every consumption, ran {len(calls)}")


@suite.test("to_iterable rejects values that are neither iterable nor callable")
def test_to_iterable_rejects():
    with suite.raises(TypeError, "an int is not a producer"):
        to_iterable(42)


@suite.test("iterate_iterator stops at exhaustion")
def test_iterate_iterator():
    suite.assert_that(list(iterate_iterator(iter([]))) == [], "empty iterator yields nothing")
    suite.assert_that(list(iterate_iterator(Countdown(2))) == [2, 1], "should yield every step")


# --- construction ---

@suite.test("as_linq wraps all three producer shapes")
def test_as_linq_shapes():
    suite.assert_that(as_linq([1, 2]).to_list() == [1, 2], "plain iterable")
    suite.assert_that(as_linq(lambda: iter([1, 2])).to_list() == [1, 2], "iterator factory")
    suite.assert_that(as_linq(lambda: (1, 2)).to_list() == [1, 2], "iterable factory")
    suite.assert_that(isinstance(as_linq([]), Enumerable), "should build an enumerable")


@suite.test("aliases point at as_linq")
def test_aliases():
    suite.assert_that(P is as_linq and from_iterable is as_linq, "P and from_iterable should be as_linq")


@suite.test("enumerables can wrap other enumerables")
def test_nested_enumerable():
    inner = as_linq([1, 2, 3]).where(lambda x: x > 1)
    suite.assert_that(as_linq(inner).to_list() == [2, 3], "wrapping should delegate to the inner pipeline")


@suite.test("factory helpers produce the expected sequences")
def test_factory_helpers():
    suite.assert_that(from_range(10, 3).to_list() == [10, 11, 12], "from_range")
    suite.assert_that(repeat('a', 3).to_list() == ['a', 'a', 'a'], "repeat")
    suite.assert_that(empty().to_list() == [], "empty")
    suite.assert_that(generate(lambda: 7, 2).to_list() == [7, 7], "generate")


@suite.test("endless producers are safe behind take")
def test_infinite_sources():
    suite.assert_that(repeat(1).take(4).to_list() == [1, 1, 1, 1], "endless repeat")
    counter = iter(range(1000000))
    suite.assert_that(generate(lambda: next(counter)).take(3).to_list() == [0, 1, 2], "endless generate")


# --- laziness and re-iteration ---

@suite.test("building a pipeline does not touch the source")
def test_deferred_execution():
    pulled = []
    def source():
        for i in range(5):
            pulled.append(i)
            yield i
    pipeline = as_linq(source).where(lambda x: x % 2 == 0).select(lambda x: x * 10)
    suite.assert_that(pulled == [], "no element should be pulled before consumption")
    suite.assert_that(pipeline.to_list() == [0, 20, 40], "pipeline result")
    suite.assert_that(pulled == [0, 1, 2, 3, 4], "consumption pulls every element once")


@suite.test("elements stream one at a time")
def test_streaming():
    log = []
    def source():
        for i in range(3):
            log.append(f"produce {i}")
            yield i
    for item in as_linq(source).select(lambda x: x + 1):
        log.append(f"consume {item}")
    expected = ['produce 0', 'consume 1', 'produce 1', 'consume 2', 'produce 2', 'consume 3']
    suite.assert_that(log == expected, f"production and consumption should interleave: {log}")


@suite.test("re-iterating a pipeline re-runs the factory")
def test_reiteration():
    pipeline = as_linq(lambda: iter([1, 2, 3])).select(lambda x: x * 2)
    suite.assert_that(pipeline.to_list() == [2, 4, 6], "first pass")
    suite.assert_that(pipeline.to_list() == [2, 4, 6], "second pass sees a fresh iterator")


@suite.test("a shared iterator is only meaningful once")
def test_single_pass_source():
    shared = iter([1, 2, 3])
    pipeline = as_linq(lambda: shared)
    suite.assert_that(pipeline.to_list() == [1, 2, 3], "first pass drains the iterator")
    suite.assert_that(pipeline.to_list() == [], "second pass finds it exhausted")


@suite.test("generated records flow through a pipeline")
def test_generated_records():
    people = from_schema(person_schema, seed=42)
    adults = people.where(lambda p: p['age'] >= 18).take(10).to_list()
    suite.assert_that(len(adults) == 10, f"should take 10 records from an endless stream: {len(adults)}")
    suite.assert_that(all('name' in p for p in adults), "every record should have a name")


if __name__ == "__main__":
    suite.main("lazinq source and construction test suite")
