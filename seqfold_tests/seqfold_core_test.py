from collections import namedtuple

import suite
from seqfold import S, from_range, empty, repeat, generate, Enumerable, OrderedEnumerable, Order

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

Planet = namedtuple('Planet', ['name', 'radius'])
neptune = Planet('Neptune', 24_622_000)
mars = Planet('Mars', 3_389_500)
jupiter = Planet('Jupiter', 69_911_000)

numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9]
is_even = lambda n: n % 2 == 0


# --- factories ---

@test("factories build eager enumerables")
def test_factories():
    assert_equal(from_range(3, 4).to.list(), [3, 4, 5, 6])
    assert_equal(repeat('x', 3).to.list(), ['x', 'x', 'x'])
    assert_equal(empty().to.list(), [])
    counter = iter(range(100))
    assert_equal(generate(lambda: next(counter), 3).to.list(), [0, 1, 2])


@test("from_iterable copies its source")
def test_from_iterable_copies():
    source = [1, 2, 3]
    wrapped = S(source)
    source.append(4)
    assert_equal(wrapped.to.list(), [1, 2, 3])
    assert_equal(len(wrapped), 3)


# --- map ---

@test("map transforms each element")
def test_map():
    assert_equal(S(["red", "amber", "green"]).map(lambda light: light + "!").to.list(),
                 ["red!", "amber!", "green!"])
    assert_equal(S([1, 2, 3]).map(str).to.list(), ["1", "2", "3"])


@test("map keeps the length")
def test_map_length():
    for data in ([], [0], numbers):
        assert_equal(len(S(data).map(lambda x: None)), len(data))


@test("map does not touch the input")
def test_map_no_mutation():
    source = S(numbers)
    source.map(lambda n: n * 10)
    assert_equal(source.to.list(), numbers)


# --- filter / reject ---

@test("filter keeps matching elements in order")
def test_filter():
    assert_equal(S(numbers).filter(is_even).to.list(), [2, 4, 6, 8])


@test("reject drops matching elements in order")
def test_reject():
    assert_equal(S(numbers).reject(is_even).to.list(), [1, 3, 5, 7, 9])


@test("filter and reject on empty input")
def test_filter_reject_empty():
    assert_equal(empty().filter(is_even).to.list(), [])
    assert_equal(empty().reject(is_even).to.list(), [])


# --- flat_map ---

@test("flat_map concatenates per-element results")
def test_flat_map():
    nested = S([[1, 2], [3, 4, 5], [], [6]])
    assert_equal(nested.flat_map(lambda x: x).to.list(), [1, 2, 3, 4, 5, 6])


@test("flat_map with string splitting")
def test_flat_map_split():
    words = S(['hello world', '', 'fold engine rocks']).flat_map(str.split).to.list()
    assert_equal(words, ['hello', 'world', 'fold', 'engine', 'rocks'])


# --- take / take_while ---

@test("take returns the leading elements")
def test_take():
    three = S(["Mercury", "Venus", "Earth"])
    assert_equal(three.take(2).to.list(), ["Mercury", "Venus"])
    assert_equal(three.take(10).to.list(), ["Mercury", "Venus", "Earth"])
    assert_equal(three.take(0).to.list(), [])
    assert_equal(three.take(-1).to.list(), [])


@test("take_while stops at the first failing element")
def test_take_while():
    assert_equal(S([1, 2, 3, 10, 1, 2]).take_while(lambda n: n < 5).to.list(), [1, 2, 3])
    assert_equal(S([9, 1]).take_while(lambda n: n < 5).to.list(), [])


@test("take_while never examines elements after the failure")
def test_take_while_short_circuit():
    checked = []
    def small(n):
        checked.append(n)
        return n < 3
    S([1, 2, 3, 4, 5]).take_while(small)
    assert_equal(checked, [1, 2, 3])


# --- concat ---

@test("concat appends the other sequence into a new list")
def test_concat():
    left_source = [1, 2]
    left = S(left_source)
    joined = left.concat([3, 4])
    assert_equal(joined.to.list(), [1, 2, 3, 4])
    assert_equal(left.to.list(), [1, 2], "left must be unchanged")
    assert_equal(left.concat(S([5])).to.list(), [1, 2, 5], "left can be reused after concat")
    assert_equal(empty().concat([]).to.list(), [])


# --- reverse ---

@test("reverse inverts index order and is an involution")
def test_reverse():
    planets = ["Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune"]
    expected = ["Neptune", "Uranus", "Saturn", "Jupiter", "Mars", "Earth", "Venus", "Mercury"]
    assert_equal(S(planets).reverse().to.list(), expected)
    assert_equal(S(planets).reverse().reverse().to.list(), planets)


@test("reverse of empty and single element input, source untouched")
def test_reverse_edges():
    assert_equal(empty().reverse().to.list(), [])
    assert_equal(S(['only']).reverse().to.list(), ['only'])
    source = S([1, 2, 3])
    reversed_copy = source.reverse()
    assert_that(isinstance(reversed_copy.to.list(), list), "reverse should materialize a list")
    assert_equal(source.to.list(), [1, 2, 3])


# --- sorting ---

@test("sort_by orders by key in both directions")
def test_sort_by():
    planets = S([neptune, mars, jupiter])
    assert_equal(planets.sort_by(lambda p: p.radius, Order.ASC).to.list(), [mars, neptune, jupiter])
    assert_equal(planets.sort_by(lambda p: p.radius, Order.DESC).to.list(), [jupiter, neptune, mars])
    assert_equal(planets.sort_by_descending(lambda p: p.radius).to.list(), [jupiter, neptune, mars])


@test("sort defaults to ascending and returns an ordered enumerable")
def test_sort_default():
    ordered = S([3, 1, 2]).sort()
    assert_that(isinstance(ordered, OrderedEnumerable), "sort should return an OrderedEnumerable")
    assert_that(isinstance(ordered, Enumerable), "ordered enumerables are enumerables")
    assert_equal(ordered.to.list(), [1, 2, 3])
    assert_equal(S([3, 1, 2]).sort(Order.DESC).to.list(), [3, 2, 1])


@test("sort is stable for equal keys in both directions")
def test_sort_stable():
    words = S(['bb', 'a', 'cc', 'd', 'ee'])
    assert_equal(words.sort_by(len).to.list(), ['a', 'd', 'bb', 'cc', 'ee'])
    assert_equal(words.sort_by(len, Order.DESC).to.list(), ['bb', 'cc', 'ee', 'a', 'd'])


@test("sort is idempotent and leaves the source alone")
def test_sort_idempotent():
    source = S([5, 3, 9, 1, 3])
    once = source.sort()
    assert_equal(once.sort().to.list(), once.to.list())
    assert_equal(source.to.list(), [5, 3, 9, 1, 3])


@test("then_by breaks ties of the primary key")
def test_then_by():
    people = S([('bob', 30), ('amy', 25), ('cat', 30), ('abe', 25)])
    by_age_then_name = people.sort_by(lambda p: p[1]).then_by(lambda p: p[0]).to.list()
    assert_equal(by_age_then_name, [('abe', 25), ('amy', 25), ('bob', 30), ('cat', 30)])
    by_age_then_name_desc = people.sort_by(lambda p: p[1]).then_by_descending(lambda p: p[0]).to.list()
    assert_equal(by_age_then_name_desc, [('amy', 25), ('abe', 25), ('cat', 30), ('bob', 30)])


@test("sort on empty input")
def test_sort_empty():
    assert_equal(empty().sort().to.list(), [])


# --- chaining ---

@test("operations chain into a pipeline")
def test_chaining():
    result = (from_range(1, 20)
              .filter(is_even)
              .map(lambda n: n * n)
              .sort(Order.DESC)
              .take(3)
              .to.list())
    assert_equal(result, [400, 324, 256])


@test("selector errors propagate and abort the operation")
def test_errors_propagate():
    assert_raises(ZeroDivisionError, S([1, 0]).map, lambda n: 1 / n)


if __name__ == "__main__":
    suite.main("seqfold core operations test suite")
