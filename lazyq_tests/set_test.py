import suite
from dgen import from_schema
from instrumented import CountingSource
from lazyq import Q, empty

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

visit_schema = {
    'user': {'_gen': 'choice', 'from': ['ann', 'ben', 'cat', 'dan']},
    'page': 'uri_path'
}

people = [("Alice", 30), ("Bob", 25), ("Charlie", 35), ("Alice", 40), ("Eve", 28)]


@test("distinct keeps first-seen order")
def test_distinct_order():
    assert_equal(Q([3, 1, 3, 2, 1, 4]).set.distinct().to.list(), [3, 1, 2, 4])


@test("distinct is idempotent")
def test_distinct_idempotent():
    once = Q([5, 5, 1, 2, 1, 9]).set.distinct()
    assert_equal(once.set.distinct().to.list(), once.to.list())


@test("distinct uses value equality")
def test_distinct_value_equality():
    rows = [(1, 'a'), (1, 'a'), (2, 'b')]
    assert_equal(Q(rows).set.distinct().to.list(), [(1, 'a'), (2, 'b')])
    # 1 and 1.0 are equal values
    assert_equal(Q([1, 1.0, 2]).set.distinct().to.list(), [1, 2])


@test("distinct_by keeps the whole first element per key")
def test_distinct_by_people():
    result = Q(people).set.distinct_by(lambda p: p[0]).to.list()
    assert_equal(result, [("Alice", 30), ("Bob", 25), ("Charlie", 35), ("Eve", 28)])


@test("distinct with key selector equals distinct_by")
def test_distinct_with_selector():
    assert_equal(Q(people).set.distinct(lambda p: p[0]).to.list(),
                 Q(people).set.distinct_by(lambda p: p[0]).to.list())


@test("distinct_by over generated visits gives one visit per user")
def test_distinct_by_generated():
    visits = from_schema(visit_schema, seed=3).take(50)
    firsts = visits.set.distinct_by(lambda v: v['user']).to.list()
    users = [v['user'] for v in firsts]
    assert_equal(len(users), len(set(users)))
    for first in firsts:
        assert_that(visits.to.first(lambda v: v['user'] == first['user']) is first, "first occurrence kept")


@test("distinct streams without reading ahead")
def test_distinct_streams():
    source = CountingSource([1, 1, 2, 3])
    iterator = iter(Q(source).set.distinct())
    assert_equal(next(iterator), 1)
    assert_equal(next(iterator), 2)
    assert_equal(source.reads, 3)


@test("distinct of empty is empty")
def test_distinct_empty():
    assert_equal(empty().set.distinct().to.list(), [])


@test("union, intersect and except_ keep first-seen order")
def test_set_operators():
    left = Q([1, 2, 2, 3, 4])
    assert_equal(left.set.union([4, 5, 1, 6]).to.list(), [1, 2, 3, 4, 5, 6])
    assert_equal(left.set.intersect([4, 2, 9]).to.list(), [2, 4])
    assert_equal(left.set.except_([2, 9]).to.list(), [1, 3, 4])


if __name__ == "__main__":
    suite.run(title="lazyq set operations test suite")
